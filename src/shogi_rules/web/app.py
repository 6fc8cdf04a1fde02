"""FastAPI application exposing the shogi rules core over JSON.

将棋ルールエンジンを JSON で呼び出すための REST API。
盤面は毎回リクエストに含めて送る（サーバは状態を持たない）。

エンドポイント（すべて POST）:
  /api/pseudo-legal-moves — 擬似合法手（盤全体 or 指定マス）
  /api/legal-moves        — 合法手（候補手のフィルタ or 全生成）
  /api/in-check           — 王手判定
  /api/validate-drop      — 打つ手の制約チェック
  /api/apply-move         — 手を適用した新しい盤面
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from shogi_rules.board import Board
from shogi_rules.movement import pseudo_legal_moves, pseudo_legal_moves_for_square
from shogi_rules.moves import BoardMove, DropMove, Move
from shogi_rules.rules import (
    apply_move,
    filter_illegal_moves,
    in_check,
    legal_moves,
    validate_drop_constraints,
)
from shogi_rules.types import COLS, HAND_PIECE_TYPES, ROWS, PieceType, Side, Square
from shogi_rules.web.config import WebConfig

_LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Shogi Rules")


class SquareModel(BaseModel):
    x: int
    y: int


class PieceModel(BaseModel):
    """盤上の駒。side / piece は列挙名（"SENTE", "PAWN" など）。"""

    x: int
    y: int
    side: str
    piece: str


class BoardModel(BaseModel):
    """盤面のスキーマ。駒のあるマスだけを列挙する。"""

    width: int = COLS
    height: int = ROWS
    pieces: list[PieceModel] = []


class MoveModel(BaseModel):
    """手のスキーマ。kind="drop" のとき source は null。"""

    kind: Literal["board", "drop"]
    source: SquareModel | None = None
    to: SquareModel
    piece: str
    capture: bool = False
    promote_to: str | None = None


class PositionRequest(BaseModel):
    board: BoardModel
    side: str


class PseudoLegalRequest(PositionRequest):
    square: SquareModel | None = None  # 指定があればそのマスの駒だけ


class LegalMovesRequest(PositionRequest):
    hand: list[str] = []  # 打つ手の候補にする持ち駒
    candidates: list[MoveModel] | None = None  # 指定があればこの手だけをフィルタ


class MoveRequest(PositionRequest):
    move: MoveModel


def _parse_side(name: str) -> Side:
    try:
        return Side[name]
    except KeyError:
        raise HTTPException(status_code=400, detail=f"Unknown side: {name}") from None


def _parse_piece_type(name: str) -> PieceType:
    try:
        return PieceType[name]
    except KeyError:
        raise HTTPException(status_code=400, detail=f"Unknown piece type: {name}") from None


def _parse_hand(names: list[str]) -> list[PieceType]:
    """持ち駒名を解析する。王将や成り駒は持ち駒にならないので 400。"""
    hand = [_parse_piece_type(name) for name in names]
    for pt in hand:
        if pt not in HAND_PIECE_TYPES:
            raise HTTPException(status_code=400, detail=f"{pt.name} cannot be held in hand")
    return hand


def _to_board(model: BoardModel) -> Board:
    pieces = [
        (p.x, p.y, _parse_side(p.side), _parse_piece_type(p.piece))
        for p in model.pieces
    ]
    try:
        return Board.from_pieces(pieces, width=model.width, height=model.height)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _to_move(model: MoveModel) -> Move:
    to = Square(model.to.x, model.to.y)
    piece = _parse_piece_type(model.piece)
    if model.kind == "drop":
        return DropMove(to, piece)
    source = Square(model.source.x, model.source.y) if model.source else None
    promote_to = _parse_piece_type(model.promote_to) if model.promote_to else None
    return BoardMove(source, to, piece, model.capture, promote_to)


def _move_to_dict(move: Move) -> dict[str, Any]:
    """手を JSON 形式（辞書）に変換する。"""
    if isinstance(move, DropMove):
        return {
            "kind": "drop",
            "source": None,
            "to": {"x": move.to.x, "y": move.to.y},
            "piece": move.piece.name,
            "capture": False,
            "promote_to": None,
        }
    return {
        "kind": "board",
        "source": {"x": move.source.x, "y": move.source.y} if move.source else None,
        "to": {"x": move.to.x, "y": move.to.y},
        "piece": move.piece.name,
        "capture": move.capture,
        "promote_to": move.promote_to.name if move.promote_to is not None else None,
    }


def _board_to_dict(board: Board) -> dict[str, Any]:
    return {
        "width": board.width,
        "height": board.height,
        "pieces": [
            {"x": sq.x, "y": sq.y, "side": p.side.name, "piece": p.piece_type.name}
            for sq, p in board.occupied()
        ],
    }


@app.post("/api/pseudo-legal-moves")
def api_pseudo_legal_moves(req: PseudoLegalRequest) -> dict[str, Any]:
    """擬似合法手を返す。square を指定した場合はその駒の手だけ。"""
    board = _to_board(req.board)
    side = _parse_side(req.side)
    if req.square is None:
        moves = pseudo_legal_moves(board, side)
    else:
        if not board.in_bounds(req.square.x, req.square.y):
            raise HTTPException(status_code=400, detail="Square is outside the board")
        moves = pseudo_legal_moves_for_square(board, req.square.x, req.square.y)
    return {"moves": [_move_to_dict(m) for m in moves]}


@app.post("/api/legal-moves")
def api_legal_moves(req: LegalMovesRequest) -> dict[str, Any]:
    """合法手を返す。

    candidates があればそれをフィルタし、なければ盤上の手と hand からの
    打つ手をすべて生成してフィルタする。
    """
    board = _to_board(req.board)
    side = _parse_side(req.side)
    try:
        if req.candidates is not None:
            moves = filter_illegal_moves(board, [_to_move(m) for m in req.candidates], side)
        else:
            hand = _parse_hand(req.hand)
            moves = legal_moves(board, side, hand)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"moves": [_move_to_dict(m) for m in moves]}


@app.post("/api/in-check")
def api_in_check(req: PositionRequest) -> dict[str, Any]:
    board = _to_board(req.board)
    return {"in_check": in_check(board, _parse_side(req.side))}


@app.post("/api/validate-drop")
def api_validate_drop(req: MoveRequest) -> dict[str, Any]:
    board = _to_board(req.board)
    try:
        result = validate_drop_constraints(board, _to_move(req.move), _parse_side(req.side))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"ok": result.ok, "reason": str(result.reason) if result.reason else None}


@app.post("/api/apply-move")
def api_apply_move(req: MoveRequest) -> dict[str, Any]:
    """手を適用した新しい盤面を返す。不正な手（移動元が空など）は 400。"""
    board = _to_board(req.board)
    try:
        after = apply_move(board, _to_move(req.move), _parse_side(req.side))
    except ValueError as e:
        _LOGGER.info("Rejected malformed move: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"board": _board_to_dict(after)}


def main() -> None:
    """Run the web server.

    `uv run shogi-rules-web` または `python -m shogi_rules.web.app` で起動する。
    """
    import uvicorn

    config = WebConfig.from_env()
    logging.basicConfig(level=config.log_level)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
