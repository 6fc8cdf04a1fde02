"""Legality filter for shogi moves.

擬似合法手を本当の合法手に絞り込む。判定する反則:
- 打ち駒の制約: 駒のあるマス、行き所のない駒、二歩、王将打ち
- 王手放置（自玉に王手がかかったままになる手）
- 打ち歩詰め（歩を打って相手玉を詰ませる手）

ピンの検出などの差分的な利き管理は行わず、仮の手を適用した盤面で毎回
王手判定をやり直す。入力の盤面は変更せず、作業用のコピーだけを書き換える。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum, unique

from shogi_rules.board import (
    Board,
    Piece,
    has_unpromoted_pawn_on_file,
    is_last_rank,
    is_last_two_ranks,
    opposite,
)
from shogi_rules.movement import drop_candidates, pseudo_legal_moves
from shogi_rules.moves import BoardMove, DropMove, Move
from shogi_rules.types import PROMOTION_MAP, PieceType, Side, Square

_LOGGER = logging.getLogger(__name__)


class InvalidMoveError(ValueError):
    """Raised when a caller passes a malformed move (API misuse, not a rule violation)."""


@unique
class DropViolation(StrEnum):
    """Reasons a drop is rejected by validate_drop_constraints()."""

    OCCUPIED = "occupied"
    LAST_RANK = "drop_last_rank"
    LAST_TWO_RANKS = "drop_last_two_ranks"
    NIFU = "nifu"
    KING_FORBIDDEN = "drop_king_forbidden"


@dataclass(frozen=True)
class DropCheck:
    """Result of a drop validation: ok, or the first violated constraint."""

    ok: bool
    reason: DropViolation | None = None


_DROP_OK = DropCheck(ok=True)


def validate_drop_constraints(board: Board, move: Move, side: Side) -> DropCheck:
    """Validate drop-specific placement rules.

    盤上の手は常に ok。打つ手は次の順で最初に違反した制約を返す:
    占有 → 歩・香の最終段 → 桂の最終2段 → 二歩 → 王将打ち。

    Raises:
        InvalidMoveError: 打つ先が盤外の場合。
    """
    if not isinstance(move, DropMove):
        return _DROP_OK

    _require_in_bounds(board, move.to, "destination")
    x, y = move.to
    pt = move.piece

    if not board.is_empty(x, y):
        return DropCheck(ok=False, reason=DropViolation.OCCUPIED)

    # 行き所のない駒
    if pt in (PieceType.PAWN, PieceType.LANCE) and is_last_rank(y, side, board.height):
        return DropCheck(ok=False, reason=DropViolation.LAST_RANK)
    if pt == PieceType.KNIGHT and is_last_two_ranks(y, side, board.height):
        return DropCheck(ok=False, reason=DropViolation.LAST_TWO_RANKS)

    # 二歩
    if pt == PieceType.PAWN and has_unpromoted_pawn_on_file(board, side, x):
        return DropCheck(ok=False, reason=DropViolation.NIFU)

    # 王将は持ち駒にならない
    if pt == PieceType.KING:
        return DropCheck(ok=False, reason=DropViolation.KING_FORBIDDEN)

    return _DROP_OK


def apply_move(board: Board, move: Move, side: Side) -> Board:
    """Apply a move and return a new board; the input board is untouched.

    打つ手は移動先に (side, 駒種) を置く。盤上の手は移動元を空にし、
    移動先に元の駒（promote_to があれば成り駒）を置く。取った駒の持ち駒
    管理は呼び出し側の責任。

    Raises:
        InvalidMoveError: 移動元の指定がない・移動元が空・盤外のマス・
            成れない駒種への成りなど、呼び出し側の契約違反。
    """
    if isinstance(move, DropMove):
        _require_in_bounds(board, move.to, "destination")
        return board.set_piece(move.to.x, move.to.y, Piece(side, move.piece))

    if not isinstance(move, BoardMove):
        msg = f"Unsupported move object: {move!r}"
        raise InvalidMoveError(msg)
    if move.source is None:
        raise InvalidMoveError("source is required for board moves")

    _require_in_bounds(board, move.source, "source")
    _require_in_bounds(board, move.to, "destination")

    moving = board.piece_at(move.source.x, move.source.y)
    if moving is None:
        msg = f"No piece at source square {tuple(move.source)}"
        raise InvalidMoveError(msg)

    final_type = moving.piece_type
    if move.promote_to is not None:
        # 成れるのは PROMOTION_MAP にある駒だけで、成り先も決まっている
        if move.promote_to != PROMOTION_MAP.get(moving.piece_type):
            msg = f"{moving.piece_type.name} cannot promote to {move.promote_to.name}"
            raise InvalidMoveError(msg)
        final_type = move.promote_to

    return board.set_pieces(
        [
            (move.source.x, move.source.y, None),
            (move.to.x, move.to.y, Piece(moving.side, final_type)),
        ]
    )


def _require_in_bounds(board: Board, square: Square, label: str) -> None:
    if not board.in_bounds(square.x, square.y):
        msg = (
            f"{label} square {tuple(square)} is outside the "
            f"{board.width}x{board.height} board"
        )
        raise InvalidMoveError(msg)


def find_king(board: Board, side: Side) -> Square | None:
    """side の王将のマスを返す。王将がなければ None。"""
    for square, piece in board.occupied():
        if piece.side == side and piece.piece_type == PieceType.KING:
            return square
    return None


def in_check(board: Board, side: Side) -> bool:
    """Check if side's king is attacked by any opponent pseudo-legal move.

    王将がいない局面（不正な局面）は安全側に倒して王手とみなす。
    """
    king = find_king(board, side)
    if king is None:
        _LOGGER.debug("No %s king on board; treating as in check", side.name)
        return True
    return any(move.to == king for move in pseudo_legal_moves(board, opposite(side)))


def is_pawn_drop_checkmate(board_after_drop: Board, attacker: Side) -> bool:
    """Whether a pawn drop has left the defender checkmated (打ち歩詰め).

    防御側が王手されていて、かつ防御側のどの擬似合法手を適用しても王手が
    解消されない場合に True。玉の逃げ・歩を取る・合い駒のすべてを含む。
    """
    defender = opposite(attacker)
    if not in_check(board_after_drop, defender):
        return False

    for response in pseudo_legal_moves(board_after_drop, defender):
        after = apply_move(board_after_drop, response, defender)
        if not in_check(after, defender):
            return False
    return True


def filter_illegal_moves(board: Board, moves: Iterable[Move], side: Side) -> list[Move]:
    """Reduce candidate moves to the legal ones, preserving their order.

    各候補について:
    1. 打つ手なら打ち駒の制約を検査
    2. 仮に適用して自玉が王手なら除外（ピンもここで自然に除外される）
    3. 歩を打つ手なら打ち歩詰めを除外
    """
    legal: list[Move] = []
    for move in moves:
        if isinstance(move, DropMove):
            check = validate_drop_constraints(board, move, side)
            if not check.ok:
                _LOGGER.debug("Rejected drop %s: %s", move, check.reason)
                continue

        after = apply_move(board, move, side)
        if in_check(after, side):
            _LOGGER.debug("Rejected %s: leaves %s king in check", move, side.name)
            continue

        if isinstance(move, DropMove) and move.piece == PieceType.PAWN:
            if is_pawn_drop_checkmate(after, side):
                _LOGGER.debug("Rejected %s: pawn drop checkmate", move)
                continue

        legal.append(move)
    return legal


def legal_moves(
    board: Board,
    side: Side,
    hand: Sequence[PieceType] = (),
) -> list[Move]:
    """Generate all legal moves of side.

    盤上の擬似合法手と、hand（呼び出し側が管理する持ち駒）から作った打つ手を
    filter_illegal_moves() で絞り込む。
    """
    candidates: list[Move] = [*pseudo_legal_moves(board, side), *drop_candidates(board, hand)]
    return filter_illegal_moves(board, candidates, side)


def is_checkmate(
    board: Board,
    side: Side,
    hand: Sequence[PieceType] = (),
) -> bool:
    """side が詰んでいれば True（王手されていて合法手がない）。"""
    return in_check(board, side) and not legal_moves(board, side, hand)
