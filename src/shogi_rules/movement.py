"""Pseudo-legal move generation.

駒ごとの擬似合法手を生成する。
王手放置・打ち駒の制約・打ち歩詰めはここでは判定しない（rules モジュールで
フィルタする）。

各駒の方向は directions.pattern_for() から取り出し、side に応じて orient()
で向きを合わせてから使う。1つの駒の中では スライド → 1歩 → 桂馬ジャンプ の順に
生成する（順序は決定的）。
"""

from __future__ import annotations

from collections.abc import Iterable

from shogi_rules.board import Board
from shogi_rules.directions import Vector, pattern_for
from shogi_rules.moves import BoardMove, DropMove
from shogi_rules.types import PieceType, Side, Square


def orient(vector: Vector, side: Side) -> Vector:
    """先手基準のベクトルを side の向きに変換する（y のみ反転）。"""
    dx, dy = vector
    return dx, dy * side.forward


def pseudo_legal_moves_for_square(board: Board, x: int, y: int) -> list[BoardMove]:
    """Generate pseudo-legal moves for the piece on (x, y).

    マスが空、または盤外なら空リストを返す。
    """
    if not board.in_bounds(x, y):
        return []
    piece = board.piece_at(x, y)
    if piece is None:
        return []

    side = piece.side
    pattern = pattern_for(piece.piece_type)
    source = Square(x, y)
    moves: list[BoardMove] = []

    # Slide moves: 味方の手前で止まり、敵駒は取って止まる
    for vector in pattern.slides:
        dx, dy = orient(vector, side)
        nx, ny = x + dx, y + dy
        while board.in_bounds(nx, ny):
            target = board.piece_at(nx, ny)
            if target is not None and target.side == side:
                break
            capture = target is not None
            moves.append(BoardMove(source, Square(nx, ny), piece.piece_type, capture))
            if capture:
                break  # Captured, stop sliding
            nx, ny = nx + dx, ny + dy

    # Step moves and knight jumps share the same occupancy rule
    for vector in (*pattern.steps, *pattern.jumps):
        dx, dy = orient(vector, side)
        nx, ny = x + dx, y + dy
        if not board.in_bounds(nx, ny):
            continue
        target = board.piece_at(nx, ny)
        if target is not None and target.side == side:
            continue
        moves.append(
            BoardMove(source, Square(nx, ny), piece.piece_type, target is not None)
        )

    return moves


def pseudo_legal_moves(board: Board, side: Side) -> list[BoardMove]:
    """Generate pseudo-legal moves for every piece of side.

    盤面を行優先（y 昇順 → x 昇順）で走査して連結する。この順序は外部から
    観測される契約（テストや再生の再現性に使われる）。
    """
    moves: list[BoardMove] = []
    for square, piece in board.occupied():
        if piece.side == side:
            moves.extend(pseudo_legal_moves_for_square(board, square.x, square.y))
    return moves


def drop_candidates(board: Board, piece_types: Iterable[PieceType]) -> list[DropMove]:
    """Generate unfiltered drop moves onto every empty square.

    piece_types は呼び出し側が管理する持ち駒の内容（重複可）。駒種ごとに
    （最初に現れた順で）空きマスを行優先で列挙する。二歩や行き所のない駒の
    制約は rules.filter_illegal_moves() で判定する。
    """
    unique_types = list(dict.fromkeys(piece_types))
    empty_squares = [
        Square(x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.is_empty(x, y)
    ]
    return [DropMove(square, pt) for pt in unique_types for square in empty_squares]
