"""Direction tables for every piece type.

駒ごとの動きの定義。ベクトルはすべて「前 = +y」の向き（先手視点）で一度だけ
定義し、後手の場合は生成時に y を反転して使う（movement.orient）。

- steps:  1マスだけ進める方向（味方の駒でのみ塞がれる）
- slides: 盤端・味方駒の手前・敵駒（取って停止）まで何マスでも進める方向
- jumps:  間の駒を飛び越える固定オフセット（桂馬専用）
"""

from __future__ import annotations

from dataclasses import dataclass

from shogi_rules.types import PieceType

Vector = tuple[int, int]

# 縦横・斜めの単位ベクトル（dx, dy）
LEFT: Vector = (-1, 0)
UP: Vector = (0, 1)
RIGHT: Vector = (1, 0)
DOWN: Vector = (0, -1)
UP_LEFT: Vector = (-1, 1)
UP_RIGHT: Vector = (1, 1)
DOWN_LEFT: Vector = (-1, -1)
DOWN_RIGHT: Vector = (1, -1)

ORTHOGONALS: tuple[Vector, ...] = (LEFT, UP, RIGHT, DOWN)
DIAGONALS: tuple[Vector, ...] = (UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)

# 金: 斜め後ろ以外の6方向
GOLD_STEPS: tuple[Vector, ...] = (UP_LEFT, UP, UP_RIGHT, LEFT, DOWN, RIGHT)
# 銀: 前3方向 + 斜め後ろ2方向
SILVER_STEPS: tuple[Vector, ...] = (UP_LEFT, UP, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)
# 王: 全8方向
KING_STEPS: tuple[Vector, ...] = (
    UP_LEFT, UP, UP_RIGHT, LEFT, RIGHT, DOWN_LEFT, DOWN, DOWN_RIGHT,
)
# 桂: 2マス前 + 左右1マス
KNIGHT_JUMPS: tuple[Vector, ...] = ((-1, 2), (1, 2))


@dataclass(frozen=True)
class MovePattern:
    """Movement pattern of one piece type in the canonical orientation."""

    steps: tuple[Vector, ...] = ()
    slides: tuple[Vector, ...] = ()
    jumps: tuple[Vector, ...] = ()


PAWN_PATTERN = MovePattern(steps=(UP,))
LANCE_PATTERN = MovePattern(slides=(UP,))
KNIGHT_PATTERN = MovePattern(jumps=KNIGHT_JUMPS)
SILVER_PATTERN = MovePattern(steps=SILVER_STEPS)
GOLD_PATTERN = MovePattern(steps=GOLD_STEPS)
BISHOP_PATTERN = MovePattern(slides=DIAGONALS)
ROOK_PATTERN = MovePattern(slides=ORTHOGONALS)
KING_PATTERN = MovePattern(steps=KING_STEPS)
# 馬 = 角の斜め遠距離 + 縦横1マス、龍 = 飛の縦横遠距離 + 斜め1マス
HORSE_PATTERN = MovePattern(slides=DIAGONALS, steps=ORTHOGONALS)
DRAGON_PATTERN = MovePattern(slides=ORTHOGONALS, steps=DIAGONALS)


def pattern_for(piece_type: PieceType) -> MovePattern:
    """Return the movement pattern of a piece type.

    成り駒（と・成香・成桂・成銀）はすべて金と同じ動き。
    """
    match piece_type:
        case PieceType.PAWN:
            return PAWN_PATTERN
        case PieceType.LANCE:
            return LANCE_PATTERN
        case PieceType.KNIGHT:
            return KNIGHT_PATTERN
        case PieceType.SILVER:
            return SILVER_PATTERN
        case PieceType.GOLD:
            return GOLD_PATTERN
        case PieceType.BISHOP:
            return BISHOP_PATTERN
        case PieceType.ROOK:
            return ROOK_PATTERN
        case PieceType.KING:
            return KING_PATTERN
        case (
            PieceType.PRO_PAWN
            | PieceType.PRO_LANCE
            | PieceType.PRO_KNIGHT
            | PieceType.PRO_SILVER
        ):
            return GOLD_PATTERN
        case PieceType.HORSE:
            return HORSE_PATTERN
        case PieceType.DRAGON:
            return DRAGON_PATTERN
    msg = f"Unknown piece type: {piece_type!r}"
    raise ValueError(msg)
