"""Types and constants for the shogi rules core.

将棋ルールエンジンの基本型・定数定義。
駒は14種類（未成7種 + 成り6種、王将を含む）。

座標系は盤の左下を (0, 0) とする絶対座標で、x は右へ、y は上へ増える。
先手（SENTE）は y が増える方向へ、後手（GOTE）は y が減る方向へ進む。
"""

from __future__ import annotations

from enum import IntEnum, unique
from typing import NamedTuple

ROWS = 9
COLS = 9


@unique
class Side(IntEnum):
    """Side identifiers.

    先手と後手は互いの鏡像。side によって「前」の向きが決まる。
    """

    SENTE = 0  # 先手
    GOTE = 1   # 後手

    @property
    def opponent(self) -> Side:
        """相手側を返す。"""
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """前方向の y の符号（先手 +1、後手 -1）。"""
        return 1 if self == Side.SENTE else -1


@unique
class PieceType(IntEnum):
    """Piece types（14種類）.

    値は encoding.board_to_planes() でのチャンネルインデックスに対応する。
    0〜6: 未成駒、7: 王将、8〜13: 成り駒
    """

    PAWN = 0         # 歩
    LANCE = 1        # 香
    KNIGHT = 2       # 桂
    SILVER = 3       # 銀
    GOLD = 4         # 金
    BISHOP = 5       # 角
    ROOK = 6         # 飛
    KING = 7         # 玉/王
    PRO_PAWN = 8     # と
    PRO_LANCE = 9    # 成香
    PRO_KNIGHT = 10  # 成桂
    PRO_SILVER = 11  # 成銀
    HORSE = 12       # 馬（成り角）
    DRAGON = 13      # 龍（成り飛）


class Square(NamedTuple):
    """A board coordinate (x, y), 0-indexed."""

    x: int
    y: int


# 成り変換テーブル: 未成駒 → 成り駒（金・王は成らない）
PROMOTION_MAP: dict[PieceType, PieceType] = {
    PieceType.PAWN: PieceType.PRO_PAWN,
    PieceType.LANCE: PieceType.PRO_LANCE,
    PieceType.KNIGHT: PieceType.PRO_KNIGHT,
    PieceType.SILVER: PieceType.PRO_SILVER,
    PieceType.BISHOP: PieceType.HORSE,
    PieceType.ROOK: PieceType.DRAGON,
}

# 持ち駒になりうる駒種（未成の非玉駒、7種）
HAND_PIECE_TYPES = [
    PieceType.PAWN, PieceType.LANCE, PieceType.KNIGHT,
    PieceType.SILVER, PieceType.GOLD, PieceType.BISHOP, PieceType.ROOK,
]
