"""Move values produced by the generator and consumed by the legality filter.

手の表現。盤上の手（BoardMove）と持ち駒を打つ手（DropMove）の2種類。
どちらもイミュータブルで、フィールドの値以外の同一性を持たない。
"""

from __future__ import annotations

from dataclasses import dataclass

from shogi_rules.types import PieceType, Square


@dataclass(frozen=True)
class BoardMove:
    """A move of a piece already on the board.

    source:     移動元のマス
    to:         移動先のマス
    piece:      動かす駒の種類
    capture:    移動先に相手の駒があったか
    promote_to: 成る場合の成り駒の種類（成らない場合は None）
    """

    source: Square | None
    to: Square
    piece: PieceType
    capture: bool = False
    promote_to: PieceType | None = None


@dataclass(frozen=True)
class DropMove:
    """A drop of a reserve piece onto the board (打つ手)."""

    to: Square
    piece: PieceType

    @property
    def capture(self) -> bool:
        return False


Move = BoardMove | DropMove
