"""Tests for types and direction tables."""

from __future__ import annotations

import pytest

from shogi_rules.directions import (
    DIAGONALS,
    GOLD_PATTERN,
    ORTHOGONALS,
    pattern_for,
)
from shogi_rules.types import (
    COLS,
    HAND_PIECE_TYPES,
    PROMOTION_MAP,
    ROWS,
    PieceType,
    Side,
    Square,
)


def test_board_dimensions() -> None:
    assert ROWS == 9
    assert COLS == 9


def test_side_opponent() -> None:
    assert Side.SENTE.opponent == Side.GOTE
    assert Side.GOTE.opponent == Side.SENTE


def test_side_forward() -> None:
    assert Side.SENTE.forward == 1
    assert Side.GOTE.forward == -1


def test_14_piece_types() -> None:
    assert len(PieceType) == 14


def test_square_is_tuple() -> None:
    sq = Square(3, 5)
    assert sq == (3, 5)
    assert sq.x == 3
    assert sq.y == 5


def test_promotion_map() -> None:
    assert PROMOTION_MAP[PieceType.PAWN] == PieceType.PRO_PAWN
    assert PROMOTION_MAP[PieceType.BISHOP] == PieceType.HORSE
    assert PROMOTION_MAP[PieceType.ROOK] == PieceType.DRAGON
    assert PieceType.GOLD not in PROMOTION_MAP
    assert PieceType.KING not in PROMOTION_MAP


def test_hand_piece_types() -> None:
    assert len(HAND_PIECE_TYPES) == 7
    assert PieceType.KING not in HAND_PIECE_TYPES


class TestPatterns:
    @pytest.mark.parametrize("piece_type", list(PieceType))
    def test_every_piece_type_has_a_pattern(self, piece_type: PieceType) -> None:
        pattern = pattern_for(piece_type)
        assert pattern.steps or pattern.slides or pattern.jumps

    @pytest.mark.parametrize(
        "piece_type",
        [PieceType.PRO_PAWN, PieceType.PRO_LANCE, PieceType.PRO_KNIGHT, PieceType.PRO_SILVER],
    )
    def test_small_promoted_pieces_move_like_gold(self, piece_type: PieceType) -> None:
        assert pattern_for(piece_type) == GOLD_PATTERN

    def test_gold_has_no_backward_diagonals(self) -> None:
        steps = set(pattern_for(PieceType.GOLD).steps)
        assert len(steps) == 6
        assert (-1, -1) not in steps
        assert (1, -1) not in steps

    def test_king_steps_all_eight_directions(self) -> None:
        assert set(pattern_for(PieceType.KING).steps) == set(ORTHOGONALS) | set(DIAGONALS)

    def test_horse_is_bishop_plus_orthogonal_steps(self) -> None:
        """馬 = 角の動き + 縦横1マス。"""
        horse = pattern_for(PieceType.HORSE)
        assert set(horse.slides) == set(pattern_for(PieceType.BISHOP).slides)
        assert set(horse.steps) == set(ORTHOGONALS)

    def test_dragon_is_rook_plus_diagonal_steps(self) -> None:
        """龍 = 飛の動き + 斜め1マス。"""
        dragon = pattern_for(PieceType.DRAGON)
        assert set(dragon.slides) == set(pattern_for(PieceType.ROOK).slides)
        assert set(dragon.steps) == set(DIAGONALS)

    def test_knight_only_jumps_forward(self) -> None:
        knight = pattern_for(PieceType.KNIGHT)
        assert knight.jumps == ((-1, 2), (1, 2))
        assert knight.steps == ()
        assert knight.slides == ()

    def test_lance_slides_forward_only(self) -> None:
        assert pattern_for(PieceType.LANCE).slides == ((0, 1),)
