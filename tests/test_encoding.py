"""Tests for tensor encodings."""

from __future__ import annotations

import torch

from shogi_rules.board import Board
from shogi_rules.encoding import NUM_PIECE_TYPES, NUM_PLANES, attack_map, board_to_planes
from shogi_rules.types import PieceType, Side


class TestBoardToPlanes:
    def test_shape(self) -> None:
        planes = board_to_planes(Board.initial(), Side.SENTE)
        assert planes.shape == (NUM_PLANES, 9, 9)
        assert NUM_PLANES == 29

    def test_non_square_board_shape(self) -> None:
        planes = board_to_planes(Board.empty(width=5, height=7), Side.GOTE)
        assert planes.shape == (29, 7, 5)

    def test_own_and_opponent_channels(self) -> None:
        planes = board_to_planes(Board.initial(), Side.SENTE)
        assert planes[PieceType.KING.value, 0, 4] == 1.0
        assert planes[NUM_PIECE_TYPES + PieceType.KING.value, 8, 4] == 1.0
        assert planes[:NUM_PIECE_TYPES].sum() == 20
        assert planes[NUM_PIECE_TYPES : 2 * NUM_PIECE_TYPES].sum() == 20

    def test_perspective_swaps_channels(self) -> None:
        planes = board_to_planes(Board.initial(), Side.GOTE)
        assert planes[PieceType.KING.value, 8, 4] == 1.0
        assert planes[NUM_PIECE_TYPES + PieceType.KING.value, 0, 4] == 1.0

    def test_side_indicator(self) -> None:
        sente = board_to_planes(Board(), Side.SENTE)
        gote = board_to_planes(Board(), Side.GOTE)
        assert torch.all(sente[NUM_PLANES - 1] == 1.0)
        assert torch.all(gote[NUM_PLANES - 1] == 0.0)


class TestAttackMap:
    def test_rook_attacks(self) -> None:
        board = Board.from_pieces([(4, 4, Side.SENTE, PieceType.ROOK)])
        counts = attack_map(board, Side.SENTE)
        assert counts.shape == (9, 9)
        assert counts.sum() == 16
        assert counts[5, 4] == 1.0  # (x=4, y=5)
        assert counts[4, 4] == 0.0

    def test_overlapping_attacks_are_counted(self) -> None:
        board = Board.from_pieces(
            [
                (4, 4, Side.SENTE, PieceType.ROOK),
                (3, 4, Side.GOTE, PieceType.PAWN),
                (5, 6, Side.SENTE, PieceType.GOLD),
            ]
        )
        counts = attack_map(board, Side.SENTE)
        # (4, 6) は飛と金の両方から利いている
        assert counts[6, 4] == 2.0
        # 相手の歩は取れるので数える
        assert counts[4, 3] == 1.0
