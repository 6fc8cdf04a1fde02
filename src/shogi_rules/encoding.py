"""Tensor encodings of positions for neural network consumers.

局面をニューラルネットワーク入力用のテンソルに変換する。
テンソルの軸は [channel, y, x]。
"""

from __future__ import annotations

import torch

from shogi_rules.board import Board
from shogi_rules.movement import pseudo_legal_moves
from shogi_rules.types import PieceType, Side

NUM_PIECE_TYPES = len(PieceType)
NUM_PLANES = 2 * NUM_PIECE_TYPES + 1


def board_to_planes(board: Board, side: Side) -> torch.Tensor:
    """Convert a board to feature planes from side's point of view.

    Planes（チャンネル）の構成:
    ch.0-13:  side の駒（14駒種）
    ch.14-27: 相手の駒（14駒種）
    ch.28:    手番インジケータ（side が先手なら全1）

    合計: 14+14+1 = 29 チャンネル
    """
    planes = torch.zeros(NUM_PLANES, board.height, board.width)

    for square, piece in board.occupied():
        offset = 0 if piece.side == side else NUM_PIECE_TYPES
        planes[offset + piece.piece_type.value, square.y, square.x] = 1.0

    if side == Side.SENTE:
        planes[NUM_PLANES - 1, :, :] = 1.0

    return planes


def attack_map(board: Board, side: Side) -> torch.Tensor:
    """Count how many pseudo-legal moves of side target each square.

    味方の駒があるマスへの利きは擬似合法手に含まれないため数えない。
    """
    counts = torch.zeros(board.height, board.width)
    for move in pseudo_legal_moves(board, side):
        counts[move.to.y, move.to.x] += 1.0
    return counts
