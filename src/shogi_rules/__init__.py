"""Shogi rules core — pseudo-legal move generation and legality filtering."""

from shogi_rules.board import (
    Board,
    Piece,
    clone_board,
    has_unpromoted_pawn_on_file,
    is_last_rank,
    is_last_two_ranks,
    opposite,
)
from shogi_rules.movement import (
    drop_candidates,
    pseudo_legal_moves,
    pseudo_legal_moves_for_square,
)
from shogi_rules.moves import BoardMove, DropMove, Move
from shogi_rules.rules import (
    DropCheck,
    DropViolation,
    InvalidMoveError,
    apply_move,
    filter_illegal_moves,
    find_king,
    in_check,
    is_checkmate,
    is_pawn_drop_checkmate,
    legal_moves,
    validate_drop_constraints,
)
from shogi_rules.types import COLS, ROWS, PieceType, Side, Square

__all__ = [
    "Board",
    "BoardMove",
    "COLS",
    "DropCheck",
    "DropMove",
    "DropViolation",
    "InvalidMoveError",
    "Move",
    "Piece",
    "PieceType",
    "ROWS",
    "Side",
    "Square",
    "apply_move",
    "clone_board",
    "drop_candidates",
    "filter_illegal_moves",
    "find_king",
    "has_unpromoted_pawn_on_file",
    "in_check",
    "is_checkmate",
    "is_last_rank",
    "is_last_two_ranks",
    "is_pawn_drop_checkmate",
    "legal_moves",
    "opposite",
    "pseudo_legal_moves",
    "pseudo_legal_moves_for_square",
    "validate_drop_constraints",
]
