"""Board representation for the shogi rules core.

盤面データ構造。cells[y][x] でマスを参照する（cells[0] が最下段）。
マスは None または Piece（side と駒種の組）。

ルールエンジンは入力の Board を決して書き換えない（copy-on-write）。
変更が必要な操作は clone() した盤面に対して行い、新しい Board を返す。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from shogi_rules.types import COLS, ROWS, PieceType, Side, Square


@dataclass(frozen=True)
class Piece:
    """A piece on the board.

    盤面上の駒。所有者（side）と種類を持つ。
    """

    side: Side
    piece_type: PieceType


@dataclass
class Board:
    """Rectangular shogi board.

    cells: 行（y）ごとのリスト。すべての行は同じ長さでなければならない。
    盤の大きさは固定ではなく、cells の形から決まる（標準は 9×9）。
    """

    cells: list[list[Piece | None]] = field(
        default_factory=lambda: [[None] * COLS for _ in range(ROWS)]
    )

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise ValueError("Board must have at least one row and one column")
        width = len(self.cells[0])
        if any(len(row) != width for row in self.cells):
            raise ValueError("All board rows must have the same width")

    @classmethod
    def empty(cls, width: int = COLS, height: int = ROWS) -> Board:
        """空の盤面を返す。"""
        if width <= 0 or height <= 0:
            msg = f"Invalid board size: {width}x{height}"
            raise ValueError(msg)
        return cls(cells=[[None] * width for _ in range(height)])

    @classmethod
    def from_pieces(
        cls,
        pieces: Iterable[tuple[int, int, Side, PieceType]],
        width: int = COLS,
        height: int = ROWS,
    ) -> Board:
        """Build a board from (x, y, side, piece_type) tuples.

        テストや外部の対局管理から任意の局面を組み立てるためのヘルパー。
        """
        board = cls.empty(width, height)
        for x, y, side, pt in pieces:
            if not board.in_bounds(x, y):
                msg = f"Square ({x}, {y}) is outside a {width}x{height} board"
                raise ValueError(msg)
            board.cells[y][x] = Piece(side, pt)
        return board

    @classmethod
    def initial(cls) -> Board:
        """Return the standard starting position (平手).

        先手の後段は y=0（最下段）、後手の後段は y=8（最上段）。
        """
        back_rank = [
            PieceType.LANCE, PieceType.KNIGHT, PieceType.SILVER,
            PieceType.GOLD, PieceType.KING, PieceType.GOLD,
            PieceType.SILVER, PieceType.KNIGHT, PieceType.LANCE,
        ]
        board = cls.empty()
        for x, pt in enumerate(back_rank):
            board.cells[0][x] = Piece(Side.SENTE, pt)
            board.cells[8][x] = Piece(Side.GOTE, pt)
        for x in range(COLS):
            board.cells[2][x] = Piece(Side.SENTE, PieceType.PAWN)
            board.cells[6][x] = Piece(Side.GOTE, PieceType.PAWN)

        # 飛角: 先手は左に角・右に飛、後手はその点対称
        board.cells[1][1] = Piece(Side.SENTE, PieceType.BISHOP)
        board.cells[1][7] = Piece(Side.SENTE, PieceType.ROOK)
        board.cells[7][1] = Piece(Side.GOTE, PieceType.ROOK)
        board.cells[7][7] = Piece(Side.GOTE, PieceType.BISHOP)
        return board

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        """盤内判定。"""
        return 0 <= x < self.width and 0 <= y < self.height

    def piece_at(self, x: int, y: int) -> Piece | None:
        """マス(x, y)の駒を返す。駒がなければ None。"""
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        return self.cells[y][x] is None

    def _put(self, x: int, y: int, piece: Piece | None) -> None:
        self.cells[y][x] = piece

    def set_piece(self, x: int, y: int, piece: Piece | None) -> Board:
        """マス(x, y)の駒を変更した新しい Board を返す。"""
        return self.set_pieces([(x, y, piece)])

    def set_pieces(self, changes: Iterable[tuple[int, int, Piece | None]]) -> Board:
        """複数のマスを順に書き換えた新しい Board を返す（元の盤面は変更しない）。"""
        board = self.clone()
        for x, y, piece in changes:
            board._put(x, y, piece)
        return board

    def clone(self) -> Board:
        """Deep copy: 行リストを作り直すので元の盤面と記憶領域を共有しない。

        Piece はイミュータブルなので共有してよい。
        """
        return Board(cells=[list(row) for row in self.cells])

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """駒のあるマスを行優先（y 昇順、x 昇順）で列挙する。"""
        for y, row in enumerate(self.cells):
            for x, piece in enumerate(row):
                if piece is not None:
                    yield Square(x, y), piece


def clone_board(board: Board) -> Board:
    return board.clone()


def opposite(side: Side) -> Side:
    return side.opponent


def is_last_rank(y: int, side: Side, height: int) -> bool:
    """Whether y is the side's last rank for pawn/lance drops.

    先手は y=0、後手は y=height-1。
    """
    if side == Side.SENTE:
        return y == 0
    return y == height - 1


def is_last_two_ranks(y: int, side: Side, height: int) -> bool:
    """Whether y is one of the side's last two ranks for knight drops."""
    if side == Side.SENTE:
        return y <= 1
    return y >= height - 2


def has_unpromoted_pawn_on_file(board: Board, side: Side, file_x: int) -> bool:
    """Scan column file_x for an unpromoted pawn of side (二歩 check).

    成り歩（と）は数えない。盤外の筋には歩はないので False。
    """
    if not 0 <= file_x < board.width:
        return False
    for y in range(board.height):
        piece = board.piece_at(file_x, y)
        if piece is not None and piece.side == side and piece.piece_type == PieceType.PAWN:
            return True
    return False
