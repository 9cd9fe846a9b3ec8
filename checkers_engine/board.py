from __future__ import annotations

from dataclasses import dataclass, replace as dc_replace
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

BOARD_SIZE = 8
PIECES_PER_SIDE = 12


class Color(str, Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def forward(self) -> int:
        """Row direction a normal piece of this color advances in."""
        return 1 if self is Color.BLACK else -1

    @property
    def promotion_row(self) -> int:
        return BOARD_SIZE - 1 if self is Color.BLACK else 0


class Rank(str, Enum):
    NORMAL = "normal"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    color: Color
    rank: Rank = Rank.NORMAL

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promoted(self) -> "Piece":
        return dc_replace(self, rank=Rank.KING)


class Position(NamedTuple):
    row: int
    col: int

    def on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def step(self, d_row: int, d_col: int, distance: int = 1) -> "Position":
        return Position(self.row + d_row * distance, self.col + d_col * distance)


@dataclass(frozen=True)
class Move:
    """A single move of one piece.

    ``captured`` lists the squares of the pieces jumped by this move; it is
    empty for a simple step.
    """

    start: Position
    end: Position
    captured: Tuple[Position, ...] = ()

    @property
    def is_capture(self) -> bool:
        return len(self.captured) > 0

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.start.row}{self.start.col}{sep}{self.end.row}{self.end.col}"


Row = Tuple[Optional[Piece], ...]


class Board:
    """Immutable 8x8 grid of optional pieces, indexed ``[row][col]``."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Sequence[Sequence[Optional[Piece]]]) -> None:
        self._rows: Tuple[Row, ...] = tuple(tuple(row) for row in rows)

    @classmethod
    def empty(cls) -> "Board":
        return cls([[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[Piece]]]) -> "Board":
        return cls(rows)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    def __getitem__(self, row: int) -> Row:
        return self._rows[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Board({self.count(Color.BLACK)} black, {self.count(Color.WHITE)} white)"

    def piece_at(self, position: Position) -> Optional[Piece]:
        return self._rows[position[0]][position[1]]

    def replace(self, changes: Iterable[Tuple[Position, Optional[Piece]]]) -> "Board":
        """Return a new board with the given squares set; ``self`` is untouched."""
        grid: List[List[Optional[Piece]]] = [list(row) for row in self._rows]
        for (row, col), piece in changes:
            grid[row][col] = piece
        return Board(grid)

    def pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[Position, Piece]]:
        """Yield occupied squares in row-major order, optionally for one color."""
        for row, cells in enumerate(self._rows):
            for col, piece in enumerate(cells):
                if piece is None:
                    continue
                if color is None or piece.color is color:
                    yield Position(row, col), piece

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))


def is_dark_square(row: int, col: int) -> bool:
    return (row + col) % 2 == 1


def create_initial_board() -> Board:
    """Standard setup: Black on rows 0-2, White on rows 5-7, dark squares only."""
    grid: List[List[Optional[Piece]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for row in range(BOARD_SIZE):
        if row < 3:
            color: Optional[Color] = Color.BLACK
        elif row >= BOARD_SIZE - 3:
            color = Color.WHITE
        else:
            continue
        for col in range(BOARD_SIZE):
            if is_dark_square(row, col):
                grid[row][col] = Piece(color)
    return Board(grid)
