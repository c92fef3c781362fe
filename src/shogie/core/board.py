"""Board - piece placement on a 9x9 board."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeAlias

from shogie.core.enums import PieceType, Side
from shogie.core.piece import Piece
from shogie.core.types import BOARD_SIZE, SQUARE_COUNT, Square, make_square

BoardCell: TypeAlias = Piece | None

_BACK_RANK = (
    PieceType.LANCE,
    PieceType.KNIGHT,
    PieceType.SILVER,
    PieceType.GOLD,
    PieceType.KING,
    PieceType.GOLD,
    PieceType.SILVER,
    PieceType.KNIGHT,
    PieceType.LANCE,
)


class Board:
    """Immutable 81-cell board. Any placement is representable, legal or not."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[BoardCell]) -> None:
        cells = tuple(cells)
        if len(cells) != SQUARE_COUNT:
            raise AssertionError(f"board needs {SQUARE_COUNT} cells, got {len(cells)}")
        self._cells: tuple[BoardCell, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> BoardCell:
        return self._cells[sq.index]

    def at(self, x: int, y: int) -> BoardCell:
        """Cell at file ``x`` and rank ``y``."""
        return self[make_square(x, y)]

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq.index] is None

    @property
    def cells(self) -> tuple[BoardCell, ...]:
        """All cells in row-major order."""
        return self._cells

    def rows(self) -> list[tuple[BoardCell, ...]]:
        """Nine rows of nine cells, rank 'a' first."""
        return [
            self._cells[y * BOARD_SIZE : (y + 1) * BOARD_SIZE] for y in range(BOARD_SIZE)
        ]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls([None] * SQUARE_COUNT)

    @classmethod
    def from_function(cls, f: Callable[[int, int], BoardCell]) -> Board:
        """Build a board by calling ``f(x, y)`` for every square."""
        return cls(f(x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells: list[BoardCell] = [None] * SQUARE_COUNT

        def put(x: int, y: int, piece: Piece) -> None:
            cells[y * BOARD_SIZE + x] = piece

        for x, pt in enumerate(_BACK_RANK):
            put(x, 0, Piece(Side.SECOND, pt))
            put(x, 8, Piece(Side.FIRST, pt))
        for x in range(BOARD_SIZE):
            put(x, 2, Piece(Side.SECOND, PieceType.PAWN))
            put(x, 6, Piece(Side.FIRST, PieceType.PAWN))
        put(1, 1, Piece(Side.SECOND, PieceType.ROOK))
        put(7, 1, Piece(Side.SECOND, PieceType.BISHOP))
        put(1, 7, Piece(Side.FIRST, PieceType.BISHOP))
        put(7, 7, Piece(Side.FIRST, PieceType.ROOK))
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for y, row in enumerate(self.rows()):
            cells = [str(p).rjust(2) if p else " ." for p in row]
            rows.append(f"{chr(ord('a') + y)} {' '.join(cells)}")
        rows.append("   " + "  ".join(str(x + 1) for x in range(BOARD_SIZE)))
        return "\n".join(rows)
