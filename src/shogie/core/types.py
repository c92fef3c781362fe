"""Square value type and coordinate helpers.

Board layout (row-major, rank "a" on top, file "1" in column 0):
    1a=0, 2a=1, ..., 9a=8
    1b=9, 2b=10, ..., 9b=17
    ...
    1i=72, 2i=73, ..., 9i=80
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

BOARD_SIZE: Final = 9
SQUARE_COUNT: Final = BOARD_SIZE * BOARD_SIZE


def _check_coord(x: int, y: int) -> None:
    # Coordinates come from validated text or from the caller; a bad one is a bug.
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        raise AssertionError(f"square out of range: ({x}, {y})")


@dataclass(frozen=True, slots=True)
class Square:
    """Board coordinate: file ``x`` (0 = file 1) and rank ``y`` (0 = rank a)."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_coord(self.x, self.y)

    @property
    def index(self) -> int:
        """Row-major index 0–80."""
        return self.y * BOARD_SIZE + self.x

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not (0 <= index < SQUARE_COUNT):
            raise AssertionError(f"square index out of range: {index}")
        y, x = divmod(index, BOARD_SIZE)
        return cls(x, y)

    def __str__(self) -> str:
        return square_name(self)


def make_square(x: int, y: int) -> Square:
    """Create square from file (0–8) and rank (0–8)."""
    return Square(x, y)


def file_of(sq: Square) -> int:
    """File index 0–8 (files 1–9)."""
    return sq.x


def rank_of(sq: Square) -> int:
    """Rank index 0–8 (ranks a–i)."""
    return sq.y


def square_name(sq: Square) -> str:
    """USI name, e.g. ``Square(6, 6)`` → ``'7g'``."""
    return chr(ord("1") + sq.x) + chr(ord("a") + sq.y)
