"""Hand - per-side reserve of captured pieces."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Final

from shogie.core.enums import HAND_PIECE_TYPES, PieceType

MAX_HAND_COUNT: Final = 255


class Hand:
    """Immutable count of each hand-eligible piece type.

    Counts are bounded only by ``MAX_HAND_COUNT``; piece supply is not
    checked.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[PieceType, int] | None = None) -> None:
        resolved = dict.fromkeys(HAND_PIECE_TYPES, 0)
        for piece_type, count in (counts or {}).items():
            if not piece_type.is_hand:
                raise AssertionError(f"not a hand piece type: {piece_type.name}")
            if not (0 <= count <= MAX_HAND_COUNT):
                raise AssertionError(f"hand count out of range: {count}")
            resolved[piece_type] = count
        self._counts: tuple[int, ...] = tuple(resolved[pt] for pt in HAND_PIECE_TYPES)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Hand:
        return cls()

    @classmethod
    def from_counts(cls, counts: Mapping[PieceType, int]) -> Hand:
        return cls(counts)

    @classmethod
    def from_function(cls, f: Callable[[PieceType], int]) -> Hand:
        """Build a hand by calling ``f(piece_type)`` for each hand type."""
        return cls({pt: f(pt) for pt in HAND_PIECE_TYPES})

    # -- Queries ------------------------------------------------------------

    def count(self, piece_type: PieceType) -> int:
        """Count of *piece_type*; 0 for types that never sit in a hand."""
        if not piece_type.is_hand:
            return 0
        return self._counts[HAND_PIECE_TYPES.index(piece_type)]

    __getitem__ = count

    def items(self) -> Iterator[tuple[PieceType, int]]:
        """``(piece_type, count)`` pairs in PAWN..GOLD order, zeros included."""
        return zip(HAND_PIECE_TYPES, self._counts)

    def is_empty(self) -> bool:
        return not any(self._counts)

    def total(self) -> int:
        return sum(self._counts)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self) -> int:
        return hash(self._counts)

    def __repr__(self) -> str:
        held = ", ".join(f"{pt.name}={n}" for pt, n in self.items() if n)
        return f"Hand({held})"
