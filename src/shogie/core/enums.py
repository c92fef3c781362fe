"""Core enumerations for the shogi domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Player side. FIRST moves first (sente), SECOND is gote."""

    FIRST = 0
    SECOND = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The 14 shogi piece types: 8 base types followed by 6 promoted forms."""

    PAWN = 1
    LANCE = 2
    KNIGHT = 3
    SILVER = 4
    BISHOP = 5
    ROOK = 6
    GOLD = 7
    KING = 8
    PRO_PAWN = 9
    PRO_LANCE = 10
    PRO_KNIGHT = 11
    PRO_SILVER = 12
    HORSE = 13
    DRAGON = 14

    @property
    def is_hand(self) -> bool:
        """Whether pieces of this type may sit in a hand."""
        return self in _HAND_TYPES

    @property
    def is_promoted(self) -> bool:
        return self in _UNPROMOTED

    @property
    def promoted(self) -> PieceType | None:
        """Promoted form, or ``None`` for GOLD, KING and promoted types."""
        return _PROMOTED.get(self)

    @property
    def unpromoted(self) -> PieceType:
        """Base form; base types map to themselves."""
        return _UNPROMOTED.get(self, self)


_PROMOTED: dict[PieceType, PieceType] = {
    PieceType.PAWN: PieceType.PRO_PAWN,
    PieceType.LANCE: PieceType.PRO_LANCE,
    PieceType.KNIGHT: PieceType.PRO_KNIGHT,
    PieceType.SILVER: PieceType.PRO_SILVER,
    PieceType.BISHOP: PieceType.HORSE,
    PieceType.ROOK: PieceType.DRAGON,
}
_UNPROMOTED: dict[PieceType, PieceType] = {v: k for k, v in _PROMOTED.items()}

# Hand-eligible types in storage order.
HAND_PIECE_TYPES: tuple[PieceType, ...] = (
    PieceType.PAWN,
    PieceType.LANCE,
    PieceType.KNIGHT,
    PieceType.SILVER,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.GOLD,
)
_HAND_TYPES = frozenset(HAND_PIECE_TYPES)
