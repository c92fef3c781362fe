"""Position — board, side to move, both hands and the ply label."""

from __future__ import annotations

from dataclasses import dataclass, field

from shogie.core.board import Board
from shogie.core.enums import Side
from shogie.core.hand import Hand

_PLY_MIN = -(2**31)
_PLY_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class Position:
    """Full shogi position as carried by an SFEN record.

    Nothing here checks legality: two kings of one side, pawns on the last
    rank or a negative ply are all representable.
    """

    side_to_move: Side = Side.FIRST
    board: Board = field(default_factory=Board.initial)
    hands: tuple[Hand, Hand] = field(default_factory=lambda: (Hand(), Hand()))
    ply: int = 1

    def __post_init__(self) -> None:
        if len(self.hands) != 2:
            raise AssertionError(f"position needs 2 hands, got {len(self.hands)}")
        if not (_PLY_MIN <= self.ply <= _PLY_MAX):
            raise AssertionError(f"ply out of 32-bit range: {self.ply}")

    def hand(self, side: Side) -> Hand:
        return self.hands[int(side)]

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position: first side to move, empty hands, ply 1."""
        return cls()
