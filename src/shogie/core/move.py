"""Move value objects (USI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from shogie.core.enums import PieceType
from shogie.core.piece import piece_type_letter
from shogie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class MoveNondrop:
    """A board piece moving from *src* to *dst*, optionally promoting."""

    src: Square
    dst: Square
    is_promotion: bool = False

    def __str__(self) -> str:
        base = f"{square_name(self.src)}{square_name(self.dst)}"
        return base + "+" if self.is_promotion else base

    @property
    def usi(self) -> str:
        """USI move token."""
        return str(self)


@dataclass(frozen=True, slots=True)
class MoveDrop:
    """A piece of *piece_type* placed from the hand onto *dst*."""

    piece_type: PieceType
    dst: Square

    def __post_init__(self) -> None:
        if self.piece_type.is_promoted:
            raise AssertionError(f"cannot drop a promoted piece: {self.piece_type.name}")

    def __str__(self) -> str:
        return f"{piece_type_letter(self.piece_type)}*{square_name(self.dst)}"

    @property
    def usi(self) -> str:
        """USI move token."""
        return str(self)


Move: TypeAlias = MoveNondrop | MoveDrop
