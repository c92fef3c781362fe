"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from shogie.core.enums import PieceType, Side

# SFEN letter ↔ base PieceType (uppercase form)
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.LANCE: "L",
    PieceType.KNIGHT: "N",
    PieceType.SILVER: "S",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.GOLD: "G",
    PieceType.KING: "K",
}

# SFEN character ↔ (Side, base PieceType). ASCII only.
_CHAR_MAP: dict[str, tuple[Side, PieceType]] = {
    **{ch: (Side.FIRST, pt) for pt, ch in _LETTERS.items()},
    **{ch.lower(): (Side.SECOND, pt) for pt, ch in _LETTERS.items()},
}

_BASE_TYPES: dict[str, PieceType] = {ch: pt for pt, ch in _LETTERS.items()}


def piece_type_letter(piece_type: PieceType) -> str:
    """Uppercase SFEN letter of the base form, e.g. HORSE → 'B'."""
    return _LETTERS[piece_type.unpromoted]


def piece_type_from_letter(char: str) -> PieceType | None:
    """Resolve an uppercase base letter ('P', 'L', ..., 'K')."""
    return _BASE_TYPES.get(char)


def side_piece_type_from_char(char: str) -> tuple[Side, PieceType] | None:
    """Resolve a case-sensitive SFEN letter to ``(side, base type)``."""
    return _CHAR_MAP.get(char)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a shogi piece."""

    side: Side
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """SFEN token (uppercase = first, lowercase = second, '+' = promoted)."""
        letter = piece_type_letter(self.piece_type)
        if self.side == Side.SECOND:
            letter = letter.lower()
        return f"+{letter}" if self.piece_type.is_promoted else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create an unpromoted piece from an SFEN letter, e.g. 'n' → second knight."""
        resolved = side_piece_type_from_char(char)
        if resolved is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(*resolved)

    def promote(self) -> Piece:
        """Promoted counterpart of this piece."""
        promoted = self.piece_type.promoted
        if promoted is None:
            raise ValueError(f"Piece cannot promote: {self.piece_type.name}")
        return Piece(self.side, promoted)
