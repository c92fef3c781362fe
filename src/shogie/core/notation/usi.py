"""USI square and move tokens."""

from __future__ import annotations

from shogie.core.move import Move, MoveDrop, MoveNondrop
from shogie.core.notation.errors import SfenDecodeError
from shogie.core.piece import piece_type_from_letter
from shogie.core.types import Square, make_square

_FILES = "123456789"
_RANKS = "abcdefghi"


def parse_usi_square(name: str) -> Square:
    """Parse a square name, e.g. '7g' → ``Square(6, 6)``."""
    if len(name) != 2:
        raise SfenDecodeError(f"square: invalid string: {name}")
    cx, cy = name
    if cx not in _FILES:
        raise SfenDecodeError(f"square: invalid x: {cx}")
    if cy not in _RANKS:
        raise SfenDecodeError(f"square: invalid y: {cy}")
    return make_square(_FILES.index(cx), _RANKS.index(cy))


def parse_usi_move(token: str) -> Move:
    """Parse one USI move token: ``7g7f``, ``8h2b+`` or ``B*4e``."""
    if not (4 <= len(token) <= 5):
        raise SfenDecodeError(f"move: invalid string: {token}")

    if token[1] == "*":
        if len(token) != 4:
            raise SfenDecodeError(f"move: invalid string: {token}")
        piece_type = piece_type_from_letter(token[0])
        if piece_type is None:
            raise SfenDecodeError(f"move: invalid piece: {token[0]}")
        return MoveDrop(piece_type, parse_usi_square(token[2:4]))

    if len(token) == 5 and token[4] != "+":
        raise SfenDecodeError(f"move: '+' expected: {token}")
    src = parse_usi_square(token[0:2])
    dst = parse_usi_square(token[2:4])
    return MoveNondrop(src, dst, is_promotion=len(token) == 5)


def move_to_usi(move: Move) -> str:
    """Serialise a move to its USI token."""
    return str(move)
