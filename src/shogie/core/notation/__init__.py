"""Notation package: SFEN position records and USI move tokens."""

from shogie.core.notation.errors import SfenDecodeError
from shogie.core.notation.sfen import (
    STARTPOS_SFEN,
    decode,
    encode,
    position_from_sfen,
    position_to_sfen,
)
from shogie.core.notation.usi import move_to_usi, parse_usi_move, parse_usi_square

__all__ = [
    "STARTPOS_SFEN",
    "SfenDecodeError",
    "decode",
    "encode",
    "position_from_sfen",
    "position_to_sfen",
    "move_to_usi",
    "parse_usi_move",
    "parse_usi_square",
]
