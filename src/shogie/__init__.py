"""Shogie: SFEN/USI position record codec for shogi."""

from shogie.core import (
    Board,
    Hand,
    Move,
    MoveDrop,
    MoveNondrop,
    Piece,
    PieceType,
    Position,
    SfenDecodeError,
    Side,
    Square,
    decode,
    encode,
)

__all__ = [
    "Board",
    "Hand",
    "Move",
    "MoveDrop",
    "MoveNondrop",
    "Piece",
    "PieceType",
    "Position",
    "SfenDecodeError",
    "Side",
    "Square",
    "decode",
    "encode",
]
