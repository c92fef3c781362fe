"""Core domain layer — shogi value types and the SFEN codec, zero external dependencies.

Quick start::

    from shogie.core import decode, encode

    pos, moves = decode("startpos moves 7g7f 3c3d")
    print(pos.side_to_move, [str(m) for m in moves])
    print(encode(pos, moves))
"""

from shogie.core.board import Board, BoardCell
from shogie.core.enums import HAND_PIECE_TYPES, PieceType, Side
from shogie.core.hand import Hand
from shogie.core.move import Move, MoveDrop, MoveNondrop
from shogie.core.notation import (
    STARTPOS_SFEN,
    SfenDecodeError,
    decode,
    encode,
    move_to_usi,
    parse_usi_move,
    parse_usi_square,
    position_from_sfen,
    position_to_sfen,
)
from shogie.core.piece import Piece
from shogie.core.position import Position
from shogie.core.types import (
    Square,
    file_of,
    make_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "HAND_PIECE_TYPES",
    "PieceType",
    "Side",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardCell",
    "Hand",
    "Move",
    "MoveDrop",
    "MoveNondrop",
    "Piece",
    "Position",
    # Notation
    "STARTPOS_SFEN",
    "SfenDecodeError",
    "decode",
    "encode",
    "move_to_usi",
    "parse_usi_move",
    "parse_usi_square",
    "position_from_sfen",
    "position_to_sfen",
]
