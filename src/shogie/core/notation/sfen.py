"""SFEN position record parsing and serialization.

A record is ``startpos`` or ``sfen <board> <side> <hands> <ply>``, optionally
followed by ``moves`` and USI move tokens. Nothing here checks legality.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Final

from shogie.core.board import Board, BoardCell
from shogie.core.enums import HAND_PIECE_TYPES, PieceType, Side
from shogie.core.hand import MAX_HAND_COUNT, Hand
from shogie.core.move import Move
from shogie.core.notation.errors import SfenDecodeError
from shogie.core.notation.usi import move_to_usi, parse_usi_move
from shogie.core.piece import Piece, side_piece_type_from_char
from shogie.core.position import Position
from shogie.core.types import BOARD_SIZE

_LOGGER = logging.getLogger(__name__)

STARTPOS_SFEN: Final = "sfen lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL b - 1"

# Runs of ASCII whitespace separate tokens; other whitespace is token text.
_TOKEN_RE: Final = re.compile(r"[^ \t\n\r\x0c]+")
_PLY_RE: Final = re.compile(r"[+-]?[0-9]+")
_PLY_MIN: Final = -(2**31)
_PLY_MAX: Final = 2**31 - 1

_EMPTY_RUN_DIGITS: Final = "123456789"
_COUNT_DIGITS: Final = "0123456789"

# Output order of hand pieces, most valuable first.
_HAND_ORDER: Final = (
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.GOLD,
    PieceType.SILVER,
    PieceType.KNIGHT,
    PieceType.LANCE,
    PieceType.PAWN,
)

_SIDE_CHARS: Final = {"b": Side.FIRST, "w": Side.SECOND}


# ── Decoding ─────────────────────────────────────────────────────────────────


def decode(text: str) -> tuple[Position, list[Move]]:
    """Parse an SFEN record into a position and its trailing move list."""
    tokens = iter(_TOKEN_RE.findall(text))
    position = _tokens_to_position(tokens)
    moves = _tokens_to_moves(tokens)
    _LOGGER.debug("Decoded SFEN record with %d move(s)", len(moves))
    return position, moves


def position_from_sfen(text: str) -> Position:
    """Parse an SFEN record that must not carry any moves."""
    position, moves = decode(text)
    if moves:
        raise SfenDecodeError(f"position: unexpected moves: {len(moves)}")
    return position


def _next_token(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise SfenDecodeError("position: incomplete")
    return token


def _tokens_to_position(tokens: Iterator[str]) -> Position:
    magic = _next_token(tokens)
    if magic == "startpos":
        _LOGGER.debug("Expanding startpos to %s", STARTPOS_SFEN)
        return _tokens_to_position(iter(STARTPOS_SFEN.split()))
    if magic != "sfen":
        raise SfenDecodeError(f"position: invalid magic: {magic}")

    board_part = _next_token(tokens)
    side_part = _next_token(tokens)
    hands_part = _next_token(tokens)
    ply_part = _next_token(tokens)

    board = decode_board(board_part)
    side = decode_side(side_part)
    hands = decode_hands(hands_part)
    ply = decode_ply(ply_part)
    return Position(side, board, hands, ply)


def _tokens_to_moves(tokens: Iterator[str]) -> list[Move]:
    magic = next(tokens, None)
    if magic is None:
        return []
    if magic != "moves":
        raise SfenDecodeError(f'moves: "moves" expected: {magic}')
    return [parse_usi_move(token) for token in tokens]


class _BoardRowScanner:
    """Scans one board row; state is the filled cell count and a pending '+'."""

    __slots__ = ("cells", "promotion_pending")

    def __init__(self) -> None:
        self.cells: list[BoardCell] = []
        self.promotion_pending = False

    def consume(self, ch: str) -> None:
        if ch == "+":
            self._ensure_room(1)
            self._ensure_not_pending()
            self.promotion_pending = True
        elif ch in _EMPTY_RUN_DIGITS:
            self._ensure_not_pending()
            run = int(ch)
            self._ensure_room(run)
            self.cells.extend([None] * run)
        else:
            resolved = side_piece_type_from_char(ch)
            if resolved is None:
                raise SfenDecodeError(f"board row: invalid char: {ch}")
            self._ensure_room(1)
            piece = Piece(*resolved)
            if self.promotion_pending:
                if piece.piece_type.promoted is None:
                    raise SfenDecodeError(f"board row: not promotable piece: {ch}")
                piece = piece.promote()
                self.promotion_pending = False
            self.cells.append(piece)

    def finish(self) -> list[BoardCell]:
        if self.promotion_pending:
            raise SfenDecodeError("board row: invalid '+'")
        if len(self.cells) != BOARD_SIZE:
            raise SfenDecodeError(f"board row: underflow: {len(self.cells)} cells")
        return self.cells

    def _ensure_room(self, count: int) -> None:
        if len(self.cells) + count > BOARD_SIZE:
            raise SfenDecodeError("board row: overflow")

    def _ensure_not_pending(self) -> None:
        if self.promotion_pending:
            raise SfenDecodeError("board row: invalid '+'")


def decode_board_row(row_text: str) -> list[BoardCell]:
    """Parse one '/'-separated board row into nine cells."""
    scanner = _BoardRowScanner()
    for ch in row_text:
        scanner.consume(ch)
    return scanner.finish()


def decode_board(board_text: str) -> Board:
    """Parse the board field: exactly nine rows, rank 'a' first."""
    rows = board_text.split("/")
    if len(rows) != BOARD_SIZE:
        raise SfenDecodeError(f"board: expected {BOARD_SIZE} rows, got {len(rows)}")
    cells: list[BoardCell] = []
    for row_text in rows:
        cells.extend(decode_board_row(row_text))
    return Board(cells)


def decode_side(side_text: str) -> Side:
    side = _SIDE_CHARS.get(side_text)
    if side is None:
        raise SfenDecodeError(f"side: invalid string: {side_text}")
    return side


class _HandsScanner:
    """Scans the hands field; state is the pending decimal count."""

    __slots__ = ("counts", "pending_count", "pending_text")

    def __init__(self) -> None:
        self.counts: tuple[dict[PieceType, int], dict[PieceType, int]] = (
            dict.fromkeys(HAND_PIECE_TYPES, 0),
            dict.fromkeys(HAND_PIECE_TYPES, 0),
        )
        self.pending_count = 0
        self.pending_text = ""

    def consume(self, ch: str) -> None:
        if ch in _COUNT_DIGITS:
            self.pending_count = self.pending_count * 10 + int(ch)
            self.pending_text += ch
            if self.pending_count > MAX_HAND_COUNT:
                raise SfenDecodeError(f"hands: overflow: {self.pending_text}")
            return

        resolved = side_piece_type_from_char(ch)
        if resolved is None:
            raise SfenDecodeError(f"hands: invalid char: {ch}")
        side, piece_type = resolved
        if not piece_type.is_hand:
            raise SfenDecodeError(f"hands: not hand piece: {ch}")

        # Repeated letters accumulate: "2p3p" holds five pawns.
        total = self.counts[side][piece_type] + (self.pending_count or 1)
        if total > MAX_HAND_COUNT:
            raise SfenDecodeError(f"hands: overflow: {ch}")
        self.counts[side][piece_type] = total
        self.pending_count = 0
        self.pending_text = ""

    def finish(self) -> tuple[Hand, Hand]:
        if self.pending_text:
            raise SfenDecodeError(f"hands: dangling count: {self.pending_text}")
        first, second = self.counts
        return Hand(first), Hand(second)


def decode_hands(hands_text: str) -> tuple[Hand, Hand]:
    """Parse the hands field into ``(first, second)``."""
    if hands_text == "-":
        return Hand.empty(), Hand.empty()
    scanner = _HandsScanner()
    for ch in hands_text:
        scanner.consume(ch)
    return scanner.finish()


def decode_ply(ply_text: str) -> int:
    if _PLY_RE.fullmatch(ply_text) is None:
        raise SfenDecodeError(f"ply: parse error: {ply_text}")
    ply = int(ply_text)
    if not (_PLY_MIN <= ply <= _PLY_MAX):
        raise SfenDecodeError(f"ply: out of range: {ply_text}")
    return ply


# ── Encoding ─────────────────────────────────────────────────────────────────


def encode(position: Position, moves: Iterable[Move] = ()) -> str:
    """Serialise a position and optional moves to canonical SFEN."""
    text = position_to_sfen(position)
    move_tokens = [move_to_usi(move) for move in moves]
    if not move_tokens:
        return text
    return " ".join([text, "moves", *move_tokens])


def position_to_sfen(position: Position) -> str:
    """Serialise a :class:`Position` to ``sfen <board> <side> <hands> <ply>``."""
    board_str = encode_board(position.board)
    side_str = encode_side(position.side_to_move)
    hands_str = encode_hands(position.hand(Side.FIRST), position.hand(Side.SECOND))
    return f"sfen {board_str} {side_str} {hands_str} {position.ply}"


def encode_board(board: Board) -> str:
    rows: list[str] = []
    for cells in board.rows():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def encode_side(side: Side) -> str:
    return "b" if side == Side.FIRST else "w"


def encode_hands(first: Hand, second: Hand) -> str:
    """Hands field: first side's pieces, then second's, each rook to pawn."""
    if first.is_empty() and second.is_empty():
        return "-"

    parts: list[str] = []
    for side, hand in ((Side.FIRST, first), (Side.SECOND, second)):
        for piece_type in _HAND_ORDER:
            count = hand.count(piece_type)
            if count == 0:
                continue
            if count >= 2:
                parts.append(str(count))
            parts.append(str(Piece(side, piece_type)))
    return "".join(parts)
