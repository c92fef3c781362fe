"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from shogie.core.notation import STARTPOS_SFEN, decode
from shogie.core.position import Position

# A middlegame position with promoted pieces on both sides and mixed hands.
MIDGAME_SFEN = (
    "sfen 8l/1l+R2P3/p2pBG1pp/kps1p4/Nn1P2G2/P1P1P2PP/1PS6/1KSG3+r1/LN2+p3L w Sbgn3p 1"
)

OPENING_MOVES_SFEN = (
    "sfen lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL b - 1 "
    "moves 7g7f 3c3d 8h2b+ 3a2b B*4e B*8e 4e3d 8e7f"
)


@pytest.fixture
def start_position() -> Position:
    """Position decoded from the canonical starting record."""
    position, _moves = decode(STARTPOS_SFEN)
    return position


@pytest.fixture
def midgame_position() -> Position:
    position, _moves = decode(MIDGAME_SFEN)
    return position


@pytest.fixture
def midgame_sfen() -> str:
    return MIDGAME_SFEN


@pytest.fixture
def opening_moves_sfen() -> str:
    return OPENING_MOVES_SFEN
