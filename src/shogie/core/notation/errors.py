"""Notation-layer error types."""

from __future__ import annotations


class SfenDecodeError(ValueError):
    """Raised when text does not conform to the SFEN/USI grammar.

    The message names the field and the offending text, e.g.
    ``"board row: invalid char: x"``.
    """
