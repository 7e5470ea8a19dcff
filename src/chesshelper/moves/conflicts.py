"""Tie-breaking among candidates produced by genuinely ambiguous notation."""

from __future__ import annotations

from collections.abc import Sequence

from chesshelper.core.enums import PieceType
from chesshelper.core.move import Move

_PAWN_OVER_BISHOP = frozenset({PieceType.BISHOP, PieceType.PAWN})


def exclude_conflicting_moves(moves: Sequence[Move]) -> list[Move]:
    """Drop candidates that lose a known notation conflict.

    ``bxc3`` reads both as a b-pawn capture and as a bishop move; when the
    candidates are exactly bishop and pawn moves the pawn wins. Anything else
    is returned unchanged.
    """
    if {m.piece for m in moves} == _PAWN_OVER_BISHOP:
        return [m for m in moves if m.piece == PieceType.PAWN]
    return list(moves)
