"""Pointer position ↔ square mapping for an on-screen board."""

from __future__ import annotations

import math
from dataclasses import dataclass

from chesshelper.core.types import Square, file_of, make_square, rank_of


@dataclass(frozen=True, slots=True)
class Rect:
    """Screen rectangle of a square board."""

    left: float
    top: float
    width: float

    @property
    def square_size(self) -> float:
        return self.width / 8


def square_at_point(x: float, y: float, rect: Rect, flipped: bool) -> Square | None:
    """Square under the pointer, or ``None`` outside the board."""
    size = rect.square_size
    if size <= 0:
        return None
    file = math.floor((x - rect.left) / size)
    rank = 7 - math.floor((y - rect.top) / size)
    if not (0 <= file <= 7 and 0 <= rank <= 7):
        return None
    if flipped:
        file, rank = 7 - file, 7 - rank
    return make_square(file, rank)


def square_center(sq: Square, rect: Rect, flipped: bool) -> tuple[float, float]:
    """Screen coordinates of the centre of *sq*."""
    size = rect.square_size
    column, row = file_of(sq), 7 - rank_of(sq)
    if flipped:
        column, row = 7 - column, 7 - row
    return rect.left + size * (column + 0.5), rect.top + size * (row + 0.5)
