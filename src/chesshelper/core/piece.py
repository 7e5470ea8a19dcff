"""Piece value object and the board occupancy snapshot type."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from chesshelper.core.enums import Color, PieceType
from chesshelper.core.types import Square


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece_type = PieceType.from_letter(char)
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)


# Every occupied square of the live board; a read-only snapshot.
PieceSetup: TypeAlias = Mapping[Square, Piece]


def setup_from_placement(placement: str) -> dict[Square, Piece]:
    """Build a piece setup from the placement field of a FEN string."""
    ranks = placement.split()[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    setup: dict[Square, Piece] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                file += int(ch)
            else:
                if file >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                setup[rank * 8 + file] = Piece.from_char(ch)
                file += 1
        if file != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return setup
