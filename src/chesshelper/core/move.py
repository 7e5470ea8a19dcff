"""Concrete move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chesshelper.core.enums import PieceType
from chesshelper.core.types import Square, file_of, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A fully resolved move; legality is still up to the board."""

    piece: PieceType
    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def file_delta(self) -> int:
        """Signed file change, positive towards the h-file."""
        return file_of(self.to_sq) - file_of(self.from_sq)
