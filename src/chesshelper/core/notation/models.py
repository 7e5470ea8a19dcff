"""Move templates: partially specified moves produced by parsing."""

from __future__ import annotations

from dataclasses import dataclass

from chesshelper.core.enums import PieceType
from chesshelper.core.types import Square, file_of, make_square, rank_of


@dataclass(frozen=True, slots=True)
class SquarePattern:
    """Square pattern where each axis is a literal index or ``None`` (any)."""

    file: int | None = None
    rank: int | None = None

    @classmethod
    def exact(cls, sq: Square) -> SquarePattern:
        return cls(file_of(sq), rank_of(sq))

    @classmethod
    def any(cls) -> SquarePattern:
        return cls()

    @property
    def is_exact(self) -> bool:
        return self.file is not None and self.rank is not None

    @property
    def square(self) -> Square | None:
        """The literal square, or ``None`` unless both axes are fixed."""
        if self.file is None or self.rank is None:
            return None
        return make_square(self.file, self.rank)

    def matches(self, sq: Square) -> bool:
        return (self.file is None or self.file == file_of(sq)) and (
            self.rank is None or self.rank == rank_of(sq)
        )

    def __str__(self) -> str:
        file_part = "." if self.file is None else "abcdefgh"[self.file]
        rank_part = "." if self.rank is None else str(self.rank + 1)
        return file_part + rank_part


@dataclass(frozen=True, slots=True)
class MoveTemplate:
    """Under-specified move intent, not yet checked against a board.

    ``piece=None`` matches any piece kind.
    """

    piece: PieceType | None
    from_sq: SquarePattern
    to_sq: SquarePattern
    promotion: PieceType | None = None

    def matches_piece(self, piece_type: PieceType) -> bool:
        return self.piece is None or self.piece == piece_type

    def __str__(self) -> str:
        piece = "." if self.piece is None else self.piece.letter
        promo = "" if self.promotion is None else "=" + self.promotion.letter
        return f"{piece}{self.from_sq}{self.to_sq}{promo}"


def template_to(piece: PieceType, to_sq: Square) -> MoveTemplate:
    """Template for "a *piece* goes to *to_sq* from anywhere"."""
    return MoveTemplate(piece, SquarePattern.any(), SquarePattern.exact(to_sq))
