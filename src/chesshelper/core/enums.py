"""Core enumerations for the move-input domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Board side. WHITE moves first."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank index of the side's back rank (0 for white, 7 for black)."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds, each written as a single lowercase letter."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return _LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        """Piece kind for a letter in either case, e.g. 'N' → KNIGHT."""
        try:
            return _LETTERS_REV[letter.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None

    def __str__(self) -> str:
        return self.letter


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTERS_REV: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

PROMOTION_PIECES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class Direction(Enum):
    """Role of a piece among same-kind pieces, from the mover's own view."""

    GENERAL = "general"
    LEFT = "left"
    RIGHT = "right"


class MoveType(Enum):
    """Coarse classification of a reported move."""

    MOVE = "move"
    CAPTURE = "capture"
    SHORT_CASTLING = "short-castling"
    LONG_CASTLING = "long-castling"

    @property
    def is_castling(self) -> bool:
        return self in (MoveType.SHORT_CASTLING, MoveType.LONG_CASTLING)


class OutcomeKind(IntEnum):
    """Result of turning user input into a move."""

    RESOLVED = 0
    AMBIGUOUS = 1
    ILLEGAL = 2
