"""Board capability set consumed by the move-input core.

Concrete boards (a host page widget, an in-memory ``python-chess`` board,
test fakes) are never subclassed from a common base; the core only relies on
the structural :class:`IChessboard` protocol below.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from chesshelper.core.enums import Color, MoveType, PieceType
from chesshelper.core.move import Move
from chesshelper.core.piece import PieceSetup
from chesshelper.core.types import Square

# ── Move notifications ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveEvent:
    """A move that has just been played on the board, by either side."""

    piece: PieceType
    color: Color
    from_sq: Square
    to_sq: Square
    move_type: MoveType = MoveType.MOVE
    captured: PieceType | None = None
    promotion: PieceType | None = None
    check: bool = False
    checkmate: bool = False

    @classmethod
    def from_san(
        cls,
        san: str,
        *,
        piece: PieceType,
        color: Color,
        from_sq: Square,
        to_sq: Square,
        captured: PieceType | None = None,
        promotion: PieceType | None = None,
    ) -> MoveEvent:
        """Build an event, deriving the move type and check flags from *san*."""
        if san.startswith("O-O-O"):
            move_type = MoveType.LONG_CASTLING
        elif san.startswith("O-O"):
            move_type = MoveType.SHORT_CASTLING
        elif captured is not None:
            move_type = MoveType.CAPTURE
        else:
            move_type = MoveType.MOVE
        return cls(
            piece=piece,
            color=color,
            from_sq=from_sq,
            to_sq=to_sq,
            move_type=move_type,
            captured=captured,
            promotion=promotion,
            check=san.endswith("+"),
            checkmate=san.endswith("#"),
        )


MoveListener = Callable[[MoveEvent], None]


@dataclass
class BoardEvents:
    """Observable callbacks. Multiple handlers per event, called in order."""

    on_move: list[MoveListener] = field(default_factory=list)

    def emit_move(self, event: MoveEvent) -> None:
        for cb in self.on_move:
            cb(event)


# ── Capability set ───────────────────────────────────────────────────────────


class IChessboard(Protocol):
    """Everything the core needs from a live board."""

    events: BoardEvents

    @property
    def playing_as(self) -> Color:
        """Side the local player controls."""
        ...

    @property
    def flipped(self) -> bool:
        """True when the board is drawn from black's side."""
        ...

    def get_piece_setup(self) -> PieceSetup:
        """Current occupancy snapshot."""
        ...

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Legality oracle for a from/to pair in the current position."""
        ...

    def is_players_turn(self) -> bool: ...

    def get_premove_candidates(self) -> Sequence[Move]:
        """Fully concrete moves the player may queue before their turn."""
        ...

    def make_move(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None = None
    ) -> None: ...

    def mark_arrow(self, from_sq: Square, to_sq: Square) -> None: ...

    def unmark_arrow(self, from_sq: Square, to_sq: Square) -> None: ...

    def mark_area(self, square: Square) -> None: ...

    def unmark_area(self, square: Square) -> None: ...
