"""Directional piece map: which knight/rook/queen is the "left" or "right" one.

Keyboard control addresses same-kind pieces by a remembered role instead of
coordinates. The map is built once from the starting layout of the player's
own side and then kept in step with every reported move:

* own move of a tracked piece: the role pointing at the origin square is
  moved to the destination square;
* opponent capture of a tracked piece: the role pointing at the captured
  square is dropped;
* castling: the rook's new square is derived from the king's destination,
  since the rook's origin is not part of the notation.

Known limitation: a promoted piece is never added to the map, so a second
queen obtained by promotion is not directionally addressable.
"""

from __future__ import annotations

import logging

from chesshelper.board.interfaces import MoveEvent
from chesshelper.core.enums import Color, Direction, MoveType, PieceType
from chesshelper.core.errors import PieceMapNotInitializedError, UnsupportedPieceError
from chesshelper.core.piece import PieceSetup
from chesshelper.core.types import Square, file_of, make_square, rank_of, square_name

_LOGGER = logging.getLogger(__name__)

TRACKED_PIECES: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.QUEEN,
)

# Rook destination files after castling.
_SHORT_CASTLING_ROOK_FILE = 5
_LONG_CASTLING_ROOK_FILE = 3


class DirectionalPieceMap:
    """Mutable ``PieceType → Direction → Square`` registry for one side."""

    __slots__ = ("_color", "_entries")

    def __init__(self, color: Color) -> None:
        self._color = color
        self._entries: dict[PieceType, dict[Direction, Square]] | None = None

    @classmethod
    def from_setup(cls, setup: PieceSetup, color: Color) -> DirectionalPieceMap:
        piece_map = cls(color)
        piece_map.initialize(setup)
        return piece_map

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def color(self) -> Color:
        return self._color

    @property
    def is_initialized(self) -> bool:
        return self._entries is not None

    # ── Building ─────────────────────────────────────────────────────────

    def initialize(self, setup: PieceSetup) -> None:
        """Rebuild the map from scratch out of *setup*.

        Pieces are ordered left to right from the player's own view; the
        first becomes GENERAL and the last, if different, RIGHT.
        """
        self._entries = {}
        for piece_type in TRACKED_PIECES:
            squares = sorted(
                (
                    sq
                    for sq, piece in setup.items()
                    if piece.color == self._color and piece.piece_type == piece_type
                ),
                key=self._view_order,
            )
            if not squares:
                continue
            self.set(piece_type, Direction.GENERAL, squares[0])
            if squares[-1] != squares[0]:
                self.set(piece_type, Direction.RIGHT, squares[-1])
        _LOGGER.debug("Piece map for %s initialised: %s", self._color, self)

    def _view_order(self, sq: Square) -> tuple[int, int]:
        if self._color == Color.WHITE:
            return file_of(sq), -rank_of(sq)
        return -file_of(sq), rank_of(sq)

    # ── Queries ──────────────────────────────────────────────────────────

    def _require(self) -> dict[PieceType, dict[Direction, Square]]:
        if self._entries is None:
            raise PieceMapNotInitializedError("Piece map is not initialized")
        return self._entries

    def get(self, piece_type: PieceType, direction: Direction) -> Square | None:
        """Square registered for (*piece_type*, *direction*), if any."""
        entries = self._require()
        if piece_type not in TRACKED_PIECES:
            raise UnsupportedPieceError(
                f"Piece {piece_type.name.lower()} is not directionally tracked"
            )
        return entries.get(piece_type, {}).get(direction)

    def directions(self, piece_type: PieceType) -> dict[Direction, Square]:
        """Copy of every role registered for *piece_type*."""
        return dict(self._require().get(piece_type, {}))

    def as_dict(self) -> dict[PieceType, dict[Direction, Square]]:
        return {pt: dict(roles) for pt, roles in self._require().items()}

    def __str__(self) -> str:
        if self._entries is None:
            return "<uninitialized>"
        parts = []
        for piece_type, roles in self._entries.items():
            inner = ", ".join(
                f"{d.value}={square_name(sq)}" for d, sq in roles.items()
            )
            parts.append(f"{piece_type.letter}: {{{inner}}}")
        return "{" + "; ".join(parts) + "}"

    # ── Mutation ─────────────────────────────────────────────────────────

    def set(self, piece_type: PieceType, direction: Direction, sq: Square) -> None:
        self._require().setdefault(piece_type, {})[direction] = sq

    def discard(self, piece_type: PieceType, direction: Direction) -> None:
        entries = self._require()
        roles = entries.get(piece_type)
        if roles is None:
            return
        roles.pop(direction, None)
        if not roles:
            del entries[piece_type]

    def on_move(self, event: MoveEvent) -> None:
        """Apply one reported move; events must arrive in game order."""
        self._require()
        if event.color == self._color:
            if event.move_type.is_castling:
                self._on_castling(event)
            else:
                self._on_own_move(event)
        elif event.captured is not None:
            self._on_capture(event)

    def _find(self, piece_type: PieceType, sq: Square) -> Direction | None:
        for direction, registered in self._require().get(piece_type, {}).items():
            if registered == sq:
                return direction
        return None

    def _on_own_move(self, event: MoveEvent) -> None:
        if event.piece not in TRACKED_PIECES:
            return
        direction = self._find(event.piece, event.from_sq)
        if direction is None:
            return
        self.set(event.piece, direction, event.to_sq)
        _LOGGER.debug(
            "Piece map: %s %s %s -> %s",
            event.piece.name.lower(),
            direction.value,
            square_name(event.from_sq),
            square_name(event.to_sq),
        )

    def _on_capture(self, event: MoveEvent) -> None:
        assert event.captured is not None
        if event.captured not in TRACKED_PIECES:
            return
        direction = self._find(event.captured, event.to_sq)
        if direction is None:
            return
        self.discard(event.captured, direction)
        _LOGGER.debug(
            "Piece map: %s %s captured on %s",
            event.captured.name.lower(),
            direction.value,
            square_name(event.to_sq),
        )

    def _on_castling(self, event: MoveEvent) -> None:
        rooks = self._require().get(PieceType.ROOK)
        if not rooks:
            return

        kingside = event.move_type == MoveType.SHORT_CASTLING
        king_file = file_of(event.from_sq)
        rank = rank_of(event.to_sq)
        rook_file = _SHORT_CASTLING_ROOK_FILE if kingside else _LONG_CASTLING_ROOK_FILE
        rook_to = make_square(rook_file, rank)

        if len(rooks) == 1:
            direction = next(iter(rooks))
        else:
            on_side = [
                (d, sq)
                for d, sq in rooks.items()
                if rank_of(sq) == rank
                and (file_of(sq) > king_file if kingside else file_of(sq) < king_file)
            ]
            if not on_side:
                return
            # The castling rook is the outermost one on that side.
            direction, _ = max(
                on_side, key=lambda item: abs(file_of(item[1]) - king_file)
            )

        rooks[direction] = rook_to
        _LOGGER.debug(
            "Piece map: rook %s castled to %s", direction.value, square_name(rook_to)
        )
