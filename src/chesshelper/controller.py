"""MoveHelper — turns text and keyboard input into moves on a board.

Coordinates: parser, resolver, directional piece map, keyboard
disambiguation and the board capability set. Reports every outcome as a
value and publishes user-facing messages via simple callbacks.

Thread-safety: methods are designed to be called from a single thread;
board move notifications must be delivered on that same thread so the
piece map is updated before the next keyboard move is resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from chesshelper.board.geometry import Rect, square_at_point
from chesshelper.board.interfaces import IChessboard, MoveEvent
from chesshelper.core.enums import PROMOTION_PIECES, Direction, OutcomeKind, PieceType
from chesshelper.core.move import Move
from chesshelper.core.notation import MoveTemplate, parse_move_input, template_to
from chesshelper.core.types import Square, rank_of, square_name
from chesshelper.moves.keyboard import DIRECTIONAL_PIECES, narrow_down_moves
from chesshelper.moves.piece_map import DirectionalPieceMap
from chesshelper.moves.resolver import get_legal_moves, get_legal_premoves
from chesshelper.settings import HelperSettings

_LOGGER = logging.getLogger(__name__)

MessageCallback = Callable[[str], None]


# ── Results ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened to one piece of user input."""

    kind: OutcomeKind
    text: str
    move: Move | None = None
    candidates: tuple[Move, ...] = ()
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.RESOLVED


@dataclass(frozen=True, slots=True)
class Markings:
    """Arrows and highlighted squares drawn for a move preview."""

    arrows: tuple[tuple[Square, Square], ...] = ()
    areas: tuple[Square, ...] = ()


@dataclass
class HelperEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_message: list[MessageCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class MoveHelper:
    """Resolves user move input against one board instance."""

    __slots__ = ("_board", "_settings", "_piece_map", "_markings", "events")

    def __init__(
        self, board: IChessboard, settings: HelperSettings | None = None
    ) -> None:
        self._board = board
        self._settings = settings or HelperSettings()
        self._piece_map = DirectionalPieceMap(board.playing_as)
        self._markings = Markings()
        self.events = HelperEvents()
        self.reset()
        board.events.on_move.append(self._on_board_move)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> IChessboard:
        return self._board

    @property
    def settings(self) -> HelperSettings:
        return self._settings

    @property
    def piece_map(self) -> DirectionalPieceMap:
        return self._piece_map

    @property
    def markings(self) -> Markings:
        return self._markings

    def reset(self) -> None:
        """Rebuild per-game state; call whenever a new game starts."""
        self._piece_map = DirectionalPieceMap.from_setup(
            self._board.get_piece_setup(), self._board.playing_as
        )
        self._markings = Markings()

    # ── Text input ───────────────────────────────────────────────────────

    def go(self, text: str) -> MoveOutcome:
        """Parse *text* and play it when it names exactly one legal move."""
        moves = get_legal_moves(self._board, parse_move_input(text))
        if len(moves) == 1:
            return self._make_move(text, moves[0])
        if moves:
            return self._report(
                OutcomeKind.AMBIGUOUS, text, f"Ambiguous move: {text}", moves
            )
        return self._report(OutcomeKind.ILLEGAL, text, f"Incorrect move: {text}")

    def preview(self, text: str) -> Markings:
        """Mark what *text* currently resolves to on the board."""
        if not self._settings.show_preview:
            self.clear_markings()
            return self._markings

        moves = get_legal_moves(self._board, parse_move_input(text))
        if len(moves) == 1:
            new_state = Markings(arrows=((moves[0].from_sq, moves[0].to_sq),))
        elif moves:
            new_state = Markings(areas=tuple(m.from_sq for m in moves))
        else:
            new_state = Markings()
        self._draw(new_state)
        return new_state

    def clear_markings(self) -> None:
        self._draw(Markings())

    # ── Keyboard + pointer input ─────────────────────────────────────────

    def go_key(self, key: str, target: Square) -> MoveOutcome | None:
        """Handle a bound *key* pressed while pointing at *target*."""
        binding = self._settings.key_bindings.get(key)
        if binding is None:
            return None
        piece, direction = binding
        return self.go_keyboard(target, piece, direction)

    def go_key_at(self, key: str, x: float, y: float, rect: Rect) -> MoveOutcome | None:
        """:meth:`go_key` with the target taken from a pointer position."""
        target = square_at_point(x, y, rect, self._board.flipped)
        if target is None:
            return None
        return self.go_key(key, target)

    def go_keyboard(
        self, target: Square, piece: PieceType, direction: Direction
    ) -> MoveOutcome:
        """Move a *piece* to *target*, disambiguating by *direction*."""
        text = square_name(target)
        if piece != PieceType.PAWN:
            text = piece.letter.upper() + text
        templates = self._keyboard_templates(target, piece)
        if self._board.is_players_turn():
            moves = get_legal_moves(self._board, templates)
        else:
            moves = get_legal_premoves(self._board, templates)

        if not moves:
            return self._report(OutcomeKind.ILLEGAL, text, f"Incorrect move: {text}")

        move: Move | None
        if len(moves) == 1:
            move = moves[0]
        elif piece in DIRECTIONAL_PIECES:
            move = narrow_down_moves(
                self._piece_map, moves, piece, direction, self._board.flipped
            )
        else:
            move = None

        if move is None:
            return self._report(
                OutcomeKind.AMBIGUOUS, text, f"Ambiguous move: {text}", moves
            )
        return self._make_move(text, move)

    @staticmethod
    def _keyboard_templates(target: Square, piece: PieceType) -> list[MoveTemplate]:
        template = template_to(piece, target)
        if piece == PieceType.PAWN and rank_of(target) in (0, 7):
            # One template per promotion piece so a queen promotion can win.
            return [
                MoveTemplate(template.piece, template.from_sq, template.to_sq, promo)
                for promo in PROMOTION_PIECES
            ]
        return [template]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _make_move(self, text: str, move: Move) -> MoveOutcome:
        board = self._board
        own_turn = board.is_players_turn()
        if own_turn and not board.is_legal_move(move.from_sq, move.to_sq):
            shown = f"{square_name(move.from_sq)}-{square_name(move.to_sq)}"
            _LOGGER.warning("Resolved move %s rejected by the board", shown)
            return self._report(
                OutcomeKind.ILLEGAL, text, f"Illegal move: {shown}", [move]
            )

        board.make_move(move.from_sq, move.to_sq, move.promotion)
        _LOGGER.info("%r resolved to %s", text, move.uci)
        return MoveOutcome(OutcomeKind.RESOLVED, text, move, (move,))

    def _report(
        self,
        kind: OutcomeKind,
        text: str,
        message: str,
        candidates: Sequence[Move] = (),
    ) -> MoveOutcome:
        _LOGGER.debug("%s: %d candidate(s)", message, len(candidates))
        for cb in self.events.on_message:
            cb(message)
        return MoveOutcome(kind, text, None, tuple(candidates), message)

    def _draw(self, new_state: Markings) -> None:
        old_state = self._markings
        if new_state == old_state:
            return
        board = self._board
        for from_sq, to_sq in old_state.arrows:
            board.unmark_arrow(from_sq, to_sq)
        for sq in old_state.areas:
            board.unmark_area(sq)
        for from_sq, to_sq in new_state.arrows:
            board.mark_arrow(from_sq, to_sq)
        for sq in new_state.areas:
            board.mark_area(sq)
        self._markings = new_state

    def _on_board_move(self, event: MoveEvent) -> None:
        self._piece_map.on_move(event)
