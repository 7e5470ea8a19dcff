"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

import pytest

from chesshelper.board.interfaces import BoardEvents
from chesshelper.core.enums import Color, PieceType
from chesshelper.core.move import Move
from chesshelper.core.piece import Piece, setup_from_placement
from chesshelper.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class FakeBoard:
    """Capability-set stand-in with a fixed set of legal from/to pairs."""

    def __init__(
        self,
        setup: Mapping[Square, Piece],
        legal: Iterable[tuple[Square, Square]] = (),
        *,
        playing_as: Color = Color.WHITE,
        flipped: bool = False,
        players_turn: bool = True,
        premoves: Iterable[Move] = (),
    ) -> None:
        self.setup = dict(setup)
        self.legal = set(legal)
        self.playing_as = playing_as
        self.flipped = flipped
        self.players_turn = players_turn
        self.premoves = list(premoves)
        self.events = BoardEvents()
        self.made: list[tuple[Square, Square, PieceType | None]] = []
        self.arrows: set[tuple[Square, Square]] = set()
        self.areas: set[Square] = set()

    def get_piece_setup(self) -> dict[Square, Piece]:
        return dict(self.setup)

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        return (from_sq, to_sq) in self.legal

    def is_players_turn(self) -> bool:
        return self.players_turn

    def get_premove_candidates(self) -> list[Move]:
        return list(self.premoves)

    def make_move(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None = None
    ) -> None:
        self.made.append((from_sq, to_sq, promotion))

    def mark_arrow(self, from_sq: Square, to_sq: Square) -> None:
        self.arrows.add((from_sq, to_sq))

    def unmark_arrow(self, from_sq: Square, to_sq: Square) -> None:
        self.arrows.discard((from_sq, to_sq))

    def mark_area(self, square: Square) -> None:
        self.areas.add(square)

    def unmark_area(self, square: Square) -> None:
        self.areas.discard(square)


@pytest.fixture
def starting_setup() -> dict[Square, Piece]:
    """Piece setup of the standard initial position."""
    return setup_from_placement(STARTING_PLACEMENT)


@pytest.fixture
def fake_board() -> Callable[..., FakeBoard]:
    """Factory for :class:`FakeBoard` instances."""
    return FakeBoard
