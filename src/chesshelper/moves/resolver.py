"""Expand move templates into concrete candidate moves against a board."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from chesshelper.core.enums import PieceType
from chesshelper.core.move import Move
from chesshelper.core.notation.models import MoveTemplate
from chesshelper.core.piece import PieceSetup
from chesshelper.core.types import Square, rank_of
from chesshelper.moves.conflicts import exclude_conflicting_moves

if TYPE_CHECKING:
    from chesshelper.board.interfaces import IChessboard

_LOGGER = logging.getLogger(__name__)

LegalityOracle = Callable[[Square, Square], bool]

_PROMOTION_RANKS = (0, 7)


def resolve_moves(
    templates: Sequence[MoveTemplate],
    piece_setup: PieceSetup,
    is_players_turn: bool,
    is_legal_move: LegalityOracle,
) -> list[Move]:
    """Every legal move matching any of *templates*, conflicts excluded.

    A template can expand into several moves (two rooks reaching the same
    square); the caller decides what more than one result means.
    """
    if not templates or not is_players_turn:
        return []

    legal: list[Move] = []
    for template in templates:
        to_sq = template.to_sq.square
        if to_sq is None:
            continue
        promotes = rank_of(to_sq) in _PROMOTION_RANKS

        for from_sq, piece in sorted(piece_setup.items()):
            is_pawn = piece.piece_type == PieceType.PAWN
            # A promotion without a chosen piece is not actionable.
            if is_pawn and promotes and template.promotion is None:
                continue
            if not template.matches_piece(piece.piece_type):
                continue
            if not template.from_sq.matches(from_sq):
                continue
            if not is_legal_move(from_sq, to_sq):
                continue
            legal.append(
                Move(
                    piece=piece.piece_type,
                    from_sq=from_sq,
                    to_sq=to_sq,
                    promotion=template.promotion if is_pawn and promotes else None,
                )
            )

    # UCI and algebraic readings of the same text can name the same move.
    legal = list(dict.fromkeys(legal))
    _LOGGER.debug("Resolved %d template(s) into %d move(s)", len(templates), len(legal))
    return exclude_conflicting_moves(legal)


def resolve_premoves(
    templates: Sequence[MoveTemplate],
    premove_candidates: Iterable[Move],
) -> list[Move]:
    """Filter precomputed premoves by *templates*; occupancy is not consulted."""
    if not templates:
        return []

    candidates = list(premove_candidates)
    moves: list[Move] = []
    for template in templates:
        to_sq = template.to_sq.square
        for candidate in candidates:
            if (
                template.matches_piece(candidate.piece)
                and template.from_sq.matches(candidate.from_sq)
                and candidate.to_sq == to_sq
                and candidate.promotion == template.promotion
            ):
                moves.append(candidate)

    moves = list(dict.fromkeys(moves))
    _LOGGER.debug("Legal premoves are %s", [m.uci for m in moves])
    return moves


def get_legal_moves(
    board: IChessboard, templates: Sequence[MoveTemplate]
) -> list[Move]:
    """:func:`resolve_moves` against a live board."""
    if not templates or not board.is_players_turn():
        return []
    return resolve_moves(
        templates, board.get_piece_setup(), True, board.is_legal_move
    )


def get_legal_premoves(
    board: IChessboard, templates: Sequence[MoveTemplate]
) -> list[Move]:
    """:func:`resolve_premoves` against a live board."""
    if not templates:
        return []
    return resolve_premoves(templates, board.get_premove_candidates())
