"""Keyboard move disambiguation and the default key bindings."""

from __future__ import annotations

from collections.abc import Sequence

from chesshelper.core.enums import Direction, PieceType
from chesshelper.core.errors import UnsupportedPieceError
from chesshelper.core.move import Move
from chesshelper.moves.piece_map import TRACKED_PIECES, DirectionalPieceMap

KeyBinding = tuple[PieceType, Direction]

DEFAULT_KEY_BINDINGS: dict[str, KeyBinding] = {
    "q": (PieceType.PAWN, Direction.LEFT),
    "w": (PieceType.PAWN, Direction.GENERAL),
    "e": (PieceType.PAWN, Direction.RIGHT),
    "a": (PieceType.BISHOP, Direction.GENERAL),
    "s": (PieceType.KNIGHT, Direction.GENERAL),
    "d": (PieceType.KNIGHT, Direction.RIGHT),
    "z": (PieceType.ROOK, Direction.GENERAL),
    "x": (PieceType.ROOK, Direction.RIGHT),
    " ": (PieceType.QUEEN, Direction.GENERAL),
    "c": (PieceType.QUEEN, Direction.RIGHT),
    "Shift": (PieceType.KING, Direction.GENERAL),
}

DIRECTIONAL_PIECES: tuple[PieceType, ...] = (PieceType.PAWN, *TRACKED_PIECES)


def narrow_down_moves(
    piece_map: DirectionalPieceMap,
    candidates: Sequence[Move],
    piece: PieceType,
    direction: Direction,
    flipped: bool,
) -> Move | None:
    """Pick one of several legal *candidates* for a keyboard gesture.

    Returns ``None`` when the gesture does not single out exactly one move.
    Bishops and kings have no directional roles; asking for them raises
    :class:`UnsupportedPieceError`.
    """
    if piece not in DIRECTIONAL_PIECES:
        raise UnsupportedPieceError(
            f"Directional addressing is undefined for {piece.name.lower()}"
        )
    if not candidates:
        return None
    if piece == PieceType.PAWN:
        return _narrow_down_pawn_moves(candidates, direction, flipped)

    start = piece_map.get(piece, direction)
    if start is None:
        return None
    return _single([m for m in candidates if m.from_sq == start])


def _narrow_down_pawn_moves(
    candidates: Sequence[Move], direction: Direction, flipped: bool
) -> Move | None:
    # Auto-promotion to a queen wins over any direction.
    queen = _queen_promotion(candidates)
    if queen is not None:
        return queen

    if direction == Direction.GENERAL:
        chosen = [m for m in candidates if m.file_delta == 0]
    else:
        # LEFT is the pawn standing left of the target from the player's view.
        towards_h = (direction == Direction.LEFT) != flipped
        sign = 1 if towards_h else -1
        chosen = [m for m in candidates if m.file_delta * sign > 0]
    if chosen:
        queen = _queen_promotion(chosen)
        if queen is not None:
            return queen
    return _single(chosen)


def _queen_promotion(moves: Sequence[Move]) -> Move | None:
    """The queen promotion when all *moves* start from one square."""
    first = moves[0]
    if any(m.from_sq != first.from_sq for m in moves):
        return None
    for move in moves:
        if move.promotion == PieceType.QUEEN:
            return move
    return None


def _single(moves: list[Move]) -> Move | None:
    return moves[0] if len(moves) == 1 else None
