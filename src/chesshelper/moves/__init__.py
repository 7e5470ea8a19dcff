"""Move resolution: templates → candidates → one move."""

from chesshelper.moves.conflicts import exclude_conflicting_moves
from chesshelper.moves.keyboard import (
    DEFAULT_KEY_BINDINGS,
    DIRECTIONAL_PIECES,
    KeyBinding,
    narrow_down_moves,
)
from chesshelper.moves.piece_map import TRACKED_PIECES, DirectionalPieceMap
from chesshelper.moves.resolver import (
    LegalityOracle,
    get_legal_moves,
    get_legal_premoves,
    resolve_moves,
    resolve_premoves,
)

__all__ = [
    "DEFAULT_KEY_BINDINGS",
    "DIRECTIONAL_PIECES",
    "DirectionalPieceMap",
    "KeyBinding",
    "LegalityOracle",
    "TRACKED_PIECES",
    "exclude_conflicting_moves",
    "get_legal_moves",
    "get_legal_premoves",
    "narrow_down_moves",
    "resolve_moves",
    "resolve_premoves",
]
