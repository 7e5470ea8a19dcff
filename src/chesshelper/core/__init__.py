"""Core domain layer — move-input primitives with zero external dependencies.

Quick start::

    from chesshelper.core import parse_move_input

    for template in parse_move_input("Nf3"):
        print(template)          # n..f3
"""

from chesshelper.core.enums import (
    PROMOTION_PIECES,
    Color,
    Direction,
    MoveType,
    OutcomeKind,
    PieceType,
)
from chesshelper.core.errors import (
    PieceMapNotInitializedError,
    PreconditionError,
    UnsupportedPieceError,
)
from chesshelper.core.move import Move
from chesshelper.core.notation import (
    MoveTemplate,
    SquarePattern,
    parse_algebraic,
    parse_move_input,
    parse_uci,
    template_to,
)
from chesshelper.core.piece import Piece, PieceSetup, setup_from_placement
from chesshelper.core.types import (
    Square,
    file_of,
    is_square_name,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "Direction",
    "MoveType",
    "OutcomeKind",
    "PieceType",
    "PROMOTION_PIECES",
    # Errors
    "PreconditionError",
    "PieceMapNotInitializedError",
    "UnsupportedPieceError",
    # Types / helpers
    "Square",
    "file_of",
    "is_square_name",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Move",
    "Piece",
    "PieceSetup",
    "setup_from_placement",
    # Notation
    "MoveTemplate",
    "SquarePattern",
    "parse_algebraic",
    "parse_move_input",
    "parse_uci",
    "template_to",
]
