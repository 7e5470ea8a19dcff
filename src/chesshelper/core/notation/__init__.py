"""Notation package: free-form move text parsing into move templates."""

from chesshelper.core.notation.models import MoveTemplate, SquarePattern, template_to
from chesshelper.core.notation.parser import (
    parse_algebraic,
    parse_move_input,
    parse_uci,
)

__all__ = [
    "MoveTemplate",
    "SquarePattern",
    "template_to",
    "parse_move_input",
    "parse_uci",
    "parse_algebraic",
]
