"""Board layer: the capability set the core depends on, plus adapters."""

from chesshelper.board.geometry import Rect, square_at_point, square_center
from chesshelper.board.interfaces import (
    BoardEvents,
    IChessboard,
    MoveEvent,
    MoveListener,
)
from chesshelper.board.python_chess import PythonChessBoard

__all__ = [
    "BoardEvents",
    "IChessboard",
    "MoveEvent",
    "MoveListener",
    "PythonChessBoard",
    "Rect",
    "square_at_point",
    "square_center",
]
