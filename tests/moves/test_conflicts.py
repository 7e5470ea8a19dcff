"""Tests for candidate conflict resolution."""

from chesshelper.core.enums import PieceType
from chesshelper.core.move import Move
from chesshelper.core.types import A1, B2, C3, D1, D2, E1, H1
from chesshelper.moves.conflicts import exclude_conflicting_moves

PAWN = Move(PieceType.PAWN, B2, C3)
BISHOP = Move(PieceType.BISHOP, E1, C3)


class TestExcludeConflictingMoves:
    def test_pawn_preferred_over_bishop(self) -> None:
        assert exclude_conflicting_moves([BISHOP, PAWN]) == [PAWN]
        assert exclude_conflicting_moves([PAWN, BISHOP]) == [PAWN]

    def test_identity_otherwise(self) -> None:
        rooks = [Move(PieceType.ROOK, A1, D1), Move(PieceType.ROOK, H1, D1)]
        assert exclude_conflicting_moves(rooks) == rooks

    def test_single_and_empty(self) -> None:
        assert exclude_conflicting_moves([BISHOP]) == [BISHOP]
        assert exclude_conflicting_moves([]) == []

    def test_other_kinds_alongside_are_kept(self) -> None:
        knight = Move(PieceType.KNIGHT, B2, D2)
        moves = [PAWN, BISHOP, knight]
        assert exclude_conflicting_moves(moves) == moves
