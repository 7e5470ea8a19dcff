"""Tests for template → candidate resolution (live and premove)."""

from chesshelper.core.enums import PieceType
from chesshelper.core.move import Move
from chesshelper.core.notation import parse_move_input, template_to
from chesshelper.core.piece import setup_from_placement
from chesshelper.core.types import (
    A1,
    A7,
    A8,
    B1,
    B2,
    C3,
    D1,
    D2,
    D3,
    E1,
    E2,
    E4,
    E7,
    E8,
    F3,
    G1,
    G8,
    H1,
    make_square,
)
from chesshelper.moves.resolver import (
    get_legal_moves,
    get_legal_premoves,
    resolve_moves,
    resolve_premoves,
)

DOUBLE_STEPS = {(make_square(f, 1), make_square(f, 3)) for f in range(8)}


def _oracle(legal: set[tuple[int, int]]):
    return lambda from_sq, to_sq: (from_sq, to_sq) in legal


class TestResolveMoves:
    def test_uci_pawn_double_step(self, starting_setup) -> None:
        moves = resolve_moves(
            parse_move_input("e2e4"), starting_setup, True, _oracle(DOUBLE_STEPS)
        )
        assert moves == [Move(PieceType.PAWN, E2, E4)]

    def test_knight_filtered_by_oracle(self, starting_setup) -> None:
        moves = resolve_moves(
            parse_move_input("Nf3"), starting_setup, True, _oracle({(G1, F3)})
        )
        assert moves == [Move(PieceType.KNIGHT, G1, F3)]

    def test_not_players_turn(self, starting_setup) -> None:
        moves = resolve_moves(
            parse_move_input("e2e4"), starting_setup, False, _oracle(DOUBLE_STEPS)
        )
        assert moves == []

    def test_no_templates(self, starting_setup) -> None:
        assert resolve_moves([], starting_setup, True, _oracle(DOUBLE_STEPS)) == []

    def test_pawn_beats_bishop(self) -> None:
        setup = setup_from_placement("4k3/8/8/8/8/2n5/1P6/4BK2")
        moves = resolve_moves(
            parse_move_input("bxc3"), setup, True, _oracle({(B2, C3), (E1, C3)})
        )
        assert moves == [Move(PieceType.PAWN, B2, C3)]

    def test_same_move_from_both_readings_counts_once(self) -> None:
        setup = setup_from_placement("4k3/8/8/8/8/8/1B6/4K3")
        moves = resolve_moves(
            parse_move_input("b2-c3"), setup, True, _oracle({(B2, C3)})
        )
        assert moves == [Move(PieceType.BISHOP, B2, C3)]

    def test_bishop_alone_survives(self) -> None:
        setup = setup_from_placement("4k3/8/8/8/8/2n5/8/4BK2")
        moves = resolve_moves(
            parse_move_input("bxc3"), setup, True, _oracle({(E1, C3)})
        )
        assert moves == [Move(PieceType.BISHOP, E1, C3)]

    def test_ambiguous_rooks(self) -> None:
        setup = setup_from_placement("4k3/8/8/8/8/8/8/R5KR")
        oracle = _oracle({(A1, D1), (H1, D1)})
        moves = resolve_moves(parse_move_input("Rd1"), setup, True, oracle)
        assert moves == [
            Move(PieceType.ROOK, A1, D1),
            Move(PieceType.ROOK, H1, D1),
        ]
        assert resolve_moves(parse_move_input("Rad1"), setup, True, oracle) == [
            Move(PieceType.ROOK, A1, D1)
        ]

    def test_wildcard_destination_never_resolves(self) -> None:
        setup = setup_from_placement("4k3/8/8/8/8/8/8/R5K1")
        moves = resolve_moves(
            parse_move_input("Ra"), setup, True, lambda _f, _t: True
        )
        assert moves == []

    def test_promotion_without_piece_is_excluded(self) -> None:
        setup = setup_from_placement("4k3/P7/8/8/8/8/8/4K3")
        oracle = _oracle({(A7, A8)})
        assert resolve_moves(parse_move_input("a7a8"), setup, True, oracle) == []
        assert resolve_moves(parse_move_input("a8"), setup, True, oracle) == []

    def test_promotion_with_piece(self) -> None:
        setup = setup_from_placement("4k3/P7/8/8/8/8/8/4K3")
        oracle = _oracle({(A7, A8)})
        expected = [Move(PieceType.PAWN, A7, A8, PieceType.QUEEN)]
        assert resolve_moves(parse_move_input("a7a8q"), setup, True, oracle) == expected
        assert resolve_moves(parse_move_input("a8=Q"), setup, True, oracle) == expected

    def test_promotion_dropped_off_promotion_rank(self, starting_setup) -> None:
        moves = resolve_moves(
            parse_move_input("g1f3q"), starting_setup, True, _oracle({(G1, F3)})
        )
        assert moves == [Move(PieceType.KNIGHT, G1, F3)]

    def test_castling_for_side_to_move_only(self) -> None:
        setup = setup_from_placement("r3k2r/8/8/8/8/8/8/R3K2R")
        moves = resolve_moves(
            parse_move_input("O-O"), setup, True, _oracle({(E1, G1)})
        )
        assert moves == [Move(PieceType.KING, E1, G1)]

    def test_black_castling(self) -> None:
        setup = setup_from_placement("r3k2r/8/8/8/8/8/8/R3K2R")
        moves = resolve_moves(
            parse_move_input("0-0"), setup, True, _oracle({(E8, G8)})
        )
        assert moves == [Move(PieceType.KING, E8, G8)]

    def test_uci_roundtrip(self, starting_setup) -> None:
        oracle = _oracle(DOUBLE_STEPS | {(G1, F3), (B1, C3)})
        for text in ("e4", "d4", "Nf3", "Nc3"):
            (move,) = resolve_moves(parse_move_input(text), starting_setup, True, oracle)
            again = resolve_moves(parse_move_input(move.uci), starting_setup, True, oracle)
            assert again == [move]

    def test_uci_roundtrip_with_promotion(self) -> None:
        setup = setup_from_placement("4k3/P7/8/8/8/8/8/4K3")
        oracle = _oracle({(A7, A8)})
        (move,) = resolve_moves(parse_move_input("a8=N"), setup, True, oracle)
        assert resolve_moves(parse_move_input(move.uci), setup, True, oracle) == [move]


class TestResolvePremoves:
    CANDIDATES = [
        Move(PieceType.PAWN, E2, E4),
        Move(PieceType.PAWN, E2, D3),
        Move(PieceType.KNIGHT, G1, F3),
        Move(PieceType.PAWN, E7, E8, PieceType.QUEEN),
        Move(PieceType.PAWN, E7, E8, PieceType.ROOK),
    ]

    def test_filters_by_piece_and_destination(self) -> None:
        moves = resolve_premoves([template_to(PieceType.PAWN, E4)], self.CANDIDATES)
        assert moves == [Move(PieceType.PAWN, E2, E4)]

    def test_wildcard_piece(self) -> None:
        moves = resolve_premoves(parse_move_input("g1f3"), self.CANDIDATES)
        assert moves == [Move(PieceType.KNIGHT, G1, F3)]

    def test_promotion_must_match(self) -> None:
        assert resolve_premoves([template_to(PieceType.PAWN, E8)], self.CANDIDATES) == []
        moves = resolve_premoves(parse_move_input("e8=R"), self.CANDIDATES)
        assert moves == [Move(PieceType.PAWN, E7, E8, PieceType.ROOK)]

    def test_duplicates_collapse(self) -> None:
        templates = [template_to(PieceType.PAWN, E4)] * 2
        moves = resolve_premoves(templates, self.CANDIDATES)
        assert moves == [Move(PieceType.PAWN, E2, E4)]

    def test_no_templates(self) -> None:
        assert resolve_premoves([], self.CANDIDATES) == []


class TestBoardWrappers:
    def test_get_legal_moves(self, fake_board, starting_setup) -> None:
        board = fake_board(starting_setup, DOUBLE_STEPS)
        assert get_legal_moves(board, parse_move_input("d4")) == [
            Move(PieceType.PAWN, make_square(3, 1), make_square(3, 3))
        ]

    def test_get_legal_moves_off_turn(self, fake_board, starting_setup) -> None:
        board = fake_board(starting_setup, DOUBLE_STEPS, players_turn=False)
        assert get_legal_moves(board, parse_move_input("d4")) == []

    def test_get_legal_premoves(self, fake_board, starting_setup) -> None:
        premove = Move(PieceType.KNIGHT, B1, D2)
        board = fake_board(starting_setup, players_turn=False, premoves=[premove])
        assert get_legal_premoves(board, [template_to(PieceType.KNIGHT, D2)]) == [premove]
