"""In-memory board adapter backed by ``python-chess``.

Implements the :class:`~chesshelper.board.interfaces.IChessboard` capability
set so the move-input core can run without a host page: scripts, the console
app and the test-suite all drive it.
"""

from __future__ import annotations

import logging

import chess

from chesshelper.board.interfaces import BoardEvents, MoveEvent
from chesshelper.core.enums import Color, PieceType
from chesshelper.core.move import Move
from chesshelper.core.piece import Piece
from chesshelper.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)


def _to_color(color: chess.Color) -> Color:
    return Color.WHITE if color == chess.WHITE else Color.BLACK


def _to_chess_color(color: Color) -> chess.Color:
    return chess.WHITE if color == Color.WHITE else chess.BLACK


def _to_piece_type(piece_type: chess.PieceType | None) -> PieceType | None:
    return None if piece_type is None else PieceType(piece_type)


class PythonChessBoard:
    """Board capability set over a :class:`chess.Board`.

    Args:
        fen: Starting position; the standard one when omitted.
        playing_as: Side controlled by the local player.
        flipped: Draw orientation; defaults to the player's own side at the
            bottom.
        analysis: When true every turn belongs to the player.
    """

    def __init__(
        self,
        fen: str | None = None,
        *,
        playing_as: Color = Color.WHITE,
        flipped: bool | None = None,
        analysis: bool = False,
    ) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)
        self._playing_as = playing_as
        self._flipped = playing_as == Color.BLACK if flipped is None else flipped
        self._analysis = analysis
        self._premove: Move | None = None
        self.events = BoardEvents()
        self.arrows: set[tuple[Square, Square]] = set()
        self.areas: set[Square] = set()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> chess.Board:
        return self._board

    @property
    def playing_as(self) -> Color:
        return self._playing_as

    @property
    def flipped(self) -> bool:
        return self._flipped

    @flipped.setter
    def flipped(self, value: bool) -> None:
        self._flipped = value

    @property
    def premove(self) -> Move | None:
        """Premove queued for the player's next turn, if any."""
        return self._premove

    # ── Capability set ───────────────────────────────────────────────────

    def get_piece_setup(self) -> dict[Square, Piece]:
        return {
            sq: Piece(_to_color(p.color), PieceType(p.piece_type))
            for sq, p in self._board.piece_map().items()
        }

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        return any(
            m.from_square == from_sq and m.to_square == to_sq
            for m in self._board.legal_moves
        )

    def is_players_turn(self) -> bool:
        if self._analysis:
            return True
        return self._board.turn == _to_chess_color(self._playing_as)

    def get_premove_candidates(self) -> list[Move]:
        """Player's pseudo-legal moves as if it were their turn, plus pawn
        diagonal steps onto any square not held by their own pieces."""
        board = self._board.copy(stack=False)
        board.turn = _to_chess_color(self._playing_as)
        board.ep_square = None

        seen: set[Move] = set()
        candidates: list[Move] = []

        def add(move: Move) -> None:
            if move not in seen:
                seen.add(move)
                candidates.append(move)

        for m in board.pseudo_legal_moves:
            piece = board.piece_type_at(m.from_square)
            assert piece is not None
            add(
                Move(
                    PieceType(piece),
                    m.from_square,
                    m.to_square,
                    _to_piece_type(m.promotion),
                )
            )

        own = board.occupied_co[board.turn]
        step = 8 if board.turn == chess.WHITE else -8
        for from_sq in board.pieces(chess.PAWN, board.turn):
            for file_step in (-1, 1):
                file = chess.square_file(from_sq) + file_step
                to_sq = from_sq + step + file_step
                if not (0 <= file <= 7 and 0 <= to_sq <= 63):
                    continue
                if own & chess.BB_SQUARES[to_sq]:
                    continue
                if chess.square_rank(to_sq) in (0, 7):
                    for promo in (chess.QUEEN, chess.ROOK, chess.BISHOP, chess.KNIGHT):
                        add(Move(PieceType.PAWN, from_sq, to_sq, PieceType(promo)))
                else:
                    add(Move(PieceType.PAWN, from_sq, to_sq))
        return candidates

    def make_move(
        self, from_sq: Square, to_sq: Square, promotion: PieceType | None = None
    ) -> None:
        """Play the player's move, or queue it as a premove off-turn."""
        if not self.is_players_turn():
            piece = self._board.piece_type_at(from_sq)
            if piece is None:
                raise ValueError(f"No piece on {square_name(from_sq)}")
            self._premove = Move(PieceType(piece), from_sq, to_sq, promotion)
            _LOGGER.info("Premove queued: %s", self._premove.uci)
            return

        move = chess.Move(from_sq, to_sq, None if promotion is None else int(promotion))
        if move not in self._board.legal_moves:
            raise ValueError(f"Illegal move: {move.uci()}")
        self._push(move)

    def push_san(self, san: str) -> None:
        """Play *san* for whichever side is to move, then any due premove."""
        self._push(self._board.parse_san(san))
        self._play_premove()

    def mark_arrow(self, from_sq: Square, to_sq: Square) -> None:
        self.arrows.add((from_sq, to_sq))

    def unmark_arrow(self, from_sq: Square, to_sq: Square) -> None:
        self.arrows.discard((from_sq, to_sq))

    def mark_area(self, square: Square) -> None:
        self.areas.add(square)

    def unmark_area(self, square: Square) -> None:
        self.areas.discard(square)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _push(self, move: chess.Move) -> None:
        board = self._board
        piece = board.piece_at(move.from_square)
        assert piece is not None
        if board.is_en_passant(move):
            captured: PieceType | None = PieceType.PAWN
        elif board.is_castling(move):
            captured = None
        else:
            captured = _to_piece_type(board.piece_type_at(move.to_square))

        event = MoveEvent.from_san(
            board.san(move),
            piece=PieceType(piece.piece_type),
            color=_to_color(piece.color),
            from_sq=move.from_square,
            to_sq=move.to_square,
            captured=captured,
            promotion=_to_piece_type(move.promotion),
        )
        board.push(move)
        _LOGGER.info("Played %s", move.uci())
        self.events.emit_move(event)

    def _play_premove(self) -> None:
        premove = self._premove
        if premove is None or not self.is_players_turn():
            return
        self._premove = None
        move = chess.Move(
            premove.from_sq,
            premove.to_sq,
            None if premove.promotion is None else int(premove.promotion),
        )
        if move in self._board.legal_moves:
            self._push(move)
        else:
            _LOGGER.info("Premove %s dropped: no longer legal", premove.uci)
