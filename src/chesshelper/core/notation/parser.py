"""Free-form move text → move templates.

Two grammars are tried independently and their results concatenated:
UCI-like coordinates (``e2e4``, ``e7-e8q``) and loose algebraic notation
(``Nf3``, ``bxc3``, ``exd6e.p.``, ``O-O-O``). Malformed text yields no
templates; it never raises.
"""

from __future__ import annotations

import re

from chesshelper.core.enums import Color, PieceType
from chesshelper.core.notation.models import MoveTemplate, SquarePattern
from chesshelper.core.types import (
    is_square_name,
    make_square,
    parse_file,
    parse_rank,
    parse_square,
)

_UCI_SEPARATORS = re.compile(r"[ -]+")
_ALGEBRAIC_NOISE = re.compile(r"[\s\-()]+")
_STRICT_UCI = re.compile(r"^\s*[a-h][1-8][a-h][1-8][rqknb]?\s*$")
_LONG_CASTLING = re.compile(r"[o0][o0][o0]", re.IGNORECASE)
_SHORT_CASTLING = re.compile(r"[o0][o0]", re.IGNORECASE)
_PAWN_MOVE = re.compile(
    r"^(?P<from_file>[a-h])?(?P<capture>x)?(?P<to_file>[a-h])(?P<to_rank>[1-8])"
    r"(?P<en_passant>e\.?p\.?)?(?:=(?P<promotion>[qrnbQRNB]))?[+#]?$"
)
_PIECE_MOVE = re.compile(
    r"^(?P<piece>[RQKNBrqknb])(?P<from_file>[a-h])?(?P<from_rank>[1-8])?"
    r"(?P<capture>x)?(?P<to_file>[a-h])(?P<to_rank>[1-8])?[+#]?$"
)

# King start file and destination files for both castling directions.
_KING_FILE = 4
_SHORT_CASTLING_FILE = 6
_LONG_CASTLING_FILE = 2


def parse_move_input(text: str) -> list[MoveTemplate]:
    """Every template that *text* could describe, UCI results first."""
    return [*parse_uci(text), *parse_algebraic(text)]


def parse_uci(text: str) -> list[MoveTemplate]:
    """Parse the simplest coordinate format: ``e2e4``, ``e2-e4``, ``e7e8q``."""
    symbols = _UCI_SEPARATORS.sub("", text)
    from_name, to_name, promo_char = symbols[0:2], symbols[2:4], symbols[4:5]
    if not (is_square_name(from_name) and is_square_name(to_name)):
        return []

    promotion: PieceType | None = None
    if promo_char and promo_char.lower() in "qrbn":
        promotion = PieceType.from_letter(promo_char)

    return [
        MoveTemplate(
            piece=None,
            from_sq=SquarePattern.exact(parse_square(from_name)),
            to_sq=SquarePattern.exact(parse_square(to_name)),
            promotion=promotion,
        )
    ]


def parse_algebraic(text: str) -> list[MoveTemplate]:
    """Extract every reading of *text* as algebraic notation."""
    # Coordinates are handled by parse_uci.
    if _STRICT_UCI.match(text):
        return []

    move_text = _ALGEBRAIC_NOISE.sub("", text)

    if _LONG_CASTLING.search(move_text):
        return _castling_templates(_LONG_CASTLING_FILE)
    if _SHORT_CASTLING.search(move_text):
        return _castling_templates(_SHORT_CASTLING_FILE)

    templates: list[MoveTemplate] = []
    pawn = _parse_pawn_move(move_text)
    if pawn is not None:
        templates.append(pawn)
    piece = _parse_piece_move(move_text)
    if piece is not None:
        templates.append(piece)
    return templates


def _castling_templates(king_to_file: int) -> list[MoveTemplate]:
    # Side is unknown here, so emit one template per color.
    return [
        MoveTemplate(
            piece=PieceType.KING,
            from_sq=SquarePattern.exact(make_square(_KING_FILE, color.home_rank)),
            to_sq=SquarePattern.exact(make_square(king_to_file, color.home_rank)),
        )
        for color in (Color.WHITE, Color.BLACK)
    ]


def _parse_pawn_move(move_text: str) -> MoveTemplate | None:
    match = _PAWN_MOVE.match(move_text)
    if match is None:
        return None

    from_file = match["from_file"]
    to_file = match["to_file"]
    # ``bb4`` reads as a bishop move, never as a pawn one.
    if from_file == to_file:
        return None

    promotion = match["promotion"]
    return MoveTemplate(
        piece=PieceType.PAWN,
        from_sq=SquarePattern(
            file=parse_file(from_file) if from_file else None, rank=None
        ),
        to_sq=SquarePattern(parse_file(to_file), parse_rank(match["to_rank"])),
        promotion=PieceType.from_letter(promotion) if promotion else None,
    )


def _parse_piece_move(move_text: str) -> MoveTemplate | None:
    match = _PIECE_MOVE.match(move_text)
    if match is None:
        return None

    from_file, from_rank = match["from_file"], match["from_rank"]
    to_rank = match["to_rank"]
    return MoveTemplate(
        piece=PieceType.from_letter(match["piece"]),
        from_sq=SquarePattern(
            file=parse_file(from_file) if from_file else None,
            rank=parse_rank(from_rank) if from_rank else None,
        ),
        to_sq=SquarePattern(
            file=parse_file(match["to_file"]),
            rank=parse_rank(to_rank) if to_rank else None,
        ),
    )
