from __future__ import annotations

from typing import Optional, Tuple

from .board import parse_piece_placement
from .coordinates import square_to_coordinates
from .errors import FenError, InvalidNumberError, MalformedFenError
from .log import get_logger
from .position import Castling, Color, Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
FIELD_COUNT = 6
MAX_COUNTER = 2**64 - 1

logger = get_logger(__name__)

Fields = Tuple[str, str, str, str, str, str]


def split_fields(fen: str) -> Fields:
    """Split ``fen`` on single spaces and return its first six fields.

    Leading or repeated spaces are not collapsed, so they produce empty
    fields. Tokens after the sixth are ignored.
    """

    tokens = fen.split(" ")
    if len(tokens) < FIELD_COUNT:
        raise MalformedFenError(f"Expected {FIELD_COUNT} fields, found {len(tokens)}")
    placement, active_color, castling, en_passant, halfmoves, fullmoves = tokens[:FIELD_COUNT]
    return placement, active_color, castling, en_passant, halfmoves, fullmoves


def parse_active_color(token: str) -> Color:
    if token == "w":
        return Color.WHITE
    if token == "b":
        return Color.BLACK
    raise MalformedFenError(f"Unknown active color: {token!r}")


def _merge_castling(existing: Castling, new: Castling) -> Castling:
    # Only king-side followed by queen-side combines; every other update overwrites.
    if existing is Castling.KING_SIDE and new is Castling.QUEEN_SIDE:
        return Castling.BOTH
    return new


def parse_castling_rights(token: str) -> Tuple[Castling, Castling]:
    """Return ``(white, black)`` castling rights for the castling field.

    A ``-`` stops processing and returns whatever was collected before it.
    Uppercase letters update white and lowercase letters update black.
    """

    white = Castling.NONE
    black = Castling.NONE
    for char in token:
        if char == "-":
            return white, black

        if char in "kK":
            right = Castling.KING_SIDE
        elif char in "qQ":
            right = Castling.QUEEN_SIDE
        else:
            raise MalformedFenError(f"Unknown castling character: {char!r}")

        if char.islower():
            black = _merge_castling(black, right)
        else:
            white = _merge_castling(white, right)

    return white, black


def parse_en_passant_square(token: str) -> Optional[Tuple[int, int]]:
    if token == "-":
        return None
    return square_to_coordinates(token)


def parse_move_counter(token: str) -> int:
    """Parse an unsigned base-10 move counter; one leading ``+`` is allowed."""

    digits = token[1:] if token.startswith("+") else token
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidNumberError(f"Not an unsigned integer: {token!r}")
    value = int(digits)
    if value > MAX_COUNTER:
        raise InvalidNumberError(f"Move counter overflows: {token!r}")
    return value


def parse_fen(fen: str) -> Position:
    """Decode a FEN string into a :class:`Position`.

    Fields are decoded in a fixed order and the first failure is raised as a
    :class:`~fen_reader.errors.FenError` subclass.
    """

    try:
        placement, active_color, castling, en_passant, halfmoves, fullmoves = split_fields(fen)
        color = parse_active_color(active_color)
        board = parse_piece_placement(placement)
        white_castling, black_castling = parse_castling_rights(castling)
        target = parse_en_passant_square(en_passant)
        halfmove_clock = parse_move_counter(halfmoves)
        fullmove_number = parse_move_counter(fullmoves)
    except FenError as exc:
        logger.debug("Rejected %r: %s (%s)", fen, exc, exc.kind.value)
        raise

    return Position(
        board=board,
        active_color=color,
        white_castling=white_castling,
        black_castling=black_castling,
        en_passant=target,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )
