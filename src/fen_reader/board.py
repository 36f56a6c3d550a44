from __future__ import annotations

from typing import List

from .errors import MalformedFenError
from .log import get_logger
from .position import Board, Color, Piece, PieceKind, Square

BOARD_SIZE = 8
EMPTY_RUNS = "12345678"

logger = get_logger(__name__)


def _empty_grid() -> List[List[Square]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


_PIECE_LETTERS = {kind.value: kind for kind in PieceKind}


def piece_from_letter(letter: str) -> Piece:
    """Decode a single FEN piece letter; case selects the color."""

    kind = _PIECE_LETTERS.get(letter.lower()) if letter.isascii() else None
    if kind is None:
        raise MalformedFenError(f"Unknown piece letter: {letter!r}")
    color = Color.WHITE if letter.isupper() else Color.BLACK
    return Piece(kind, color)


def parse_piece_placement(placement: str) -> Board:
    """Walk the placement field and return the populated 8x8 grid.

    Row 0 is the first rank group in the string. Digit runs only advance the
    file cursor; the grid starts empty so the skipped squares stay empty.
    """

    grid = _empty_grid()
    row = 0
    file = 0
    for char in placement:
        if char == "/":
            row += 1
            file = 0
            continue

        if char in EMPTY_RUNS:
            file += int(char)
            continue

        piece = piece_from_letter(char)
        if row >= BOARD_SIZE or file >= BOARD_SIZE:
            raise MalformedFenError(f"Piece {char!r} placed outside the board in {placement!r}")
        grid[row][file] = piece
        file += 1

    logger.debug("Decoded placement %r", placement)
    return tuple(tuple(rank) for rank in grid)


def render_ascii(board: Board) -> str:
    """Return the grid as eight lines of piece letters, ``.`` for empty."""

    lines = []
    for rank in board:
        lines.append(" ".join(square.symbol if square is not None else "." for square in rank))
    return "\n".join(lines)


def _back_rank(color: Color) -> tuple:
    order = (
        PieceKind.ROOK,
        PieceKind.KNIGHT,
        PieceKind.BISHOP,
        PieceKind.QUEEN,
        PieceKind.KING,
        PieceKind.BISHOP,
        PieceKind.KNIGHT,
        PieceKind.ROOK,
    )
    return tuple(Piece(kind, color) for kind in order)


STARTING_BOARD: Board = (
    _back_rank(Color.BLACK),
    (Piece(PieceKind.PAWN, Color.BLACK),) * BOARD_SIZE,
    *((None,) * BOARD_SIZE for _ in range(4)),
    (Piece(PieceKind.PAWN, Color.WHITE),) * BOARD_SIZE,
    _back_rank(Color.WHITE),
)
