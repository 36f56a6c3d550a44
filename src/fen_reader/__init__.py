"""FEN reader package."""

__all__ = [
    "Board",
    "Castling",
    "Color",
    "FenError",
    "FenErrorKind",
    "InvalidCoordinatesError",
    "InvalidNumberError",
    "MalformedFenError",
    "Piece",
    "PieceKind",
    "Position",
    "STARTING_BOARD",
    "STARTING_FEN",
    "parse_fen",
    "square_to_coordinates",
    "to_grid_index",
]

from .board import STARTING_BOARD
from .coordinates import square_to_coordinates, to_grid_index
from .errors import FenError, FenErrorKind, InvalidCoordinatesError, InvalidNumberError, MalformedFenError
from .fen import STARTING_FEN, parse_fen
from .position import Board, Castling, Color, Piece, PieceKind, Position
