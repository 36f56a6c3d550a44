from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Tuple

from .coordinates import square_to_coordinates, to_grid_index


class Color(enum.Enum):
    WHITE = "w"
    BLACK = "b"


class PieceKind(enum.Enum):
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"


class Castling(enum.Enum):
    """Castling rights held by a single side."""

    NONE = "none"
    KING_SIDE = "king-side"
    QUEEN_SIDE = "queen-side"
    BOTH = "both"


@dataclasses.dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @property
    def symbol(self) -> str:
        """Return the FEN letter, uppercase for white."""

        letter = self.kind.value
        return letter.upper() if self.color is Color.WHITE else letter


Square = Optional[Piece]
Board = Tuple[Tuple[Square, ...], ...]


@dataclasses.dataclass(frozen=True)
class Position:
    """A fully decoded FEN record.

    ``board`` is indexed ``board[row][file]`` with row 0 holding the first
    rank group of the placement field (rank 8). ``en_passant`` keeps the
    coordinate converter's ``(file, 8 - digit)`` pair; use
    :func:`fen_reader.coordinates.to_grid_index` to look it up on the board.
    """

    board: Board
    active_color: Color
    white_castling: Castling
    black_castling: Castling
    en_passant: Optional[Tuple[int, int]]
    halfmove_clock: int
    fullmove_number: int

    def castling(self, color: Color) -> Castling:
        if color is Color.WHITE:
            return self.white_castling
        return self.black_castling

    def piece_at(self, square: str) -> Square:
        """Return the content of an algebraic square such as ``"e4"``."""

        row, file = to_grid_index(square_to_coordinates(square))
        return self.board[row][file]
