from __future__ import annotations

from typing import Tuple

from .errors import InvalidCoordinatesError

FILES = "abcdefgh"
RANKS = "87654321"


def square_to_coordinates(square: str) -> Tuple[int, int]:
    """Convert an algebraic square into ``(file_index, 8 - rank_digit)``.

    Only the first two characters are read. The file letter must be
    lowercase ``a``-``h`` and the rank digit must land inside ``[0, 8)``
    once subtracted from eight, so ``"e3"`` becomes ``(4, 5)``.
    """

    if len(square) < 2:
        raise InvalidCoordinatesError(f"Square reference too short: {square!r}")

    letter, digit = square[0], square[1]
    file_index = FILES.find(letter)
    if file_index < 0:
        raise InvalidCoordinatesError(f"Unknown file letter in {square!r}")

    if not ("0" <= digit <= "9"):
        raise InvalidCoordinatesError(f"Rank is not a digit in {square!r}")
    rank_index = 8 - int(digit)
    if not 0 <= rank_index < 8:
        raise InvalidCoordinatesError(f"Rank out of range in {square!r}")

    return file_index, rank_index


def to_grid_index(coordinates: Tuple[int, int]) -> Tuple[int, int]:
    """Translate a converter pair into a ``(row, file)`` board index."""

    file_index, rank_index = coordinates
    return rank_index, file_index


def coordinates_to_square(coordinates: Tuple[int, int]) -> str:
    file_index, rank_index = coordinates
    if not (0 <= file_index < 8 and 0 <= rank_index < 8):
        raise InvalidCoordinatesError(f"Coordinates outside the board: {coordinates!r}")
    return f"{FILES[file_index]}{RANKS[rank_index]}"
