from __future__ import annotations

import numpy as np

from .position import Castling, Color, PieceKind, Position

PIECE_ORDER = (
    PieceKind.PAWN,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.ROOK,
    PieceKind.QUEEN,
    PieceKind.KING,
)
SIDE_TO_MOVE_PLANE = 12
CASTLING_PLANES = 13
HALFMOVE_PLANE = 17
PLANES = 18
HALFMOVE_SCALE = 100


def piece_plane(kind: PieceKind, color: Color) -> int:
    offset = 0 if color is Color.WHITE else len(PIECE_ORDER)
    return offset + PIECE_ORDER.index(kind)


def encode_position(position: Position) -> np.ndarray:
    """Encode a position as an ``(18, 8, 8)`` float32 stack of feature planes.

    Planes 0-11 are one-hot piece planes (white pawn..king, then black),
    laid out like ``position.board``. Plane 12 is set when white is to move,
    planes 13-16 hold white king/queen-side then black king/queen-side rights
    and plane 17 is the half-move clock capped at 100 and scaled to ``[0, 1]``.
    """

    planes = np.zeros((PLANES, 8, 8), dtype=np.float32)

    for row, rank in enumerate(position.board):
        for file, square in enumerate(rank):
            if square is not None:
                planes[piece_plane(square.kind, square.color), row, file] = 1.0

    if position.active_color is Color.WHITE:
        planes[SIDE_TO_MOVE_PLANE, :, :] = 1.0

    for offset, rights in enumerate((position.white_castling, position.black_castling)):
        base = CASTLING_PLANES + 2 * offset
        if rights in (Castling.KING_SIDE, Castling.BOTH):
            planes[base, :, :] = 1.0
        if rights in (Castling.QUEEN_SIDE, Castling.BOTH):
            planes[base + 1, :, :] = 1.0

    planes[HALFMOVE_PLANE, :, :] = min(position.halfmove_clock, HALFMOVE_SCALE) / HALFMOVE_SCALE
    return planes
