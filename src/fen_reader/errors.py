from __future__ import annotations

import enum


class FenErrorKind(enum.Enum):
    MALFORMED_FEN = "malformed FEN"
    INVALID_COORDINATES = "invalid coordinates"
    INVALID_NUMBER = "invalid number"


class FenError(ValueError):
    """Base class for every failure raised while decoding a FEN string.

    Only the concrete subclasses are instantiated; each one fixes ``kind``.
    """

    kind: FenErrorKind

    def __init__(self, message: str = "") -> None:
        if not hasattr(type(self), "kind"):
            raise TypeError("Raise one of the FenError subclasses, not FenError itself")
        super().__init__(message or self.kind.value)


class MalformedFenError(FenError):
    """Raised for missing fields or unexpected characters in a FEN field."""

    kind = FenErrorKind.MALFORMED_FEN


class InvalidCoordinatesError(FenError):
    """Raised when a square reference has a bad file letter or rank digit."""

    kind = FenErrorKind.INVALID_COORDINATES


class InvalidNumberError(FenError):
    """Raised when a move counter is not an unsigned base-10 integer."""

    kind = FenErrorKind.INVALID_NUMBER
