"""Error types raised by the TCN codec.

All of them derive from :class:`ValueError`, the same base python-chess uses
for ``chess.InvalidMoveError`` / ``chess.IllegalMoveError``, so callers of the
PGN bridge can catch codec and rules-engine failures together.
"""

__all__ = ["TCNError", "InvalidSquare", "MalformedTCN", "InvalidMove"]


class TCNError(ValueError):
    """Base class for codec errors."""


class InvalidSquare(TCNError):
    """Raised when a square name is not on the 8x8 board."""


class MalformedTCN(TCNError):
    """Raised when a TCN string cannot be decoded."""


class InvalidMove(TCNError):
    """Raised when a move record has conflicting, missing or off-board fields."""
