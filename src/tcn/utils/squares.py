"""Square name <-> board index mapping.

Board indices follow python-chess numbering: ``a1 == 0``, ``h1 == 7``,
``a2 == 8`` ... ``h8 == 63``, i.e. ``index = file + (rank - 1) * 8``.
"""

from tcn.errors import InvalidSquare

FILE_NAMES = "abcdefgh"
BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE


def square_to_index(square: str) -> int:
    """Map a square name such as ``"e4"`` to its 0-63 index.

    Raises:
        InvalidSquare: if *square* is not a file ``a``-``h`` followed by a
            rank ``1``-``8``.
    """
    if not isinstance(square, str) or len(square) != 2:
        raise InvalidSquare(f"invalid square: {square!r}")

    file_char, rank_char = square
    file = FILE_NAMES.find(file_char)
    if file < 0 or rank_char not in "12345678":
        raise InvalidSquare(f"invalid square: {square!r}")

    return file + (int(rank_char) - 1) * BOARD_SIZE


def index_to_square(index: int) -> str:
    """Inverse of :func:`square_to_index`.

    Returns an empty string for indices that do not name a board square;
    callers treat that as a decode failure.
    """
    if not 0 <= index < NUM_SQUARES:
        return ""
    file = index % BOARD_SIZE
    rank = index // BOARD_SIZE + 1
    return f"{FILE_NAMES[file]}{rank}"


def is_lower_half_origin(index: int) -> bool:
    """True for origins on ranks 1-2, whose pawns promote toward rank 1."""
    return index < 2 * BOARD_SIZE
