"""TCN: a two-symbols-per-move chess move encoding."""

from tcn.engine.pgn_bridge import pgn_to_tcn, tcn_to_pgn
from tcn.errors import InvalidMove, InvalidSquare, MalformedTCN, TCNError
from tcn.utils.move import PIECES, Move, MoveKind
from tcn.utils.move_codec import ALPHABET, decode_tcn, encode_tcn
from tcn.utils.squares import index_to_square, square_to_index

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "PIECES",
    "Move",
    "MoveKind",
    "TCNError",
    "InvalidSquare",
    "MalformedTCN",
    "InvalidMove",
    "encode_tcn",
    "decode_tcn",
    "square_to_index",
    "index_to_square",
    "tcn_to_pgn",
    "pgn_to_tcn",
]
