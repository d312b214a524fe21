# src/tcn/utils/move_codec.py
"""Two-symbol-per-move TCN codec.

Each move is one code unit of two symbols from :data:`ALPHABET`:

* origin slot: ``0-63`` is the from square, ``79-84`` is a dropped piece
  (``79 + PIECES.index(piece)``);
* destination slot: ``0-63`` is the to square, ``64-81`` is a promotion,
  packed as ``64 + 3 * PIECES.index(piece) + offset`` where ``offset`` 0/1/2
  is capture toward the a-file / straight push / capture toward the h-file.

The slot and the numeric range are the only tags; there is no separator
between code units.
"""

from typing import Iterable, Iterator, List, Mapping, Tuple, Union

from tcn.errors import InvalidMove, InvalidSquare, MalformedTCN
from tcn.utils.move import PIECES, Move, MoveKind, piece_index
from tcn.utils.squares import NUM_SQUARES, index_to_square, is_lower_half_origin, square_to_index

# Symbol order is the wire format. "+" appears twice (82 and 83); lookups
# resolve it to 82.
ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!?{~}(^)[_]@#$,./&-*++="
_SYMBOL_TO_CODE = {}
for _code, _symbol in enumerate(ALPHABET):
    _SYMBOL_TO_CODE.setdefault(_symbol, _code)

PROMOTION_BASE = NUM_SQUARES  # 64
DROP_BASE = 79
RESERVED_ORIGIN_CODES = range(NUM_SQUARES, DROP_BASE)  # 64-78 never name an origin
MAX_PROMOTION_CODE = PROMOTION_BASE + 3 * len(PIECES) - 1  # 81

MoveLike = Union[Move, Mapping[str, str]]


def _as_move(move: MoveLike) -> Move:
    if isinstance(move, Move):
        return move
    if isinstance(move, Mapping):
        return Move.from_dict(move)
    raise InvalidMove(f"cannot encode {type(move).__name__} as a move")


def promotion_offset(origin: int, dest: int) -> int:
    """Collapse a promotion step into 0, 1 or 2.

    Pushes toward rank 8 (+7/+8/+9) and toward rank 1 (-9/-8/-7) both map
    onto ``0, 1, 2`` ordered by destination file.
    """
    delta = dest - origin
    return delta - 7 if dest >= origin else delta + 9


def encode_move(move: MoveLike) -> str:
    """Encode a single move as a two-symbol code unit."""
    move = _as_move(move)

    try:
        if move.kind is MoveKind.DROP:
            drop_idx = piece_index(move.drop)
            if ALPHABET[DROP_BASE + drop_idx] in ALPHABET[:DROP_BASE + drop_idx]:
                # The symbol is shared with a lower code; it would decode differently.
                raise InvalidMove(f"drops of {move.drop!r} cannot be encoded")
            origin = DROP_BASE + drop_idx
        else:
            origin = square_to_index(move.from_square)
        dest = square_to_index(move.to_square)
    except InvalidSquare as exc:
        raise InvalidMove(f"invalid move {move.uci()!r}: {exc}") from exc

    if move.kind is MoveKind.PROMOTION:
        offset = promotion_offset(origin, dest)
        downward = dest < origin
        if offset not in (0, 1, 2) or downward != is_lower_half_origin(origin):
            raise InvalidMove(f"{move.uci()!r} is not a one-step pawn promotion")
        dest = PROMOTION_BASE + 3 * piece_index(move.promotion) + offset

    return ALPHABET[origin] + ALPHABET[dest]


def encode_tcn(moves: Union[MoveLike, Iterable[MoveLike]]) -> str:
    """Encode a move, or a sequence of moves in play order, into TCN.

    Accepts :class:`Move` objects or their mapping form
    (``{"from": "e2", "to": "e4"}``).

    Raises:
        InvalidMove: on conflicting fields, off-board squares, or a
            promotion/drop the format cannot carry.
    """
    if isinstance(moves, (Move, Mapping)):
        moves = [moves]
    return "".join(encode_move(move) for move in moves)


def iter_code_units(tcn: str) -> Iterator[Tuple[int, int]]:
    """Yield ``(origin_code, dest_code)`` pairs of a TCN string.

    Raises:
        MalformedTCN: for non-string input, odd length or unknown symbols.
    """
    if not isinstance(tcn, str):
        raise MalformedTCN(f"TCN must be a string, got {type(tcn).__name__}")
    if len(tcn) % 2:
        raise MalformedTCN(f"TCN length must be even, got {len(tcn)}")

    for pos in range(0, len(tcn), 2):
        try:
            yield _SYMBOL_TO_CODE[tcn[pos]], _SYMBOL_TO_CODE[tcn[pos + 1]]
        except KeyError as exc:
            raise MalformedTCN(f"unknown TCN symbol {exc.args[0]!r} in move {pos // 2 + 1}") from None


def decode_move(origin: int, dest: int) -> Move:
    """Decode one code unit given as alphabet indices."""
    if origin in RESERVED_ORIGIN_CODES:
        raise MalformedTCN(f"reserved origin code {origin}")

    promotion = None
    if dest > MAX_PROMOTION_CODE:
        raise MalformedTCN(f"destination code {dest} is out of range")
    if dest >= PROMOTION_BASE:
        if origin >= DROP_BASE:
            raise MalformedTCN("a drop cannot carry a promotion")
        promotion = PIECES[(dest - PROMOTION_BASE) // 3]
        offset = ((dest - 1) % 3) - 1
        direction = -8 if is_lower_half_origin(origin) else 8
        dest = origin + direction + offset

    to_square = index_to_square(dest)
    if not to_square:
        raise MalformedTCN(f"destination index {dest} is off the board")

    if origin >= DROP_BASE:
        return Move(to_square=to_square, drop=PIECES[origin - DROP_BASE])
    return Move(to_square=to_square, from_square=index_to_square(origin), promotion=promotion)


def decode_tcn(tcn: str) -> List[Move]:
    """Decode a TCN string into moves, in play order.

    Raises:
        MalformedTCN: if any code unit is not a valid encoding; nothing is
            returned for the moves before it.
    """
    return [decode_move(origin, dest) for origin, dest in iter_code_units(tcn)]


def move_count(tcn: str) -> int:
    """Number of moves in *tcn*, validating its length and symbols."""
    return sum(1 for _ in iter_code_units(tcn))
