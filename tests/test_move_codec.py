import chess
import pytest

from tcn.errors import InvalidMove, MalformedTCN
from tcn.utils.move import PIECES, Move
from tcn.utils.move_codec import (
    ALPHABET,
    decode_tcn,
    encode_tcn,
    move_count,
    promotion_offset,
)

SAMPLE_MOVE = {"from": "e2", "to": "e4"}
SAMPLE_PROMO = {"from": "e7", "to": "e8", "promotion": "q"}
SAMPLE_DROP = {"drop": "n", "to": "e4"}


def _round_trip(move):
    return [m.to_dict() for m in decode_tcn(encode_tcn(move))]


def test_alphabet_layout():
    assert len(ALPHABET) == 85
    assert ALPHABET[:8] == "abcdefgh"
    assert ALPHABET[82] == ALPHABET[83] == "+"


def test_known_encodings():
    assert encode_tcn(SAMPLE_MOVE) == "mC"
    assert encode_tcn(SAMPLE_PROMO) == "0~"
    assert encode_tcn(SAMPLE_DROP) == "-C"


def test_simple_move_round_trip():
    assert _round_trip(SAMPLE_MOVE) == [SAMPLE_MOVE]


def test_promotion_round_trip():
    assert _round_trip(SAMPLE_PROMO) == [SAMPLE_PROMO]


def test_drop_round_trip_has_no_from_key():
    (decoded,) = _round_trip(SAMPLE_DROP)
    assert decoded == SAMPLE_DROP
    assert "from" not in decoded
    assert "promotion" not in decoded


def test_sequence_round_trip_keeps_order():
    moves = [SAMPLE_MOVE, SAMPLE_PROMO, SAMPLE_DROP]
    tcn = encode_tcn(moves)
    assert len(tcn) == 2 * len(moves)
    assert [m.to_dict() for m in decode_tcn(tcn)] == moves


def test_four_characters_decode_to_two_moves():
    moves = decode_tcn("mC0K")
    assert [m.uci() for m in moves] == ["e2e4", "e7e5"]
    assert move_count("mC0K") == 2


def test_every_plain_move_round_trips():
    for origin in chess.SQUARE_NAMES:
        moves = [Move(dest, origin) for dest in chess.SQUARE_NAMES]
        tcn = encode_tcn(moves)
        assert set(tcn) <= set(ALPHABET)
        assert decode_tcn(tcn) == moves


@pytest.mark.parametrize("piece", list(PIECES))
@pytest.mark.parametrize(
    "origin,dest",
    [("b7", "a8"), ("b7", "b8"), ("b7", "c8"), ("g2", "f1"), ("g2", "g1"), ("g2", "h1")],
)
def test_promotions_in_both_directions(piece, origin, dest):
    move = Move(dest, origin, promotion=piece)
    assert decode_tcn(encode_tcn(move)) == [move]


def test_promotion_offset_is_direction_symmetric():
    e7, e2 = chess.E7, chess.E2
    assert promotion_offset(e7, chess.D8) == promotion_offset(e2, chess.D1) == 0
    assert promotion_offset(e7, chess.E8) == promotion_offset(e2, chess.E1) == 1
    assert promotion_offset(e7, chess.F8) == promotion_offset(e2, chess.F1) == 2


@pytest.mark.parametrize("piece", ["q", "n", "r", "b", "p"])
def test_drops_round_trip(piece):
    move = Move("d5", drop=piece)
    assert decode_tcn(encode_tcn(move)) == [move]


def test_king_drop_is_not_encodable():
    with pytest.raises(InvalidMove):
        encode_tcn(Move("e4", drop="k"))


def test_empty_inputs():
    assert encode_tcn([]) == ""
    assert decode_tcn("") == []


@pytest.mark.parametrize(
    "move",
    [
        {"from": "e2", "to": "e9"},
        {"from": "z2", "to": "e4"},
        {"from": "e2", "to": "e4", "drop": "n"},
        {"to": "e4"},
        {"from": "e7", "to": "e5", "promotion": "q"},
        {"from": "e2", "to": "e3", "promotion": "q"},
        {"from": "e7", "to": "e8", "promotion": "x"},
    ],
)
def test_encode_rejects_invalid_moves(move):
    with pytest.raises(InvalidMove):
        encode_tcn(move)


def test_encode_rejects_non_moves():
    with pytest.raises(InvalidMove):
        encode_tcn([42])


@pytest.mark.parametrize(
    "tcn",
    [
        "m",  # odd length
        "mC0",
        "mé",  # not in the alphabet
        "m ",
        ",C",  # reserved origin codes 76-78
        ".C",
        "/C",
        "{C",  # 64-75 name no square
        "m+",  # destination code above 81
        "-~",  # promotion on a drop
        "a~",  # a1 promotion would land below the board
    ],
)
def test_decode_rejects_malformed(tcn):
    with pytest.raises(MalformedTCN):
        decode_tcn(tcn)


def test_decode_rejects_non_string():
    with pytest.raises(MalformedTCN):
        decode_tcn(None)


def test_decode_fails_without_partial_result():
    with pytest.raises(MalformedTCN):
        decode_tcn("mC0K,C")
