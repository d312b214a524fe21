"""
TCN <-> PGN Bridge

Glue between the TCN codec and python-chess. Every legality and notation
decision is left to ``chess.Board``; errors it raises are propagated as-is.
"""

import io
import logging
from typing import Dict, Optional

import chess
import chess.pgn

from tcn.utils.move import Move, MoveKind
from tcn.utils.move_codec import decode_tcn, encode_tcn

logger = logging.getLogger(__name__)


def _apply_move(board: chess.Board, move: Move) -> chess.Move:
    """Resolve *move* against *board* and push it, or raise IllegalMoveError."""
    candidate = move.to_chess()
    if not board.is_legal(candidate):
        kind = "drop" if move.kind is MoveKind.DROP else "move"
        raise chess.IllegalMoveError(f"illegal {kind} in {board.fen()!r}: {candidate.uci()!r}")
    board.push(candidate)
    return candidate


def tcn_to_pgn(
    tcn: str,
    *,
    fen: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    include_headers: bool = False,
) -> str:
    """Convert a TCN string to PGN move-text.

    Args:
        tcn:             encoded move sequence.
        fen:             start position; the standard one when omitted.
        headers:         extra tag pairs, used with *include_headers*.
        include_headers: return a full PGN document instead of bare move-text.

    Returns:
        Numbered SAN move-text, e.g. ``"1. e4 e5 2. Nf3 Nc6"``.

    Raises:
        MalformedTCN: if *tcn* cannot be decoded.
        chess.IllegalMoveError: on the first move the position does not allow.
    """
    moves = decode_tcn(tcn)
    start = chess.Board(fen) if fen else chess.Board()
    board = start.copy()

    for ply, move in enumerate(moves, start=1):
        try:
            applied = _apply_move(board, move)
        except chess.IllegalMoveError:
            logger.warning(f"Rejected move {ply} ({move.uci()}) of TCN {tcn!r}")
            raise
        logger.debug(f"Applied move {ply}: {applied.uci()}")

    if not include_headers:
        return start.variation_san(board.move_stack)

    game = chess.pgn.Game.from_board(board)
    for key, value in (headers or {}).items():
        game.headers[key] = value
    exporter = chess.pgn.StringExporter(headers=True, variations=False, comments=False)
    return game.accept(exporter)


def pgn_to_tcn(text: str) -> str:
    """Convert the first game of a PGN text to a TCN string.

    Tag pairs are optional; a ``FEN`` tag sets the start position. Only the
    mainline is encoded.

    Raises:
        ValueError: the first error python-chess recorded while reading the
            game (``InvalidMoveError``, ``IllegalMoveError``,
            ``AmbiguousMoveError`` ...).
    """
    game = chess.pgn.read_game(io.StringIO(text))
    if game is None:
        return ""
    if game.errors:
        logger.warning(f"Could not read PGN: {game.errors[0]}")
        raise game.errors[0]

    moves = list(game.mainline_moves())
    logger.debug(f"Read {len(moves)} moves: {' '.join(move.uci() for move in moves)}")
    return encode_tcn([Move.from_chess(move) for move in moves])
