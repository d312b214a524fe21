"""Move record shared by the codec and the PGN bridge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import chess

from tcn.errors import InvalidMove

# Ordered piece alphabet; the position of a letter is its code offset.
PIECES = "qnrbkp"


class MoveKind(Enum):
    PLAIN = "plain"
    PROMOTION = "promotion"
    DROP = "drop"


def piece_index(piece: str) -> int:
    """Position of *piece* in :data:`PIECES`."""
    idx = PIECES.find(piece) if isinstance(piece, str) and len(piece) == 1 else -1
    if idx < 0:
        raise InvalidMove(f"unknown piece: {piece!r}")
    return idx


@dataclass(frozen=True)
class Move:
    """A single move, either from a square or dropped from reserve.

    Squares are kept as names (``"e4"``); they are only checked against the
    board when the move is encoded.
    """

    to_square: str
    from_square: Optional[str] = None
    promotion: Optional[str] = None
    drop: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.to_square:
            raise InvalidMove("move has no destination square")
        if self.drop is not None:
            if self.from_square is not None:
                raise InvalidMove("a drop move cannot have a from square")
            if self.promotion is not None:
                raise InvalidMove("a drop move cannot promote")
            piece_index(self.drop)
        elif self.from_square is None:
            raise InvalidMove("move needs either a from square or a drop piece")
        if self.promotion is not None:
            piece_index(self.promotion)

    @property
    def kind(self) -> MoveKind:
        if self.drop is not None:
            return MoveKind.DROP
        if self.promotion is not None:
            return MoveKind.PROMOTION
        return MoveKind.PLAIN

    # ------------------------------------------------------------------
    # Mapping form: {"from": "e7", "to": "e8", "promotion": "q"}
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, str]:
        """Mapping form with absent fields left out."""
        result = {}
        if self.from_square is not None:
            result["from"] = self.from_square
        result["to"] = self.to_square
        if self.promotion is not None:
            result["promotion"] = self.promotion
        if self.drop is not None:
            result["drop"] = self.drop
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Move":
        """Build a move from its mapping form.

        Unknown keys (``san``, ``piece``, ``flags`` ...) are ignored and empty
        values count as absent, so verbose move histories can be fed in as-is.
        """
        return cls(
            to_square=data.get("to") or "",
            from_square=data.get("from") or None,
            promotion=data.get("promotion") or None,
            drop=data.get("drop") or None,
        )

    # ------------------------------------------------------------------
    # python-chess interop
    # ------------------------------------------------------------------

    @classmethod
    def from_chess(cls, move: chess.Move) -> "Move":
        if not move:
            raise InvalidMove("null moves cannot be encoded")
        promotion = chess.piece_symbol(move.promotion) if move.promotion else None
        if move.drop:
            return cls(to_square=chess.square_name(move.to_square), drop=chess.piece_symbol(move.drop))
        return cls(
            to_square=chess.square_name(move.to_square),
            from_square=chess.square_name(move.from_square),
            promotion=promotion,
        )

    def to_chess(self) -> chess.Move:
        try:
            to_square = chess.parse_square(self.to_square)
            if self.drop is not None:
                return chess.Move(to_square, to_square, drop=chess.PIECE_SYMBOLS.index(self.drop))
            promotion = chess.PIECE_SYMBOLS.index(self.promotion) if self.promotion else None
            return chess.Move(chess.parse_square(self.from_square), to_square, promotion=promotion)
        except ValueError as exc:
            raise InvalidMove(f"invalid move {self.uci()!r}: {exc}") from exc

    def uci(self) -> str:
        """UCI-style text: ``e2e4``, ``e7e8q``, ``N@e4``."""
        if self.drop is not None:
            return f"{self.drop.upper()}@{self.to_square}"
        return f"{self.from_square}{self.to_square}{self.promotion or ''}"

    @classmethod
    def from_uci(cls, text: str) -> "Move":
        """Parse the text produced by :meth:`uci`."""
        if len(text) == 4 and text[1] == "@":
            return cls(to_square=text[2:], drop=text[0].lower())
        if len(text) in (4, 5):
            return cls(to_square=text[2:4], from_square=text[:2], promotion=text[4:] or None)
        raise InvalidMove(f"invalid move text: {text!r}")

    def __str__(self) -> str:
        return self.uci()
