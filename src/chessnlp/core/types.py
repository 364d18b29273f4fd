"""Square names, SAN symbols and result tokens.

Squares are kept as their two-character names (``"e4"``); the translator is
purely notational and never needs board indices.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeAlias

from chessnlp.core.enums import CastleSide, GameResult, PieceType

SquareName: TypeAlias = str  # "a1" … "h8"

FILES = "abcdefgh"
RANKS = "12345678"

PIECE_LETTERS: Mapping[PieceType, str] = MappingProxyType(
    {
        PieceType.KNIGHT: "N",
        PieceType.BISHOP: "B",
        PieceType.ROOK: "R",
        PieceType.QUEEN: "Q",
        PieceType.KING: "K",
    }
)
PIECE_BY_LETTER: Mapping[str, PieceType] = MappingProxyType(
    {v: k for k, v in PIECE_LETTERS.items()}
)

CASTLE_TOKENS: Mapping[CastleSide, str] = MappingProxyType(
    {
        CastleSide.KINGSIDE: "O-O",
        CastleSide.QUEENSIDE: "O-O-O",
    }
)

# En passant is written as if the captured pawn had moved one square: a
# capture described on rank 4 is recorded on rank 3, rank 5 on rank 4.
EN_PASSANT_RANKS: Mapping[str, str] = MappingProxyType(
    {
        "4": "3",  # black capturing white
        "5": "4",  # white capturing black
    }
)


def is_file(char: str) -> bool:
    """Whether *char* is a file letter a–h."""
    return len(char) == 1 and char in FILES


def is_rank(char: str) -> bool:
    """Whether *char* is a rank digit 1–8."""
    return len(char) == 1 and char in RANKS


def parse_square(name: str) -> tuple[str, str]:
    """Split square name into ``(file, rank)``, e.g. ``'e4'`` → ``('e', '4')``."""
    if len(name) != 2 or not is_file(name[0]) or not is_rank(name[1]):
        raise ValueError(f"Invalid square name: {name!r}")
    return name[0], name[1]


def en_passant_rank(rank: str) -> str:
    """Rank recorded in SAN for an en-passant capture described on *rank*."""
    try:
        return EN_PASSANT_RANKS[rank]
    except KeyError:
        raise ValueError(f"Invalid en passant rank: {rank!r}") from None


def result_token(result: GameResult) -> str:
    """Convert :class:`GameResult` to its SAN/PGN token."""
    if result == GameResult.WHITE_WINS:
        return "1-0"
    if result == GameResult.BLACK_WINS:
        return "0-1"
    return "1/2-1/2"


def result_from_token(token: str) -> GameResult:
    """Convert a result token back to :class:`GameResult`."""
    if token == "1-0":
        return GameResult.WHITE_WINS
    if token == "0-1":
        return GameResult.BLACK_WINS
    if token in ("1/2-1/2", "½-½"):
        return GameResult.DRAW
    raise ValueError(f"Invalid result token: {token!r}")
