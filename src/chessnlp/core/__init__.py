"""Core domain layer — enums, notation symbols and errors.

Quick start::

    from chessnlp.core import PieceType, PIECE_LETTERS

    PIECE_LETTERS[PieceType.KNIGHT]  # "N"
"""

from chessnlp.core.enums import (
    CastleSide,
    Color,
    Direction,
    GameResult,
    PieceType,
    SlotCategory,
)
from chessnlp.core.errors import (
    ConfigurationError,
    EnPassantError,
    MoveSyntaxError,
    NotationError,
)
from chessnlp.core.types import (
    CASTLE_TOKENS,
    FILES,
    PIECE_BY_LETTER,
    PIECE_LETTERS,
    RANKS,
    SquareName,
    en_passant_rank,
    parse_square,
    result_from_token,
    result_token,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "Direction",
    "GameResult",
    "PieceType",
    "SlotCategory",
    # Errors
    "ConfigurationError",
    "EnPassantError",
    "MoveSyntaxError",
    "NotationError",
    # Types / helpers
    "CASTLE_TOKENS",
    "FILES",
    "PIECE_BY_LETTER",
    "PIECE_LETTERS",
    "RANKS",
    "SquareName",
    "en_passant_rank",
    "parse_square",
    "result_from_token",
    "result_token",
]
