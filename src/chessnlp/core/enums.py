"""Core enumerations for the move-notation domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleSide(IntEnum):
    """Which rook the king castles with."""

    KINGSIDE = 0
    QUEENSIDE = 1


class GameResult(IntEnum):
    """Outcome of a game."""

    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3


class SlotCategory(Enum):
    """Vocabulary category of an alias slot.

    The value doubles as the prefix of the grammar rule generated for each
    slot, e.g. ``piece_king`` or ``rank_4``.
    """

    PIECE = "piece"
    FILE = "file"
    RANK = "rank"
    SIDE = "side"
    CASTLE_SIDE = "castle"
    KEYWORD = "kw"


class Direction(Enum):
    """Conversion direction of a translator call."""

    TEXT_TO_SAN = "text-to-san"
    SAN_TO_TEXT = "san-to-text"
