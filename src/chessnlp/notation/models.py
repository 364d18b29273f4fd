"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from chessnlp.core.enums import CastleSide, GameResult, PieceType
from chessnlp.core.types import CASTLE_TOKENS, PIECE_LETTERS, SquareName, result_token


@dataclass(frozen=True, slots=True)
class SanMove:
    """One parsed SAN token.

    Exactly one of *destination*, *castle* or *result* is set. ``str()``
    yields the canonical spelling, so ``0-0`` comes back as ``O-O``.
    """

    piece: PieceType = PieceType.PAWN
    departure: str = ""
    capture: bool = False
    destination: SquareName = ""
    promotion: PieceType | None = None
    castle: CastleSide | None = None
    result: GameResult | None = None
    suffix: str = ""  # "", "+" or "#"

    @property
    def is_pawn_move(self) -> bool:
        return bool(self.destination) and self.piece == PieceType.PAWN

    def __str__(self) -> str:
        if self.result is not None:
            return result_token(self.result)
        if self.castle is not None:
            return CASTLE_TOKENS[self.castle] + self.suffix

        san = "" if self.piece == PieceType.PAWN else PIECE_LETTERS[self.piece]
        san += self.departure
        if self.capture:
            san += "x"
        san += self.destination
        if self.promotion is not None:
            san += "=" + PIECE_LETTERS[self.promotion]
        return san + self.suffix
