"""SAN → text generation.

SAN is parsed into a :class:`SanMove` first and the phrase is rendered from
that value with the active language's :class:`~chessnlp.i18n.Strings`. The
phrasing is fixed per move shape; aliases never apply in this direction.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from lark import Lark, Token, Transformer

from chessnlp.core.enums import CastleSide, PieceType
from chessnlp.core.types import PIECE_BY_LETTER, parse_square, result_from_token
from chessnlp.i18n import Strings
from chessnlp.notation.models import SanMove


class _SanMoveBuilder(Transformer):
    """Turn a SAN parse tree into a :class:`SanMove`."""

    def start(self, children: list[Any]) -> SanMove:
        move = children[0]
        if len(children) == 2:
            move = replace(move, suffix=children[1])
        return move

    def result(self, children: list[Token]) -> SanMove:
        return SanMove(result=result_from_token(str(children[0])))

    def castle(self, children: list[Token]) -> SanMove:
        side = CastleSide.QUEENSIDE if children[0].type == "QUEENSIDE" else CastleSide.KINGSIDE
        return SanMove(castle=side)

    def piece_move(self, children: list[Any]) -> SanMove:
        piece, *middle, destination = children
        departure = ""
        capture = False
        for item in middle:
            if isinstance(item, Token) and item.type == "CAPTURE":
                capture = True
            else:
                departure = str(item)
        return SanMove(
            piece=PIECE_BY_LETTER[str(piece)],
            departure=departure,
            capture=capture,
            destination=destination,
        )

    def pawn_move(self, children: list[Any]) -> SanMove:
        promotion: PieceType | None = None
        if isinstance(children[-1], PieceType):
            promotion = children.pop()
        destination = children[-1]
        capture = len(children) == 3
        return SanMove(
            departure=str(children[0]) if capture else "",
            capture=capture,
            destination=destination,
            promotion=promotion,
        )

    def promotion(self, children: list[Token]) -> PieceType:
        return PIECE_BY_LETTER[str(children[0])]

    def suffix(self, children: list[Token]) -> str:
        return "#" if children[0].type == "CHECKMATE" else "+"

    def square(self, children: list[Token]) -> str:
        file, rank = parse_square("".join(str(child) for child in children))
        return file + rank


def render(move: SanMove, strings: Strings) -> str:
    """Phrase for *move* in the language of *strings*."""
    if move.result is not None:
        return strings.results[move.result]

    if move.castle is not None:
        words = [strings.castles[move.castle]]
    elif move.is_pawn_move:
        words = []
        if move.capture:
            words += [move.departure, strings.captures]
        words.append(move.destination)
        if move.promotion is not None:
            words += [strings.promote_to, strings.promotion_names[move.promotion]]
    else:
        words = [strings.piece_names[move.piece]]
        if move.departure:
            words.append(move.departure)
        words += [strings.captures if move.capture else strings.moves_to, move.destination]

    if move.suffix == "#":
        words.append(strings.checkmate)
    elif move.suffix == "+":
        words.append(strings.check)
    return " ".join(words)


class SanToText:
    """Callable generator holding one compiled SAN grammar."""

    def __init__(self, parser: Lark, strings: Strings) -> None:
        self._parser = parser
        self._strings = strings
        self._builder = _SanMoveBuilder()

    def parse(self, san: str) -> SanMove:
        """Parse *san*; raises lark's ``UnexpectedInput`` on failure."""
        return self._builder.transform(self._parser.parse(san.strip()))

    def __call__(self, san: str) -> str:
        return render(self.parse(san), self._strings)
