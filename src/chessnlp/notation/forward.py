"""Text → SAN matching.

The assembled forward grammar recognises the surface forms of a move; the
transformer below reduces each parse tree to SAN. Every alias rule returns
its slot's symbol and every structural rule concatenates its children, so
whitespace and filler words vanish from the output.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lark import Lark, Transformer
from lark.exceptions import VisitError

from chessnlp.core.enums import Color, GameResult
from chessnlp.core.errors import EnPassantError
from chessnlp.core.types import en_passant_rank, result_token

_WINNER_RESULT: dict[str, GameResult] = {
    str(Color.WHITE): GameResult.WHITE_WINS,
    str(Color.BLACK): GameResult.BLACK_WINS,
}


class _SanBuilder(Transformer):
    """Reduce a forward parse tree to a SAN string."""

    def __init__(self, symbols: Mapping[str, str]) -> None:
        super().__init__()
        self._symbols = symbols

    def __default__(self, data: Any, children: list[str], meta: Any) -> str:
        symbol = self._symbols.get(str(data))
        if symbol is not None:
            return symbol
        return "".join(children)

    def en_passant(self, children: list[str]) -> str:
        source_file, capture, dest_file, dest_rank, _marker = children
        try:
            final_rank = en_passant_rank(dest_rank)
        except ValueError:
            raise EnPassantError(
                f"Invalid en passant capture: rank {dest_rank}", rank=dest_rank
            ) from None
        return source_file + capture + dest_file + final_rank

    def resign(self, children: list[str]) -> str:
        # The token names the winner, not the side that resigned.
        loser = Color.WHITE if children[0] == str(Color.WHITE) else Color.BLACK
        return result_token(_WINNER_RESULT[str(loser.opposite)])

    def outcome(self, children: list[str]) -> str:
        if len(children) == 1:
            return children[0]
        return result_token(_WINNER_RESULT[children[0]])


class TextToSan:
    """Callable matcher holding one compiled forward grammar."""

    def __init__(self, parser: Lark, symbols: Mapping[str, str]) -> None:
        self._parser = parser
        self._builder = _SanBuilder(dict(symbols))

    def __call__(self, text: str) -> str:
        """Return SAN for *text*.

        Raises lark's ``UnexpectedInput`` when no alternative matches and
        :class:`EnPassantError` for an en-passant rank no capture reaches.
        """
        tree = self._parser.parse(text)
        try:
            return self._builder.transform(tree)
        except VisitError as exc:
            if isinstance(exc.orig_exc, EnPassantError):
                raise exc.orig_exc from None
            raise
