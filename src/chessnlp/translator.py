"""ChessNLP — natural-language ↔ SAN translator facade.

Examples::

    nlp = ChessNLP()
    nlp.text_to_san("bishop a takes e4")      # "Baxe4"
    nlp.text_to_san("f captures g4 en passant")  # "fxg3"
    nlp.san_to_text("O-O")                    # "castle kingside"

Both grammars are assembled once in the constructor and never change after
it, so one instance may serve concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from lark.exceptions import UnexpectedInput

from chessnlp.core.enums import Direction
from chessnlp.core.errors import EnPassantError, MoveSyntaxError
from chessnlp.grammar.aliases import AliasTable
from chessnlp.grammar.assembler import assemble
from chessnlp.i18n import Language, Strings, language_config
from chessnlp.notation.forward import TextToSan
from chessnlp.notation.inverse import SanToText
from chessnlp.settings import TranslatorSettings

_LOGGER = logging.getLogger(__name__)


class ChessNLP:
    """Convert free-text move descriptions to SAN and back."""

    def __init__(
        self,
        aliases: Mapping[object, object] | None = None,
        language: Language | str = Language.ENGLISH,
    ) -> None:
        config = language_config(language)
        self.language: Language = config.language
        self.aliases: AliasTable = AliasTable.build(config.vocabulary, aliases)
        self._strings: Strings = config.strings

        self._text_to_san = TextToSan(
            assemble(config.forward_template, self.aliases), self.aliases.symbols()
        )
        self._san_to_text = SanToText(assemble(config.inverse_template), config.strings)
        _LOGGER.debug(
            "ChessNLP ready (language=%s, caller aliases=%d)",
            self.language.value,
            sum(len(slot.extra_terms) for slot in self.aliases.values()),
        )

    @classmethod
    def from_settings(cls, settings: TranslatorSettings | Mapping[str, object]) -> ChessNLP:
        """Create a translator from settings or a plain options mapping."""
        if not isinstance(settings, TranslatorSettings):
            settings = TranslatorSettings.from_mapping(settings)
        return cls(aliases=settings.aliases, language=settings.language)

    # ── Public API ───────────────────────────────────────────────────────

    def text_to_san(self, text: str) -> str:
        """Convert a move description such as ``"knight to f3"`` to SAN."""
        try:
            return self._text_to_san(text)
        except UnexpectedInput:
            raise MoveSyntaxError(
                self._strings.invalid_move.format(text=text),
                text=text,
                direction=Direction.TEXT_TO_SAN,
            ) from None
        except EnPassantError as exc:
            raise EnPassantError(
                self._strings.invalid_en_passant.format(text=text),
                rank=exc.rank,
                text=text,
            ) from None

    def san_to_text(self, san: str) -> str:
        """Convert a SAN token such as ``"Nf3"`` to a phrase."""
        try:
            return self._san_to_text(san)
        except UnexpectedInput:
            raise MoveSyntaxError(
                self._strings.invalid_notation.format(text=san),
                text=san,
                direction=Direction.SAN_TO_TEXT,
            ) from None

    # Compatibility names
    to_san = text_to_san
    from_san = san_to_text
