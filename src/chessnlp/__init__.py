"""chessnlp — translate natural-language chess moves to SAN and back.

Quick start::

    from chessnlp import ChessNLP

    nlp = ChessNLP(aliases={"knight": ["night"]})
    nlp.text_to_san("night takes e5 check")   # "Nxe5+"
    nlp.san_to_text("Nxe5+")                  # "knight captures e5 check"
"""

from chessnlp.core.errors import (
    ConfigurationError,
    EnPassantError,
    MoveSyntaxError,
    NotationError,
)
from chessnlp.i18n import LANGUAGES, Language
from chessnlp.settings import TranslatorSettings
from chessnlp.translator import ChessNLP

__all__ = [
    "ChessNLP",
    "TranslatorSettings",
    "Language",
    "LANGUAGES",
    "NotationError",
    "MoveSyntaxError",
    "EnPassantError",
    "ConfigurationError",
]
