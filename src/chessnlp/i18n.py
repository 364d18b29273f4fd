"""Language configurations: vocabulary, phrasing and messages.

Usage::

    from chessnlp.i18n import Language, language_config

    config = language_config(Language.RUSSIAN)
    print(config.strings.piece_names[PieceType.QUEEN])   # "ферзь"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from chessnlp.core.enums import CastleSide, GameResult, PieceType
from chessnlp.core.errors import ConfigurationError
from chessnlp.grammar.templates import FORWARD_ENGLISH, FORWARD_RUSSIAN, SAN_GRAMMAR


class Language(Enum):
    """Supported natural languages."""

    ENGLISH = "en"
    RUSSIAN = "ru"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: Language | str) -> Language:
        """Resolve an enum member, code (``"ru"``) or display name (``"Russian"``)."""
        if isinstance(value, Language):
            return value
        key = str(value).strip().lower()
        for language in cls:
            if key in (language.value, language.name.lower()):
                return language
        raise ConfigurationError(f"Unsupported language: {value!r}")


def _read_only(mapping: Mapping) -> Mapping:
    """Private copy of *mapping* that callers cannot modify."""
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Strings:
    # ── Generated phrases ────────────────────────────────────────────────
    piece_names: Mapping[PieceType, str]
    promotion_names: Mapping[PieceType, str]  # form used after promote_to
    moves_to: str
    captures: str
    promote_to: str
    check: str
    checkmate: str
    castles: Mapping[CastleSide, str]
    results: Mapping[GameResult, str]

    # ── Errors ───────────────────────────────────────────────────────────
    invalid_move: str  # "Invalid move: {text}"
    invalid_notation: str  # "Invalid notation: {text}"
    invalid_en_passant: str  # "Invalid en passant capture: {text}"

    def __post_init__(self) -> None:
        for name in ("piece_names", "promotion_names", "castles", "results"):
            object.__setattr__(self, name, _read_only(getattr(self, name)))


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN_PIECES = {
    PieceType.KING: "king",
    PieceType.QUEEN: "queen",
    PieceType.ROOK: "rook",
    PieceType.BISHOP: "bishop",
    PieceType.KNIGHT: "knight",
}

_EN = Strings(
    piece_names=_EN_PIECES,
    promotion_names=_EN_PIECES,
    moves_to="to",
    captures="captures",
    promote_to="promote to",
    check="check",
    checkmate="checkmate",
    castles={
        CastleSide.KINGSIDE: "castle kingside",
        CastleSide.QUEENSIDE: "castle queenside",
    },
    results={
        GameResult.WHITE_WINS: "white wins",
        GameResult.BLACK_WINS: "black wins",
        GameResult.DRAW: "draw",
    },
    invalid_move="Invalid move: {text}",
    invalid_notation="Invalid notation: {text}",
    invalid_en_passant="Invalid en passant capture: {text}",
)

_RU = Strings(
    piece_names={
        PieceType.KING: "король",
        PieceType.QUEEN: "ферзь",
        PieceType.ROOK: "ладья",
        PieceType.BISHOP: "слон",
        PieceType.KNIGHT: "конь",
    },
    promotion_names={
        PieceType.QUEEN: "ферзя",
        PieceType.ROOK: "ладью",
        PieceType.BISHOP: "слона",
        PieceType.KNIGHT: "коня",
    },
    moves_to="на",
    captures="берёт",
    promote_to="превращение в",
    check="шах",
    checkmate="мат",
    castles={
        CastleSide.KINGSIDE: "короткая рокировка",
        CastleSide.QUEENSIDE: "длинная рокировка",
    },
    results={
        GameResult.WHITE_WINS: "белые выигрывают",
        GameResult.BLACK_WINS: "чёрные выигрывают",
        GameResult.DRAW: "ничья",
    },
    invalid_move="Неверный ход: {text}",
    invalid_notation="Неверная нотация: {text}",
    invalid_en_passant="Неверное взятие на проходе: {text}",
)

# ── Default vocabularies (slot name → accepted terms) ───────────────────────

_EN_VOCABULARY: dict[str, tuple[str, ...]] = {
    "king": ("king",),
    "queen": ("queen",),
    "rook": ("rook",),
    "bishop": ("bishop",),
    "knight": ("knight",),
    "a": ("a",),
    "b": ("b",),
    "c": ("c",),
    "d": ("d",),
    "e": ("e",),
    "f": ("f",),
    "g": ("g",),
    "h": ("h",),
    "1": ("1", "one"),
    "2": ("2", "two"),
    "3": ("3", "three"),
    "4": ("4", "four"),
    "5": ("5", "five"),
    "6": ("6", "six"),
    "7": ("7", "seven"),
    "8": ("8", "eight"),
    "white": ("white",),
    "black": ("black",),
    "kingside": ("kingside", "king side", "king-side", "short"),
    "queenside": ("queenside", "queen side", "queen-side", "long"),
    "capture": ("captures", "capture", "takes", "take"),
    "move": ("moves to", "move to", "to"),
    "promote": ("promote to", "promotes to", "promoted to"),
    "check": ("check",),
    "checkmate": ("checkmate", "mate"),
    "castle": ("castle", "castles", "castling"),
    "en_passant": ("en passant", "en-passant", "e.p."),
    "resign": ("resigns", "resign"),
    "win": ("wins", "win"),
    "draw": ("draw",),
    "pawn": ("pawn",),
}

_RU_VOCABULARY: dict[str, tuple[str, ...]] = {
    "king": ("король", "короля"),
    "queen": ("ферзь", "ферзя"),
    "rook": ("ладья", "ладью", "ладьи"),
    "bishop": ("слон", "слона"),
    "knight": ("конь", "коня"),
    # Latin letters, their spoken names and look-alike Cyrillic letters
    "a": ("a", "а"),
    "b": ("b", "бэ", "б"),
    "c": ("c", "цэ", "ц", "с"),
    "d": ("d", "дэ", "д"),
    "e": ("e", "е"),
    "f": ("f", "эф", "ф"),
    "g": ("g", "жэ", "же", "г"),
    "h": ("h", "аш", "х"),
    "1": ("1", "один"),
    "2": ("2", "два"),
    "3": ("3", "три"),
    "4": ("4", "четыре"),
    "5": ("5", "пять"),
    "6": ("6", "шесть"),
    "7": ("7", "семь"),
    "8": ("8", "восемь"),
    "white": ("белые", "белый"),
    "black": ("чёрные", "черные", "чёрный", "черный"),
    "kingside": ("короткая", "короткую"),
    "queenside": ("длинная", "длинную"),
    "capture": ("берёт", "берет", "бьёт", "бьет"),
    "move": ("ходит на", "идёт на", "идет на", "на"),
    "promote": ("превращение в", "превращается в"),
    "check": ("шах",),
    "checkmate": ("шах и мат", "мат"),
    "castle": ("рокировка", "рокировку"),
    "en_passant": ("на проходе",),
    "resign": ("сдаются", "сдаётся", "сдается"),
    "win": ("выигрывают", "побеждают"),
    "draw": ("ничья",),
    "pawn": ("пешка",),
}


@dataclass(frozen=True)
class LanguageConfig:
    """Everything one language contributes to a translator."""

    language: Language
    forward_template: str
    inverse_template: str
    vocabulary: Mapping[str, tuple[str, ...]]
    strings: Strings

    def __post_init__(self) -> None:
        vocabulary = {slot: tuple(terms) for slot, terms in self.vocabulary.items()}
        object.__setattr__(self, "vocabulary", MappingProxyType(vocabulary))


_CONFIGS: dict[Language, LanguageConfig] = {
    Language.ENGLISH: LanguageConfig(
        language=Language.ENGLISH,
        forward_template=FORWARD_ENGLISH,
        inverse_template=SAN_GRAMMAR,
        vocabulary=_EN_VOCABULARY,
        strings=_EN,
    ),
    Language.RUSSIAN: LanguageConfig(
        language=Language.RUSSIAN,
        forward_template=FORWARD_RUSSIAN,
        inverse_template=SAN_GRAMMAR,
        vocabulary=_RU_VOCABULARY,
        strings=_RU,
    ),
}

LANGUAGES: list[str] = [language.display_name for language in _CONFIGS]


def language_config(language: Language | str) -> LanguageConfig:
    """Configuration for *language*; unknown tags raise :class:`ConfigurationError`."""
    return _CONFIGS[Language.parse(language)]
