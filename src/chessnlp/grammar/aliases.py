"""Alias slots — the configurable vocabulary of the text grammar.

Every slot pairs a canonical SAN symbol with the surface terms that spell it.
A language supplies the default terms, callers may add more::

    table = AliasTable.build(vocabulary, {"knight": ["night"], 4: ["for"]})
    table.resolve("knight")   # ("knight", "night")
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from chessnlp.core.enums import CastleSide, Color, SlotCategory
from chessnlp.core.errors import ConfigurationError
from chessnlp.core.types import CASTLE_TOKENS, FILES, PIECE_LETTERS, RANKS

# ── Slot registry ────────────────────────────────────────────────────────────

_KEYWORD_SYMBOLS: dict[str, str] = {
    "capture": "x",
    "move": "",
    "promote": "=",
    "check": "+",
    "checkmate": "#",
    "castle": "",
    "en_passant": "",
    "resign": "",
    "win": "",
    "draw": "1/2-1/2",
    "pawn": "",
}


def _registry() -> dict[str, tuple[SlotCategory, str]]:
    slots: dict[str, tuple[SlotCategory, str]] = {}
    for piece_type, letter in PIECE_LETTERS.items():
        slots[piece_type.name.lower()] = (SlotCategory.PIECE, letter)
    for file in FILES:
        slots[file] = (SlotCategory.FILE, file)
    for rank in RANKS:
        slots[rank] = (SlotCategory.RANK, rank)
    for color in Color:
        slots[str(color)] = (SlotCategory.SIDE, str(color))
    for side in CastleSide:
        slots[side.name.lower()] = (SlotCategory.CASTLE_SIDE, CASTLE_TOKENS[side])
    for name, symbol in _KEYWORD_SYMBOLS.items():
        slots[name] = (SlotCategory.KEYWORD, symbol)
    return slots


SLOT_REGISTRY: Mapping[str, tuple[SlotCategory, str]] = MappingProxyType(_registry())
SLOT_NAMES: tuple[str, ...] = tuple(SLOT_REGISTRY)


def normalize_term(term: object, slot: str) -> str:
    """Validate one surface term and bring it into canonical form.

    Terms are lower-cased and internal whitespace runs collapse to a single
    space (the grammar matches that space as any run of whitespace).
    """
    if not isinstance(term, str):
        raise ConfigurationError(
            f"Alias for slot {slot!r} must be a string, got {type(term).__name__}"
        )
    clean = " ".join(term.split()).lower()
    if not clean:
        raise ConfigurationError(f"Empty alias for slot {slot!r}")
    if "\\" in clean:
        raise ConfigurationError(f"Alias {term!r} for slot {slot!r} contains a backslash")
    return clean


def _as_terms(value: object, slot: str) -> tuple[str, ...]:
    if isinstance(value, str):
        value = (value,)
    if not isinstance(value, Iterable):
        raise ConfigurationError(f"Aliases for slot {slot!r} must be a list of strings")
    return tuple(normalize_term(term, slot) for term in value)


# ── Slot / table ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AliasSlot:
    """One configurable vocabulary entry."""

    name: str
    category: SlotCategory
    symbol: str
    default_terms: tuple[str, ...]
    extra_terms: tuple[str, ...] = ()

    @property
    def rule_name(self) -> str:
        """Grammar rule generated for this slot, e.g. ``piece_king``."""
        return f"{self.category.value}_{self.name}"

    @property
    def terms(self) -> tuple[str, ...]:
        """Every accepted term, de-duplicated, longest first."""
        unique = dict.fromkeys(self.default_terms + self.extra_terms)
        return tuple(sorted(unique, key=lambda term: (-len(term), term)))


class AliasTable(Mapping[str, AliasSlot]):
    """Immutable mapping of slot name → :class:`AliasSlot`."""

    def __init__(self, slots: Iterable[AliasSlot]) -> None:
        self._slots: dict[str, AliasSlot] = {slot.name: slot for slot in slots}
        self._check_conflicts()

    @classmethod
    def build(
        cls,
        vocabulary: Mapping[str, Sequence[str]],
        aliases: Mapping[object, object] | None = None,
    ) -> AliasTable:
        """Merge a language *vocabulary* with caller-supplied *aliases*."""
        extras: dict[str, tuple[str, ...]] = {}
        for key, value in (aliases or {}).items():
            name = str(key).lower()
            if name not in SLOT_REGISTRY:
                raise ConfigurationError(f"Unknown alias slot: {key!r}")
            extras[name] = extras.get(name, ()) + _as_terms(value, name)

        slots: list[AliasSlot] = []
        for name, (category, symbol) in SLOT_REGISTRY.items():
            defaults = _as_terms(vocabulary.get(name, ()), name)
            if not defaults:
                raise ConfigurationError(f"No default terms for slot {name!r}")
            slots.append(
                AliasSlot(
                    name=name,
                    category=category,
                    symbol=symbol,
                    default_terms=defaults,
                    extra_terms=extras.get(name, ()),
                )
            )
        return cls(slots)

    # ── Mapping protocol ─────────────────────────────────────────────────

    def __getitem__(self, name: str) -> AliasSlot:
        return self._slots[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    # ── Queries ──────────────────────────────────────────────────────────

    def resolve(self, name: object) -> tuple[str, ...]:
        """Accepted terms for slot *name*, longest first."""
        try:
            return self._slots[str(name).lower()].terms
        except KeyError:
            raise ConfigurationError(f"Unknown alias slot: {name!r}") from None

    def symbols(self) -> dict[str, str]:
        """Map generated rule name → canonical symbol."""
        return {slot.rule_name: slot.symbol for slot in self._slots.values()}

    def _check_conflicts(self) -> None:
        owners: dict[tuple[SlotCategory, str], str] = {}
        for slot in self._slots.values():
            for term in slot.terms:
                key = (slot.category, term)
                owner = owners.setdefault(key, slot.name)
                if owner != slot.name:
                    raise ConfigurationError(
                        f"Alias {term!r} is claimed by both {owner!r} and {slot.name!r}"
                    )
