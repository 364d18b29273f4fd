"""Grammar package: alias slots, rule templates and assembly."""

from chessnlp.grammar.aliases import SLOT_NAMES, AliasSlot, AliasTable
from chessnlp.grammar.assembler import assemble, slot_rule, term_pattern
from chessnlp.grammar.templates import FORWARD_ENGLISH, FORWARD_RUSSIAN, SAN_GRAMMAR

__all__ = [
    "SLOT_NAMES",
    "AliasSlot",
    "AliasTable",
    "assemble",
    "slot_rule",
    "term_pattern",
    "FORWARD_ENGLISH",
    "FORWARD_RUSSIAN",
    "SAN_GRAMMAR",
]
