"""Grammar assembly: template + alias rules → compiled lark parser."""

from __future__ import annotations

import logging
import re

from lark import Lark
from lark.exceptions import LarkError

from chessnlp.core.errors import ConfigurationError
from chessnlp.grammar.aliases import AliasSlot, AliasTable

_LOGGER = logging.getLogger(__name__)


def term_pattern(term: str) -> str:
    """Lark regexp literal matching *term* case-insensitively.

    Spaces inside a term match any run of whitespace.
    """
    body = r"\s+".join(re.escape(word) for word in term.split(" "))
    return "/" + body.replace("/", r"\/") + "/i"


def slot_rule(slot: AliasSlot) -> str:
    """Rule text for one alias slot, alternatives longest first."""
    alternatives = " | ".join(term_pattern(term) for term in slot.terms)
    return f"{slot.rule_name}: {alternatives}\n"


def referenced_slots(template: str, table: AliasTable) -> list[AliasSlot]:
    """Slots whose generated rule name occurs in *template*."""
    return [
        slot
        for slot in table.values()
        if re.search(rf"\b{re.escape(slot.rule_name)}\b", template)
    ]


def assemble(template: str, table: AliasTable | None = None) -> Lark:
    """Append generated alias rules to *template* and compile it.

    Raises :class:`ConfigurationError` when the result does not compile.
    """
    slots = referenced_slots(template, table) if table is not None else []
    text = template + "\n" + "".join(slot_rule(slot) for slot in slots)
    try:
        parser = Lark(
            text,
            start="start",
            parser="earley",
            lexer="dynamic",
            ambiguity="resolve",
        )
    except LarkError as exc:
        raise ConfigurationError(f"Grammar failed to compile: {exc}") from exc

    _LOGGER.debug("Assembled grammar with %d alias rules", len(slots))
    return parser
