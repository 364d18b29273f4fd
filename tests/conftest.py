"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessnlp import ChessNLP, Language
from chessnlp.grammar.aliases import AliasTable
from chessnlp.i18n import language_config


@pytest.fixture(scope="session")
def nlp() -> ChessNLP:
    """English translator without caller aliases."""
    return ChessNLP()


@pytest.fixture(scope="session")
def nlp_ru() -> ChessNLP:
    """Russian translator without caller aliases."""
    return ChessNLP(language=Language.RUSSIAN)


@pytest.fixture()
def english_table() -> AliasTable:
    """Default English alias table."""
    return AliasTable.build(language_config(Language.ENGLISH).vocabulary)
