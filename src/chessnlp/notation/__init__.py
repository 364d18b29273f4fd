"""Notation package: text → SAN matching and SAN → text generation."""

from chessnlp.notation.forward import TextToSan
from chessnlp.notation.inverse import SanToText, render
from chessnlp.notation.models import SanMove

__all__ = [
    "SanMove",
    "SanToText",
    "TextToSan",
    "render",
]
