"""Exception hierarchy shared by every translator layer."""

from __future__ import annotations

from chessnlp.core.enums import Direction


class NotationError(ValueError):
    """Base class for all translator failures."""


class MoveSyntaxError(NotationError):
    """Input matched no grammar alternative."""

    def __init__(self, message: str, *, text: str, direction: Direction) -> None:
        super().__init__(message)
        self.text = text
        self.direction = direction


class EnPassantError(NotationError):
    """An en-passant phrase named a destination rank no capture can reach."""

    def __init__(self, message: str, *, rank: str, text: str = "") -> None:
        super().__init__(message)
        self.rank = rank
        self.text = text


class ConfigurationError(NotationError):
    """Alias data, language tag or grammar template is unusable."""
