"""Translator settings data class."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields

from chessnlp.core.errors import ConfigurationError
from chessnlp.i18n import Language


@dataclass
class TranslatorSettings:
    """All caller-configurable translator options."""

    # Display name ("English"), code ("en") or Language member
    language: Language | str = "English"

    # Slot name → extra surface terms, e.g. {"knight": ["night"]}
    aliases: Mapping[object, object] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, object] | None) -> TranslatorSettings:
        """Build settings from a plain options mapping; unknown keys are rejected."""
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(f"Unknown translator option(s): {', '.join(unknown)}")

        aliases = options.get("aliases")
        if aliases is None:
            options["aliases"] = {}
        elif not isinstance(aliases, Mapping):
            raise ConfigurationError("Option 'aliases' must be a mapping of slot → terms")
        return cls(**options)  # type: ignore[arg-type]
