"""
Closed provider identity enumeration.

The set of backends is fixed at build time; there is no runtime plugin
loading. ``ProviderId.parse`` is the single place where free-form strings
(persisted ``activeProvider`` values, probe overrides) become identities.
"""
from __future__ import annotations

from enum import Enum

from ..errors_parts.dispatch_errors import UnknownProviderError


class ProviderId(str, Enum):
    """Identifiers of the supported AI backends."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    LOCAL = "local"

    @classmethod
    def parse(cls, value: "str | ProviderId") -> "ProviderId":
        """Return the identity for ``value`` or raise ``UnknownProviderError``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownProviderError(value) from None

    def __str__(self) -> str:
        return self.value


__all__ = ["ProviderId"]
