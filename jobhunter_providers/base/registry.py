"""Provider registry.

Purpose
-------
Map each ``ProviderId`` to its adapter through a closed, immutable table
built once at process start and injected into the dispatcher and probe.
There is no runtime plugin loading and no module-level mutable singleton;
tests build registries holding doubles for individual providers.

Failure semantics
-----------------
``resolve`` raises :class:`UnknownProviderError` for identifiers outside the
enumeration or not registered.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import httpx

from .errors import UnknownProviderError
from .interfaces import AIProvider
from .models import ProviderId


class ProviderRegistry:
    """Read-only mapping from provider identity to adapter."""

    def __init__(self, providers: Mapping[ProviderId, AIProvider]) -> None:
        self._providers: Mapping[ProviderId, AIProvider] = MappingProxyType(dict(providers))

    def resolve(self, provider_id: "str | ProviderId") -> AIProvider:
        """Return the adapter for ``provider_id`` or raise ``UnknownProviderError``."""
        identity = ProviderId.parse(provider_id)
        try:
            return self._providers[identity]
        except KeyError:
            raise UnknownProviderError(provider_id) from None

    def supported(self) -> Tuple[ProviderId, ...]:
        """Registered identities in enumeration order."""
        return tuple(p for p in ProviderId if p in self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)


class RegistryBuilder:
    """Collects registrations, then freezes them into a ``ProviderRegistry``."""

    def __init__(self) -> None:
        self._providers: Dict[ProviderId, AIProvider] = {}

    def register(self, provider_id: "str | ProviderId", provider: AIProvider) -> "RegistryBuilder":
        """Register ``provider`` under ``provider_id`` (re-registration replaces)."""
        self._providers[ProviderId.parse(provider_id)] = provider
        return self

    def build(self) -> ProviderRegistry:
        return ProviderRegistry(self._providers)


def build_default_registry(
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    openrouter_referer: Optional[str] = None,
    openrouter_title: Optional[str] = None,
) -> ProviderRegistry:
    """Register the four built-in backends.

    Parameters
    ----------
    transport:
        Optional ``httpx`` transport shared by every adapter (tests).
    openrouter_referer / openrouter_title:
        Attribution header overrides for OpenRouter.
    """
    # Adapters import their SDKs; keep them out of module import time.
    from ..anthropic.client import AnthropicProvider
    from ..local.client import LocalLLMProvider
    from ..openai.client import OpenAIProvider
    from ..openrouter.client import OpenRouterProvider

    openrouter_kwargs = {}
    if openrouter_referer:
        openrouter_kwargs["referer"] = openrouter_referer
    if openrouter_title:
        openrouter_kwargs["title"] = openrouter_title

    return (
        RegistryBuilder()
        .register(ProviderId.OPENAI, OpenAIProvider(transport=transport))
        .register(ProviderId.ANTHROPIC, AnthropicProvider(transport=transport))
        .register(ProviderId.OPENROUTER, OpenRouterProvider(transport=transport, **openrouter_kwargs))
        .register(ProviderId.LOCAL, LocalLLMProvider(transport=transport))
        .build()
    )


__all__ = ["ProviderRegistry", "RegistryBuilder", "build_default_registry"]
