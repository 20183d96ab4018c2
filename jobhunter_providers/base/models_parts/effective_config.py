"""
Resolved, non-persisted configuration snapshot.

Produced by the config resolver on every call; providers read their
credential and model from it and never see the raw persisted record.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .provider_identity import ProviderId


@dataclass(frozen=True)
class ProviderSlot:
    """Resolved settings for one provider.

    ``credential`` is the API key for hosted backends and the base URL for
    the local server; a provider is available iff it is present.
    """

    credential: Optional[str] = None
    model: Optional[str] = None


_EMPTY_SLOT = ProviderSlot()


@dataclass(frozen=True)
class EffectiveConfig:
    """Immutable view of a user's configuration with secrets merged."""

    active_provider: str
    slots: Mapping[ProviderId, ProviderSlot] = field(default_factory=dict)
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", MappingProxyType(dict(self.slots)))

    def slot(self, provider_id: ProviderId) -> ProviderSlot:
        return self.slots.get(provider_id, _EMPTY_SLOT)


__all__ = ["EffectiveConfig", "ProviderSlot"]
