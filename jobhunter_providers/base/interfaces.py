"""
Provider-agnostic interface for AI backends.

Every backend adapter implements :class:`AIProvider`. The dispatcher and the
connectivity probe only depend on this protocol, which keeps test doubles
trivial to inject through the registry.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .cancellation import CancellationToken
from .models import EffectiveConfig, GenerationRequest, GenerationResult, ProviderId


@runtime_checkable
class AIProvider(Protocol):
    """Minimal contract for one concrete AI backend.

    Implementations resolve their credential and model from the
    ``EffectiveConfig`` they are handed, apply the sampling defaulting chain,
    validate the upstream payload into a narrow type, and raise
    ``ProviderError`` on any upstream or transport failure.
    """

    @property
    def provider_id(self) -> ProviderId:
        """Identity under which the adapter is registered."""
        ...

    def is_available(self, config: EffectiveConfig) -> bool:
        """True iff this provider's resolved credential is present."""
        ...

    async def generate(
        self,
        request: GenerationRequest,
        config: EffectiveConfig,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """Execute one completion; the network call must honour ``cancel``."""
        ...


__all__ = ["AIProvider"]
