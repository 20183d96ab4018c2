"""JobHunter AI provider layer.

Uniform access to interchangeable language-model backends (OpenAI, Anthropic,
OpenRouter, and self-hosted OpenAI-compatible servers), per-user configuration
resolution with server-level secret fallback, deterministic prompt
construction from candidate profiles, and a non-throwing connectivity probe.
"""

from .base.models import (
    CandidateProfile,
    ConnectionResult,
    EffectiveConfig,
    GenerationRequest,
    GenerationResult,
    ProviderId,
)
from .base.registry import ProviderRegistry, build_default_registry

__version__ = "0.1.0"

__all__ = [
    "CandidateProfile",
    "ConnectionResult",
    "EffectiveConfig",
    "GenerationRequest",
    "GenerationResult",
    "ProviderId",
    "ProviderRegistry",
    "build_default_registry",
    "__version__",
]
