"""
Provider-agnostic domain models public surface.

This module re-exports the implementations under
``jobhunter_providers.base.models_parts`` so callers have one import path.
"""

from .models_parts.provider_identity import ProviderId
from .models_parts.provider_config import (
    DEFAULT_ACTIVE_PROVIDER,
    EDITABLE_FIELDS,
    ProviderConfig,
)
from .models_parts.effective_config import EffectiveConfig, ProviderSlot
from .models_parts.generation import (
    ConnectionResult,
    GenerationRequest,
    GenerationResult,
    PromptPair,
)
from .models_parts.candidate_profile import (
    CandidateProfile,
    CustomAnswer,
    EducationEntry,
    ExperienceEntry,
    SkillEntry,
)

__all__ = [
    "ProviderId",
    "ProviderConfig",
    "DEFAULT_ACTIVE_PROVIDER",
    "EDITABLE_FIELDS",
    "EffectiveConfig",
    "ProviderSlot",
    "GenerationRequest",
    "GenerationResult",
    "PromptPair",
    "ConnectionResult",
    "CandidateProfile",
    "CustomAnswer",
    "EducationEntry",
    "ExperienceEntry",
    "SkillEntry",
]
