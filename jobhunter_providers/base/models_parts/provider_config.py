"""
Persisted per-user provider configuration record.

Mirrors the ``ai_configs`` row: one optional (secret, model) pair per
provider, the selected ``active_provider``, and shared sampling defaults.
``active_provider`` is kept as a raw string; it is validated against the
registry at dispatch time so that a stale or corrupted value surfaces as an
``UnknownProviderError`` instead of failing at load.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

DEFAULT_ACTIVE_PROVIDER = "openai"

# Columns a user may change through an upsert.
EDITABLE_FIELDS = (
    "active_provider",
    "openai_api_key",
    "openai_model",
    "anthropic_api_key",
    "anthropic_model",
    "openrouter_api_key",
    "openrouter_model",
    "local_llm_url",
    "local_llm_model",
    "temperature",
    "max_tokens",
)


@dataclass
class ProviderConfig:
    """User-owned AI settings as stored by the persistence layer.

    Attributes:
        user_id: Owning user.
        active_provider: Provider selected for dispatch.
        openai_api_key / anthropic_api_key / openrouter_api_key: User secrets;
            ``None`` means "fall back to the server key".
        *_model: Per-provider model override; ``None`` means provider default.
        local_llm_url / local_llm_model: Self-hosted server endpoint and model.
        temperature: Shared default in ``[0, 2]``.
        max_tokens: Shared default in ``[1, 8192]``.
        updated_at: ISO-8601 timestamp string maintained by the repository.
    """

    user_id: str
    active_provider: str = DEFAULT_ACTIVE_PROVIDER
    openai_api_key: Optional[str] = None
    openai_model: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    anthropic_model: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    openrouter_model: Optional[str] = None
    local_llm_url: Optional[str] = None
    local_llm_model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    updated_at: Optional[str] = None

    def merged(self, changes: Dict[str, Any]) -> "ProviderConfig":
        """Return a copy with ``changes`` applied.

        Only keys in ``EDITABLE_FIELDS`` are honoured. An empty string clears
        an optional text field back to ``None``.
        """
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        for key, value in changes.items():
            if key not in EDITABLE_FIELDS:
                continue
            if isinstance(value, str) and not value.strip() and key != "active_provider":
                value = None
            data[key] = value
        return ProviderConfig(**data)


__all__ = ["ProviderConfig", "EDITABLE_FIELDS", "DEFAULT_ACTIVE_PROVIDER"]
