"""
Generation request/result value objects.

Per-call overrides on ``GenerationRequest`` take precedence over the
``EffectiveConfig`` defaults, which take precedence over provider fallbacks.
Results are ephemeral; this layer never persists them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GenerationRequest:
    """Single prompt sent to a provider."""

    prompt: str
    system_prompt: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class GenerationResult:
    """Normalized provider output.

    Attributes:
        text: Completion text (empty string when the backend returned none).
        provider_id: Provider that produced the text.
        model_id: Model actually requested.
        tokens_used: Total tokens when the backend reports usage.
    """

    text: str
    provider_id: str
    model_id: str
    tokens_used: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the public response shape (camelCase, ``tokensUsed`` optional)."""
        out: Dict[str, Any] = {
            "text": self.text,
            "provider": self.provider_id,
            "model": self.model_id,
        }
        if self.tokens_used is not None:
            out["tokensUsed"] = self.tokens_used
        return out


@dataclass(frozen=True)
class PromptPair:
    """Fixed system prompt plus interpolated user prompt."""

    system: str
    user: str

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(prompt=self.user, system_prompt=self.system)


@dataclass(frozen=True)
class ConnectionResult:
    """Outcome of a connectivity probe; failures are values, not exceptions."""

    success: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"success": self.success, "message": self.message}


__all__ = ["GenerationRequest", "GenerationResult", "PromptPair", "ConnectionResult"]
