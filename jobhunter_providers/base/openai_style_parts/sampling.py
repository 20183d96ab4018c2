"""Sampling defaults chain and chat payload construction.

Every provider applies the same precedence for ``temperature`` and
``max_tokens``: per-request value, then the user's effective config value,
then the hardcoded fallback (0.7 / 1024).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...config.defaults import FALLBACK_MAX_TOKENS, FALLBACK_TEMPERATURE
from ..models import EffectiveConfig, GenerationRequest


@dataclass(frozen=True)
class Sampling:
    temperature: float
    max_tokens: int


def _first(*values: Optional[Any]) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_sampling(request: GenerationRequest, config: EffectiveConfig) -> Sampling:
    """Apply request > config > fallback precedence."""
    return Sampling(
        temperature=float(_first(request.temperature, config.temperature, FALLBACK_TEMPERATURE)),
        max_tokens=int(_first(request.max_tokens, config.max_tokens, FALLBACK_MAX_TOKENS)),
    )


def build_messages(request: GenerationRequest) -> List[Dict[str, str]]:
    """Return ``[system?, user]`` chat messages."""
    messages: List[Dict[str, str]] = []
    if request.system_prompt:
        messages.append({"role": "system", "content": request.system_prompt})
    messages.append({"role": "user", "content": request.prompt})
    return messages


def build_chat_payload(model: str, request: GenerationRequest, config: EffectiveConfig) -> Dict[str, Any]:
    """Build a non-streaming chat-completion body."""
    sampling = resolve_sampling(request, config)
    return {
        "model": model,
        "messages": build_messages(request),
        "temperature": sampling.temperature,
        "max_tokens": sampling.max_tokens,
        "stream": False,
    }


__all__ = ["Sampling", "resolve_sampling", "build_messages", "build_chat_payload"]
