"""Narrow, validated views of chat-completion responses.

Upstream JSON is validated into these models before any field is read; only
the fields this layer consumes are declared and everything else is ignored.
A payload that does not fit raises ``ProviderError`` with ``BAD_RESPONSE``.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import ErrorCode, ProviderError


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ChoiceMessage(_Lenient):
    content: Optional[str] = None


class Choice(_Lenient):
    message: Optional[ChoiceMessage] = None


class Usage(_Lenient):
    total_tokens: Optional[int] = None


class ChatCompletionEnvelope(_Lenient):
    """``{"choices": [{"message": {"content": ...}}], "usage": {...}}``"""

    choices: List[Choice] = []
    usage: Optional[Usage] = None

    @property
    def text(self) -> str:
        if not self.choices:
            return ""
        message = self.choices[0].message
        return (message.content if message is not None else None) or ""

    @property
    def total_tokens(self) -> Optional[int]:
        return self.usage.total_tokens if self.usage is not None else None


def parse_envelope(model_cls: type, payload: Any, *, provider: str, model: Optional[str]) -> Any:
    """Validate ``payload`` into ``model_cls`` or raise ``ProviderError``."""
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        raise ProviderError(
            code=ErrorCode.BAD_RESPONSE,
            message=f"Malformed response from {provider}: {exc.error_count()} validation error(s)",
            provider=provider,
            model=model,
            raw=exc,
        ) from exc


__all__ = ["ChatCompletionEnvelope", "Choice", "ChoiceMessage", "Usage", "parse_envelope"]
