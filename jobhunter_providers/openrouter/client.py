"""OpenRouter provider adapter (OpenAI-style over HTTP).

Summary:
- Non-streaming chat completions via ``httpx`` against the single gateway
  base URL, exposing many upstream models under one key.
- Every request carries the attribution headers OpenRouter requires
  (``HTTP-Referer`` and ``X-Title``) plus the bearer key.
- Non-2xx answers become ``ProviderError`` with status and body preserved.

This module orchestrates I/O only; payload shaping and response validation
live in ``base.openai_style``.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import ErrorCode, ProviderError
from ..base.http import build_async_client
from ..base.invocation import invoke_logged
from ..base.logging import LogContext, get_logger
from ..base.models import EffectiveConfig, GenerationRequest, GenerationResult, ProviderId
from ..base.openai_style import build_chat_payload, post_chat_completion
from ..config.defaults import (
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_MODEL,
    OPENROUTER_DEFAULT_REFERER,
    OPENROUTER_DEFAULT_TITLE,
)


class OpenRouterProvider:
    """OpenRouter gateway provider.

    Parameters:
        base_url: Gateway base URL (defaults to ``https://openrouter.ai/api/v1``).
        referer: Value of the ``HTTP-Referer`` attribution header.
        title: Value of the ``X-Title`` attribution header.
        transport: Optional ``httpx`` transport override.
    """

    label = "OpenRouter"

    def __init__(
        self,
        *,
        base_url: str = OPENROUTER_DEFAULT_BASE_URL,
        referer: str = OPENROUTER_DEFAULT_REFERER,
        title: str = OPENROUTER_DEFAULT_TITLE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._referer = referer
        self._title = title
        self._transport = transport
        self._logger = get_logger("jobhunter.providers.openrouter")

    @property
    def provider_id(self) -> ProviderId:
        return ProviderId.OPENROUTER

    def is_available(self, config: EffectiveConfig) -> bool:
        return bool(config.slot(self.provider_id).credential)

    def _headers(self, api_key: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "HTTP-Referer": self._referer,
            "X-Title": self._title,
        }

    async def generate(
        self,
        request: GenerationRequest,
        config: EffectiveConfig,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        slot = config.slot(self.provider_id)
        model = slot.model or OPENROUTER_DEFAULT_MODEL
        if not slot.credential:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="OpenRouter API key is not configured",
                provider=self.provider_id.value,
                model=model,
            )
        api_key = slot.credential

        async def _call() -> GenerationResult:
            payload = build_chat_payload(model, request, config)
            async with build_async_client(headers=self._headers(api_key), transport=self._transport) as client:
                envelope = await post_chat_completion(
                    client,
                    f"{self._base_url}/chat/completions",
                    payload,
                    provider=self.provider_id.value,
                    label=self.label,
                    cancel=cancel,
                )
            return GenerationResult(
                text=envelope.text,
                provider_id=self.provider_id.value,
                model_id=model,
                tokens_used=envelope.total_tokens,
            )

        ctx = LogContext(provider=self.provider_id.value, model=model)
        return await invoke_logged(self._logger, ctx, _call)


__all__ = ["OpenRouterProvider"]
