"""Local LLM provider adapter.

Any self-hosted server exposing the OpenAI-compatible
``/v1/chat/completions`` endpoint works: Ollama (default
``http://localhost:11434``), LM Studio, vLLM or text-generation-webui.

Behavior:
- The "credential" of this provider is the server base URL; it is available
  iff a URL is resolved (user value or server fallback).
- Trailing slashes are stripped before appending ``/v1/chat/completions``.
- No authorization header is sent.
- Non-2xx bodies are captured verbatim:
  ``Local LLM error ({status}): {body}``.
- Token usage is reported only when the server includes it.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import ErrorCode, ProviderError
from ..base.http import build_async_client
from ..base.invocation import invoke_logged
from ..base.logging import LogContext, get_logger
from ..base.models import EffectiveConfig, GenerationRequest, GenerationResult, ProviderId
from ..base.openai_style import build_chat_payload, post_chat_completion
from ..config.defaults import LOCAL_LLM_CHAT_PATH, LOCAL_LLM_DEFAULT_MODEL


def chat_endpoint(base_url: str) -> str:
    """Return ``{base_url}/v1/chat/completions`` with trailing slashes removed."""
    return base_url.rstrip("/") + LOCAL_LLM_CHAT_PATH


class LocalLLMProvider:
    """Provider for OpenAI-compatible self-hosted servers.

    Parameters:
        transport: Optional ``httpx`` transport override.
    """

    label = "Local LLM"

    def __init__(self, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._transport = transport
        self._logger = get_logger("jobhunter.providers.local")

    @property
    def provider_id(self) -> ProviderId:
        return ProviderId.LOCAL

    def is_available(self, config: EffectiveConfig) -> bool:
        return bool(config.slot(self.provider_id).credential)

    async def generate(
        self,
        request: GenerationRequest,
        config: EffectiveConfig,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        slot = config.slot(self.provider_id)
        model = slot.model or LOCAL_LLM_DEFAULT_MODEL
        if not slot.credential:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="Local LLM URL is not configured",
                provider=self.provider_id.value,
                model=model,
            )
        endpoint = chat_endpoint(slot.credential)

        async def _call() -> GenerationResult:
            payload = build_chat_payload(model, request, config)
            async with build_async_client(transport=self._transport) as client:
                envelope = await post_chat_completion(
                    client,
                    endpoint,
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


__all__ = ["LocalLLMProvider", "chat_endpoint"]
