"""AnthropicProvider adapter.

Implements the Anthropic backend using the ``anthropic`` SDK Messages API
(``AsyncAnthropic.messages.create``).

Key behaviors:
* The system prompt travels in the top-level ``system`` field and is only
  sent when present; the user prompt is the single user message.
* ``max_tokens`` and ``temperature`` follow the shared defaulting chain;
  temperature is capped at the API maximum of 1.0.
* Token usage is ``input_tokens + output_tokens``.
* SDK retries are disabled; the SDK rides on an injectable ``httpx`` client,
  which requires the pre-1.0 SDK line that builds on ``httpx`` itself.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import anthropic
import httpx

from ..base.cancellation import CancellationToken, run_cancellable
from ..base.errors import ErrorCode, ProviderError, classify_status
from ..base.http import build_async_client
from ..base.invocation import invoke_logged
from ..base.logging import LogContext, get_logger
from ..base.models import EffectiveConfig, GenerationRequest, GenerationResult, ProviderId
from ..base.openai_style import parse_envelope, resolve_sampling
from ..config.defaults import ANTHROPIC_DEFAULT_MODEL, ANTHROPIC_MAX_TEMPERATURE
from .envelope import MessageEnvelope


class AnthropicProvider:
    """Anthropic Messages API provider.

    Parameters:
        base_url: Optional API base URL override; ``None`` uses the SDK default.
        transport: Optional ``httpx`` transport used by the SDK client.
    """

    label = "Anthropic"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url
        self._transport = transport
        self._logger = get_logger("jobhunter.providers.anthropic")

    @property
    def provider_id(self) -> ProviderId:
        return ProviderId.ANTHROPIC

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
        model = slot.model or ANTHROPIC_DEFAULT_MODEL
        if not slot.credential:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="Anthropic API key is not configured",
                provider=self.provider_id.value,
                model=model,
            )
        ctx = LogContext(provider=self.provider_id.value, model=model)
        return await invoke_logged(
            self._logger, ctx, lambda: self._complete(slot.credential, model, request, config, cancel)
        )

    def _params(self, model: str, request: GenerationRequest, config: EffectiveConfig) -> Dict[str, Any]:
        sampling = resolve_sampling(request, config)
        params: Dict[str, Any] = {
            "model": model,
            "max_tokens": sampling.max_tokens,
            "temperature": min(sampling.temperature, ANTHROPIC_MAX_TEMPERATURE),
            "messages": [{"role": "user", "content": request.prompt}],
        }
        if request.system_prompt:
            params["system"] = request.system_prompt
        return params

    async def _complete(
        self,
        api_key: str,
        model: str,
        request: GenerationRequest,
        config: EffectiveConfig,
        cancel: Optional[CancellationToken],
    ) -> GenerationResult:
        client = anthropic.AsyncAnthropic(
            api_key=api_key,
            base_url=self._base_url,
            max_retries=0,
            http_client=build_async_client(transport=self._transport),
        )
        try:
            async with client:
                message = await run_cancellable(
                    client.messages.create(**self._params(model, request, config)),
                    cancel,
                )
        except anthropic.APIStatusError as exc:
            body = exc.response.text or exc.message
            raise ProviderError(
                code=classify_status(exc.status_code),
                message=f"{self.label} error ({exc.status_code}): {body}",
                provider=self.provider_id.value,
                model=model,
                status_code=exc.status_code,
                body=body,
                raw=exc,
            ) from exc
        except anthropic.APIConnectionError as exc:
            code = ErrorCode.TIMEOUT if isinstance(exc, anthropic.APITimeoutError) else ErrorCode.NETWORK
            raise ProviderError(
                code=code,
                message=f"{self.label} request failed: {exc}",
                provider=self.provider_id.value,
                model=model,
                raw=exc,
            ) from exc

        envelope = parse_envelope(
            MessageEnvelope,
            message.model_dump(),
            provider=self.provider_id.value,
            model=model,
        )
        return GenerationResult(
            text=envelope.text,
            provider_id=self.provider_id.value,
            model_id=model,
            tokens_used=envelope.total_tokens,
        )


__all__ = ["AnthropicProvider"]
