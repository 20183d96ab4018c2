"""OpenAIProvider adapter.

Implements the hosted OpenAI chat-completion backend through the official
``openai`` SDK (``AsyncOpenAI.chat.completions.create``).

Key behaviors:
* The API key and model come from the ``EffectiveConfig`` slot; the model
  falls back to ``OPENAI_DEFAULT_MODEL``.
* SDK retries are disabled (``max_retries=0``): one attempt per call.
* The SDK runs on an ``httpx.AsyncClient`` built by ``base.http`` so tests can
  inject a ``MockTransport`` and so cancelling the call closes the socket.
* The SDK response is re-validated into ``ChatCompletionEnvelope`` before
  any field is read; ``tokens_used`` is ``usage.total_tokens`` when reported.
"""

from __future__ import annotations

from typing import Optional

import httpx
import openai

from ..base.cancellation import CancellationToken, run_cancellable
from ..base.errors import ErrorCode, ProviderError, classify_status
from ..base.http import build_async_client
from ..base.invocation import invoke_logged
from ..base.logging import LogContext, get_logger
from ..base.models import EffectiveConfig, GenerationRequest, GenerationResult, ProviderId
from ..base.openai_style import ChatCompletionEnvelope, build_messages, parse_envelope, resolve_sampling
from ..config.defaults import OPENAI_DEFAULT_MODEL


class OpenAIProvider:
    """OpenAI chat-completion provider.

    Parameters:
        base_url: Optional API base URL override (e.g. an Azure-compatible
            proxy). ``None`` uses the SDK default.
        transport: Optional ``httpx`` transport used by the SDK client.
    """

    label = "OpenAI"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url
        self._transport = transport
        self._logger = get_logger("jobhunter.providers.openai")

    @property
    def provider_id(self) -> ProviderId:
        return ProviderId.OPENAI

    def is_available(self, config: EffectiveConfig) -> bool:
        return bool(config.slot(self.provider_id).credential)

    async def generate(
        self,
        request: GenerationRequest,
        config: EffectiveConfig,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """Run one chat completion.

        Raises:
            ProviderError: On missing key, upstream status, transport failure
                or malformed response.
            CancelledError: When ``cancel`` fires mid-request.
        """
        slot = config.slot(self.provider_id)
        model = slot.model or OPENAI_DEFAULT_MODEL
        if not slot.credential:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="OpenAI API key is not configured",
                provider=self.provider_id.value,
                model=model,
            )
        ctx = LogContext(provider=self.provider_id.value, model=model)
        return await invoke_logged(
            self._logger, ctx, lambda: self._complete(slot.credential, model, request, config, cancel)
        )

    async def _complete(
        self,
        api_key: str,
        model: str,
        request: GenerationRequest,
        config: EffectiveConfig,
        cancel: Optional[CancellationToken],
    ) -> GenerationResult:
        sampling = resolve_sampling(request, config)
        client = openai.AsyncOpenAI(
            api_key=api_key,
            base_url=self._base_url,
            max_retries=0,
            http_client=build_async_client(transport=self._transport),
        )
        try:
            async with client:
                completion = await run_cancellable(
                    client.chat.completions.create(
                        model=model,
                        messages=build_messages(request),
                        temperature=sampling.temperature,
                        max_tokens=sampling.max_tokens,
                    ),
                    cancel,
                )
        except openai.APIStatusError as exc:
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
        except openai.APIConnectionError as exc:
            code = ErrorCode.TIMEOUT if isinstance(exc, openai.APITimeoutError) else ErrorCode.NETWORK
            raise ProviderError(
                code=code,
                message=f"{self.label} request failed: {exc}",
                provider=self.provider_id.value,
                model=model,
                raw=exc,
            ) from exc

        envelope = parse_envelope(
            ChatCompletionEnvelope,
            completion.model_dump(),
            provider=self.provider_id.value,
            model=model,
        )
        return GenerationResult(
            text=envelope.text,
            provider_id=self.provider_id.value,
            model_id=model,
            tokens_used=envelope.total_tokens,
        )


__all__ = ["OpenAIProvider"]
