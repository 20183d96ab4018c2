"""Raw ``httpx`` transport for OpenAI-compatible chat-completion endpoints.

``post_chat_completion`` issues one POST under the caller's cancellation
token, converts transport failures and non-2xx answers into
``ProviderError`` (status and body text preserved), and validates the JSON
into :class:`ChatCompletionEnvelope`. No retries are performed.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..cancellation import CancellationToken, run_cancellable
from ..errors import ErrorCode, ProviderError, classify_exception, classify_status
from .envelopes import ChatCompletionEnvelope, parse_envelope


async def post_chat_completion(
    client: httpx.AsyncClient,
    url: str,
    payload: Dict[str, Any],
    *,
    provider: str,
    label: str,
    cancel: Optional[CancellationToken] = None,
) -> ChatCompletionEnvelope:
    """POST ``payload`` to ``url`` and return the validated envelope.

    Parameters
    ----------
    client:
        Open async client (headers such as ``Authorization`` already set).
    url:
        Absolute or client-relative endpoint URL.
    payload:
        Chat-completion body.
    provider:
        Provider id recorded on raised errors.
    label:
        Human-readable backend name used in error messages
        (``"{label} error ({status}): {body}"``).
    cancel:
        Optional token; firing it abandons the in-flight request.

    Raises
    ------
    ProviderError
        On transport failure, non-2xx status, or malformed JSON.
    CancelledError
        When ``cancel`` fires before the response arrives.
    """
    model = payload.get("model")
    try:
        response = await run_cancellable(client.post(url, json=payload), cancel)
    except httpx.HTTPError as exc:
        raise ProviderError(
            code=classify_exception(exc),
            message=f"{label} request failed: {exc.__class__.__name__}: {exc}",
            provider=provider,
            model=model,
            raw=exc,
        ) from exc

    if response.is_error:
        body = response.text or "Unknown error"
        raise ProviderError(
            code=classify_status(response.status_code),
            message=f"{label} error ({response.status_code}): {body}",
            provider=provider,
            model=model,
            status_code=response.status_code,
            body=body,
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise ProviderError(
            code=ErrorCode.BAD_RESPONSE,
            message=f"{label} returned a non-JSON response",
            provider=provider,
            model=model,
            status_code=response.status_code,
            body=response.text,
            raw=exc,
        ) from exc
    return parse_envelope(ChatCompletionEnvelope, data, provider=provider, model=model)


__all__ = ["post_chat_completion"]
