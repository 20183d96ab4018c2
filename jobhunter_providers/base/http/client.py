"""Async HTTP client construction for providers.

Purpose:
    Provide one place where provider adapters obtain ``httpx.AsyncClient``
    instances, both for direct OpenAI-compatible calls (OpenRouter, local
    servers) and as the injected transport of the ``openai``/``anthropic``
    SDK clients.

Timeout strategy:
    No per-operation deadline is imposed; the client uses the long transport
    timeout from ``config.defaults`` (matching the SDK defaults) and callers
    bound latency themselves, typically via a cancellation token.

Lifecycle:
    A client is created per call and closed with ``async with``. Clients are
    bound to the running event loop, so pooling them across loops is unsafe.

Testing:
    ``transport`` accepts an ``httpx.MockTransport`` so adapters can be
    exercised without network access.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from ...config.defaults import HTTP_CONNECT_TIMEOUT_SECONDS, HTTP_TIMEOUT_SECONDS


def build_async_client(
    *,
    base_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` configured for provider calls.

    Parameters:
        base_url: Optional base URL so callers may issue relative requests.
        headers: Default headers sent with every request.
        transport: Optional transport override (tests use ``MockTransport``).
    """
    kwargs = {
        "timeout": httpx.Timeout(HTTP_TIMEOUT_SECONDS, connect=HTTP_CONNECT_TIMEOUT_SECONDS),
        "headers": dict(headers or {}),
    }
    if base_url:
        kwargs["base_url"] = base_url
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


__all__ = ["build_async_client"]
