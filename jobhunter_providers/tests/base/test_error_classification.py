"""Mapping of statuses and exceptions onto ``ErrorCode``."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from jobhunter_providers.base.errors import (
    ErrorCode,
    GenerationFailedError,
    NotConfiguredError,
    ProviderError,
    UnavailableError,
    UnknownProviderError,
    classify_exception,
    classify_status,
)


@pytest.mark.parametrize(
    "status, expected",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_classify_status(status, expected):
    assert classify_status(status) is expected  # nosec B101


def test_provider_error_passthrough():
    err = ProviderError(code=ErrorCode.RATE_LIMIT, message="slow down", provider="openai")
    assert classify_exception(err) is ErrorCode.RATE_LIMIT  # nosec B101
    assert str(err) == "slow down"  # nosec B101


def test_timeouts_classify_as_timeout():
    request = httpx.Request("POST", "http://example.test")
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT  # nosec B101


def test_transport_failure_classifies_as_network():
    request = httpx.Request("POST", "http://example.test")
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.NETWORK  # nosec B101


def test_status_attribute_is_used():
    class _SdkError(Exception):
        status_code = 429

    assert classify_exception(_SdkError()) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(ValueError("x")) is ErrorCode.UNKNOWN  # nosec B101


def test_dispatch_error_messages_and_statuses():
    assert NotConfiguredError().status_code == 404  # nosec B101
    unknown = UnknownProviderError("gemini")
    assert unknown.message == "Unknown AI provider: gemini"  # nosec B101
    assert (unknown.code, unknown.status_code) == (ErrorCode.UNKNOWN_PROVIDER, 400)  # nosec B101
    unavailable = UnavailableError("anthropic")
    assert unavailable.message == (  # nosec B101
        'Provider "anthropic" is not configured. Please add your API key in AI settings.'
    )


def test_generation_failed_keeps_upstream_message_and_code():
    cause = ProviderError(
        code=ErrorCode.AUTH,
        message="OpenAI error (401): invalid key",
        provider="openai",
        status_code=401,
    )
    err = GenerationFailedError("openai", cause)
    assert err.message == "AI generation failed (openai): OpenAI error (401): invalid key"  # nosec B101
    assert err.upstream_code is ErrorCode.AUTH  # nosec B101
    assert err.cause is cause  # nosec B101
