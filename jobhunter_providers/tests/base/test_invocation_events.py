"""Lifecycle events around a single provider call."""

from __future__ import annotations

import asyncio

import pytest

from jobhunter_providers.base.errors import ErrorCode, ProviderError
from jobhunter_providers.base.invocation import invoke_logged
from jobhunter_providers.base.logging import LogContext, get_logger
from jobhunter_providers.base.models import GenerationResult

CTX = LogContext(provider="openai", model="gpt-4o-mini")


def _run(call):
    return asyncio.run(invoke_logged(get_logger("jobhunter.test.invocation"), CTX, call))


def _events(log_events, prefix="generate."):
    return [e for e in log_events if e["event"].startswith(prefix)]


def test_success_emits_start_and_end(log_events):
    async def _ok():
        return GenerationResult(text="hi", provider_id="openai", model_id="gpt-4o-mini", tokens_used=3)

    result = _run(_ok)

    assert result.text == "hi"  # nosec B101
    events = _events(log_events)
    assert [e["event"] for e in events] == ["generate.start", "generate.end"]  # nosec B101
    assert events[-1]["tokens"] == 3  # nosec B101


def test_provider_error_closes_with_its_code(log_events):
    async def _fail():
        raise ProviderError(code=ErrorCode.RATE_LIMIT, message="slow down", provider="openai", status_code=429)

    with pytest.raises(ProviderError):
        _run(_fail)

    end = _events(log_events)[-1]
    assert (end["event"], end["error_code"], end["status_code"]) == ("generate.error", "rate_limit", 429)  # nosec B101


def test_unexpected_exception_still_closes_the_call(log_events):
    async def _broken():
        raise TypeError("Invalid http_client argument")

    with pytest.raises(TypeError):
        _run(_broken)

    events = _events(log_events)
    assert [e["event"] for e in events] == ["generate.start", "generate.error"]  # nosec B101
    assert events[-1]["error_code"] == ErrorCode.UNKNOWN.value  # nosec B101
    assert events[-1]["error_type"] == "TypeError"  # nosec B101
