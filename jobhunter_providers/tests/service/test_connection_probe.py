"""Connectivity probe: every outcome is a value, never an exception."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from jobhunter_providers.base.errors import ErrorCode, ProviderError
from jobhunter_providers.base.models import ProviderId
from jobhunter_providers.base.registry import RegistryBuilder, build_default_registry
from jobhunter_providers.config.defaults import PROBE_MAX_TOKENS, PROBE_PROMPT
from jobhunter_providers.config.resolver import ConfigResolver
from jobhunter_providers.service import ConnectionProbe


@pytest.fixture()
def resolver(uow, make_settings):
    return ConfigResolver(uow.configs, settings_loader=make_settings)


def _seed(uow, **changes):
    uow.configs.upsert("u1", changes)
    uow.commit()


def test_success_names_provider_and_model(uow, resolver, http_recorder):
    _seed(uow, active_provider="local", local_llm_url="http://box:11434", local_llm_model="qwen2")
    recorder = http_recorder(
        lambda request: httpx.Response(200, json={"choices": [{"message": {"content": "Connection successful!"}}]})
    )
    probe = ConnectionProbe(build_default_registry(transport=recorder.transport), resolver)

    result = asyncio.run(probe.test_connection("u1"))

    assert result.success is True  # nosec B101
    assert result.message == "Connected to local (qwen2)"  # nosec B101
    sent = recorder.last_json()
    assert sent["messages"][-1]["content"] == PROBE_PROMPT  # nosec B101
    assert sent["max_tokens"] == PROBE_MAX_TOKENS  # nosec B101


def test_override_targets_another_provider(uow, resolver, fake_provider_cls):
    _seed(uow, active_provider="openai", anthropic_api_key="sk-ant-user")
    fakes = {pid: fake_provider_cls(pid) for pid in ProviderId}
    builder = RegistryBuilder()
    for pid, fake in fakes.items():
        builder.register(pid, fake)
    probe = ConnectionProbe(builder.build(), resolver)

    result = asyncio.run(probe.test_connection("u1", "anthropic"))

    assert result.success is True and result.message.startswith("Connected to anthropic")  # nosec B101
    assert fakes[ProviderId.OPENAI].calls == []  # nosec B101


def test_unavailable_provider_reports_without_network(uow, resolver, http_recorder):
    _seed(uow, active_provider="openrouter")
    recorder = http_recorder(lambda request: httpx.Response(500))
    probe = ConnectionProbe(build_default_registry(transport=recorder.transport), resolver)

    result = asyncio.run(probe.test_connection("u1"))

    assert result.success is False  # nosec B101
    assert result.message == 'Provider "openrouter" is not configured.'  # nosec B101
    assert recorder.requests == []  # nosec B101


def test_network_failure_becomes_message(uow, resolver, http_recorder):
    _seed(uow, active_provider="local", local_llm_url="http://box:11434")

    def _refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    probe = ConnectionProbe(build_default_registry(transport=http_recorder(_refuse).transport), resolver)
    result = asyncio.run(probe.test_connection("u1"))

    assert result.success is False  # nosec B101
    assert result.message.startswith("Connection failed: Local LLM request failed")  # nosec B101


def test_upstream_error_becomes_message(uow, resolver, fake_provider_cls):
    _seed(uow, openai_api_key="sk-user-000000")
    failing = fake_provider_cls(
        ProviderId.OPENAI,
        error=ProviderError(code=ErrorCode.AUTH, message="OpenAI error (401): bad key", provider="openai"),
    )
    probe = ConnectionProbe(RegistryBuilder().register("openai", failing).build(), resolver)

    result = asyncio.run(probe.test_connection("u1"))
    assert result.to_dict() == {"success": False, "message": "Connection failed: OpenAI error (401): bad key"}  # nosec B101


def test_missing_config_and_unknown_override_are_values(uow, resolver):
    probe = ConnectionProbe(build_default_registry(), resolver)
    missing = asyncio.run(probe.test_connection("ghost"))
    assert missing.success is False and "not found" in missing.message  # nosec B101

    _seed(uow)
    unknown = asyncio.run(probe.test_connection("u1", "gemini"))
    assert unknown.success is False  # nosec B101
    assert unknown.message == "Unknown AI provider: gemini"  # nosec B101
