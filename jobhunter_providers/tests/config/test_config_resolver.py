"""Per-user configuration resolution and secret fallback precedence."""

from __future__ import annotations

from typing import Dict, Optional

import pytest

from jobhunter_providers.base.errors import NotConfiguredError
from jobhunter_providers.base.models import ProviderConfig, ProviderId
from jobhunter_providers.config.resolver import ConfigResolver, first_present, resolve


class _DictRepo:
    def __init__(self, records: Optional[Dict[str, ProviderConfig]] = None) -> None:
        self.records = dict(records or {})

    def get(self, user_id: str) -> Optional[ProviderConfig]:
        return self.records.get(user_id)


@pytest.mark.parametrize(
    "user, server, expected",
    [
        ("sk-user", "sk-server", "sk-user"),
        (None, "sk-server", "sk-server"),
        ("sk-user", None, "sk-user"),
        (None, None, None),
        ("   ", "sk-server", "sk-server"),
    ],
)
def test_first_present_precedence(user, server, expected):
    assert first_present(user, server) == expected  # nosec B101


def test_missing_record_is_not_configured(make_settings):
    resolver = ConfigResolver(_DictRepo(), settings_loader=make_settings)
    with pytest.raises(NotConfiguredError):
        resolver.get_effective_config("ghost")


def test_resolve_merges_each_provider_independently(make_settings):
    record = ProviderConfig(
        user_id="u1",
        active_provider="anthropic",
        openai_api_key="sk-user",
        anthropic_model="claude-3-haiku",
        temperature=0.3,
        max_tokens=256,
    )
    settings = make_settings(OPENAI_API_KEY="sk-server-openai", ANTHROPIC_API_KEY="sk-server-ant")

    config = resolve(record, settings)

    assert config.active_provider == "anthropic"  # nosec B101
    assert config.slot(ProviderId.OPENAI).credential == "sk-user"  # nosec B101
    assert config.slot(ProviderId.ANTHROPIC).credential == "sk-server-ant"  # nosec B101
    assert config.slot(ProviderId.ANTHROPIC).model == "claude-3-haiku"  # nosec B101
    assert config.slot(ProviderId.OPENROUTER).credential is None  # nosec B101
    assert config.slot(ProviderId.LOCAL).credential is None  # nosec B101
    assert (config.temperature, config.max_tokens) == (0.3, 256)  # nosec B101


def test_local_endpoint_and_model_follow_the_same_precedence(make_settings):
    settings = make_settings(LOCAL_LLM_URL="http://gpu-box:11434", LOCAL_LLM_MODEL="mistral")
    server_only = resolve(ProviderConfig(user_id="u1"), settings)
    assert server_only.slot(ProviderId.LOCAL).credential == "http://gpu-box:11434"  # nosec B101
    assert server_only.slot(ProviderId.LOCAL).model == "mistral"  # nosec B101

    user_wins = resolve(
        ProviderConfig(user_id="u1", local_llm_url="http://laptop:1234", local_llm_model="qwen2"),
        settings,
    )
    assert user_wins.slot(ProviderId.LOCAL).credential == "http://laptop:1234"  # nosec B101
    assert user_wins.slot(ProviderId.LOCAL).model == "qwen2"  # nosec B101


def test_resolution_is_recomputed_on_every_call(make_settings):
    repo = _DictRepo({"u1": ProviderConfig(user_id="u1")})
    env = {}
    resolver = ConfigResolver(repo, settings_loader=lambda: make_settings(**env))

    assert resolver.get_effective_config("u1").slot(ProviderId.OPENAI).credential is None  # nosec B101
    env["OPENAI_API_KEY"] = "sk-new-server"
    assert resolver.get_effective_config("u1").slot(ProviderId.OPENAI).credential == "sk-new-server"  # nosec B101
    repo.records["u1"] = ProviderConfig(user_id="u1", openai_api_key="sk-user")
    assert resolver.get_effective_config("u1").slot(ProviderId.OPENAI).credential == "sk-user"  # nosec B101


def test_resolution_never_mutates_the_record(make_settings):
    record = ProviderConfig(user_id="u1")
    resolve(record, make_settings(OPENAI_API_KEY="sk-server"))
    assert record.openai_api_key is None  # nosec B101
