"""Sampling defaults chain shared by every provider."""

from __future__ import annotations

from jobhunter_providers.base.models import GenerationRequest
from jobhunter_providers.base.openai_style import build_chat_payload, build_messages, resolve_sampling


def test_request_values_win(config_factory):
    config = config_factory(temperature=0.2, max_tokens=300)
    sampling = resolve_sampling(GenerationRequest("p", temperature=1.5, max_tokens=50), config)
    assert (sampling.temperature, sampling.max_tokens) == (1.5, 50)  # nosec B101


def test_config_values_apply_when_request_is_silent(config_factory):
    sampling = resolve_sampling(GenerationRequest("p"), config_factory(temperature=0.2, max_tokens=300))
    assert (sampling.temperature, sampling.max_tokens) == (0.2, 300)  # nosec B101


def test_fallbacks_apply_last(config_factory):
    sampling = resolve_sampling(GenerationRequest("p"), config_factory())
    assert (sampling.temperature, sampling.max_tokens) == (0.7, 1024)  # nosec B101


def test_zero_temperature_is_a_value_not_absence(config_factory):
    sampling = resolve_sampling(GenerationRequest("p", temperature=0.0), config_factory(temperature=0.9))
    assert sampling.temperature == 0.0  # nosec B101


def test_messages_include_system_only_when_present():
    assert build_messages(GenerationRequest("hello")) == [{"role": "user", "content": "hello"}]  # nosec B101
    assert build_messages(GenerationRequest("hello", system_prompt="be brief")) == [  # nosec B101
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hello"},
    ]


def test_chat_payload_is_non_streaming(config_factory):
    payload = build_chat_payload("m", GenerationRequest("hi"), config_factory())
    assert payload["stream"] is False and payload["model"] == "m"  # nosec B101
