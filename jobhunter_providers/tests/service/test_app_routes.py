"""HTTP surface exercised end-to-end with a mock upstream."""

from __future__ import annotations

import threading

import httpx
import pytest
from fastapi.testclient import TestClient

from jobhunter_providers.base.models import ProviderId
from jobhunter_providers.base.registry import RegistryBuilder, build_default_registry
from jobhunter_providers.persistence.sqlite import get_uow
from jobhunter_providers.service.app import create_app

USER = {"X-User-Id": "user-1"}
JOB = "Looking for a backend engineer with Python experience."
PROFILE = {"firstName": "Ada", "lastName": "Lovelace", "skills": [{"name": "Python"}]}


def _completion(text: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}], "usage": {"total_tokens": 9}}


@pytest.fixture()
def upstream(http_recorder):
    """Every outbound call answers with a fixed completion unless overridden."""
    state = {"respond": lambda: httpx.Response(200, json=_completion("generated"))}
    recorder = http_recorder(lambda request: state["respond"]())
    recorder.state = state
    return recorder


@pytest.fixture()
def seed(db_path):
    def _seed(user_id: str = "user-1", *, profile: bool = True, **changes):
        unit = get_uow(db_path)
        try:
            with unit:
                unit.configs.upsert(user_id, changes)
                if profile:
                    unit.profiles.save_document(user_id, PROFILE)
        finally:
            unit.close()

    return _seed


@pytest.fixture()
def make_client(db_path, upstream, make_settings):
    def _make(registry=None, **env):
        app = create_app(
            registry=registry or build_default_registry(transport=upstream.transport),
            db_path=db_path,
            settings_loader=lambda: make_settings(**env),
        )
        return TestClient(app, raise_server_exceptions=False)

    return _make


def test_health(make_client):
    response = make_client().get("/api/health")
    assert response.status_code == 200 and response.json() == {"ok": True}  # nosec B101


def test_generate_round_trip(make_client, seed, upstream):
    seed(active_provider="openrouter", openrouter_api_key="sk-or-user-123456")
    response = make_client().post(
        "/api/ai/generate",
        json={"prompt": "Say hi", "systemPrompt": "be brief", "temperature": 0.2, "maxTokens": 50},
        headers=USER,
    )
    assert response.status_code == 200  # nosec B101
    body = response.json()
    assert body["text"] == "generated" and body["provider"] == "openrouter"  # nosec B101
    assert body["tokensUsed"] == 9  # nosec B101
    sent = upstream.last_json()
    assert (sent["temperature"], sent["max_tokens"]) == (0.2, 50)  # nosec B101
    assert upstream.last.headers["Authorization"] == "Bearer sk-or-user-123456"  # nosec B101


def _post_in_thread(client, path, body, timeout=10.0):
    outcome = {}

    def _call():
        outcome["response"] = client.post(path, json=body, headers=USER)

    worker = threading.Thread(target=_call, daemon=True)
    worker.start()
    worker.join(timeout)
    return worker.is_alive(), outcome.get("response")


@pytest.mark.parametrize(
    "path, body",
    [("/api/ai/generate", {"prompt": "x"}), ("/api/ai/test-connection", {})],
)
def test_fast_upstream_answer_returns_promptly(make_client, seed, path, body):
    seed(active_provider="openrouter", openrouter_api_key="sk-or-user-123456")

    still_running, response = _post_in_thread(make_client(), path, body)

    assert not still_running  # nosec B101
    assert response.status_code == 200  # nosec B101


def test_server_key_fallback(make_client, seed, upstream):
    seed(active_provider="openrouter")
    response = make_client(OPENROUTER_API_KEY="sk-or-server-999").post(
        "/api/ai/generate", json={"prompt": "hi"}, headers=USER
    )
    assert response.status_code == 200  # nosec B101
    assert upstream.last.headers["Authorization"] == "Bearer sk-or-server-999"  # nosec B101


def test_missing_identity_is_401(make_client):
    response = make_client().post("/api/ai/generate", json={"prompt": "hi"})
    assert response.status_code == 401  # nosec B101
    assert response.json()["error"]["code"] == "unauthorized"  # nosec B101


def test_validation_error_envelope(make_client, seed):
    seed(openai_api_key="sk-user-000000")
    response = make_client().post("/api/ai/generate", json={"prompt": "", "temperature": 3}, headers=USER)
    assert response.status_code == 400  # nosec B101
    error = response.json()["error"]
    assert error["code"] == "validation"  # nosec B101
    assert "prompt:" in error["message"] and "temperature:" in error["message"]  # nosec B101


def test_short_job_description_is_rejected(make_client, seed):
    seed(openai_api_key="sk-user-000000")
    response = make_client().post("/api/ai/cover-letter", json={"jobDescription": "short"}, headers=USER)
    assert response.status_code == 400  # nosec B101
    assert response.json()["error"]["message"].startswith("jobDescription:")  # nosec B101


def test_not_configured_is_404(make_client):
    response = make_client().post("/api/ai/generate", json={"prompt": "hi"}, headers=USER)
    assert response.status_code == 404  # nosec B101
    assert response.json()["error"]["code"] == "not_configured"  # nosec B101


def test_unavailable_provider_is_400_and_makes_no_call(make_client, seed, upstream):
    seed(active_provider="anthropic")
    response = make_client().post("/api/ai/generate", json={"prompt": "hi"}, headers=USER)
    assert response.status_code == 400  # nosec B101
    error = response.json()["error"]
    assert error["code"] == "unavailable"  # nosec B101
    assert error["message"].startswith('Provider "anthropic" is not configured.')  # nosec B101
    assert upstream.requests == []  # nosec B101


def test_upstream_failure_surfaces_message(make_client, seed, upstream):
    seed(active_provider="local", local_llm_url="http://box:11434")
    upstream.state["respond"] = lambda: httpx.Response(500, text="CUDA out of memory")
    response = make_client().post("/api/ai/generate", json={"prompt": "hi"}, headers=USER)
    assert response.status_code == 400  # nosec B101
    error = response.json()["error"]
    assert error["code"] == "generation_failed"  # nosec B101
    assert error["message"] == "AI generation failed (local): Local LLM error (500): CUDA out of memory"  # nosec B101
    assert len(upstream.requests) == 1  # nosec B101


def test_task_routes(make_client, seed, upstream):
    seed(active_provider="local", local_llm_url="http://box:11434")
    client = make_client()

    cover = client.post("/api/ai/cover-letter", json={"jobDescription": JOB}, headers=USER)
    answer = client.post("/api/ai/answer", json={"question": "Why us?", "context": "Remote"}, headers=USER)
    smart = client.post(
        "/api/ai/smart-answer",
        json={"question": "Why us?", "companyName": "Acme", "maxLength": 250},
        headers=USER,
    )
    resume = client.post("/api/ai/resume-optimize", json={"jobDescription": JOB}, headers=USER)

    for response in (cover, answer, smart, resume):
        assert response.status_code == 200 and response.json()["provider"] == "local"  # nosec B101
    assert b"Company: Acme" in upstream.requests[2].content  # nosec B101
    assert b"under 250 characters" in upstream.requests[2].content  # nosec B101


def test_task_routes_need_a_profile(make_client, seed):
    seed(profile=False, openai_api_key="sk-user-000000")
    response = make_client().post("/api/ai/cover-letter", json={"jobDescription": JOB}, headers=USER)
    assert response.status_code == 404  # nosec B101
    assert response.json()["error"]["code"] == "not_found"  # nosec B101


def test_config_round_trip(make_client):
    client = make_client(OPENAI_API_KEY="sk-server-key")
    assert client.get("/api/ai/config", headers=USER).status_code == 404  # nosec B101

    put = client.put(
        "/api/ai/config",
        json={"activeProvider": "openrouter", "openrouterApiKey": "sk-or-user-123456", "maxTokens": 300},
        headers=USER,
    )
    assert put.status_code == 200  # nosec B101
    assert put.json()["openrouterApiKey"] == "sk-o...3456"  # nosec B101

    view = client.get("/api/ai/config", headers=USER).json()
    assert view["activeProvider"] == "openrouter" and view["maxTokens"] == 300  # nosec B101
    assert view["openrouterApiKey"] == "sk-o...3456"  # nosec B101
    assert view["serverHasOpenaiKey"] is True and view["serverHasOpenrouterKey"] is False  # nosec B101


def test_config_update_validation(make_client):
    client = make_client()
    bad_provider = client.put("/api/ai/config", json={"activeProvider": "gemini"}, headers=USER)
    bad_tokens = client.put("/api/ai/config", json={"maxTokens": 9000}, headers=USER)
    assert bad_provider.status_code == 400 and "activeProvider" in bad_provider.json()["error"]["message"]  # nosec B101
    assert bad_tokens.status_code == 400 and "maxTokens" in bad_tokens.json()["error"]["message"]  # nosec B101
    assert client.get("/api/ai/config", headers=USER).status_code == 404  # nosec B101


def test_test_connection_always_answers_200(make_client, seed, upstream):
    seed(active_provider="openrouter")
    client = make_client()

    unavailable = client.post("/api/ai/test-connection", json={}, headers=USER)
    assert unavailable.status_code == 200  # nosec B101
    assert unavailable.json() == {"success": False, "message": 'Provider "openrouter" is not configured.'}  # nosec B101

    seed(local_llm_url="http://box:11434", local_llm_model="llama3")
    connected = client.post("/api/ai/test-connection", json={"provider": "local"}, headers=USER)
    assert connected.json() == {"success": True, "message": "Connected to local (llama3)"}  # nosec B101


def test_unexpected_errors_hide_detail_in_production(make_client, seed, fake_provider_cls):
    class _Broken(fake_provider_cls):
        def is_available(self, config):
            raise RuntimeError("database exploded")

    seed(openai_api_key="sk-user-000000")
    registry = RegistryBuilder().register(ProviderId.OPENAI, _Broken(ProviderId.OPENAI)).build()

    dev = make_client(registry).post("/api/ai/generate", json={"prompt": "hi"}, headers=USER)
    prod = make_client(registry, JOBHUNTER_ENV="production").post(
        "/api/ai/generate", json={"prompt": "hi"}, headers=USER
    )

    assert dev.status_code == 500 and dev.json()["error"] == {"message": "database exploded", "code": "internal"}  # nosec B101
    assert prod.status_code == 500  # nosec B101
    assert prod.json()["error"] == {"message": "Internal server error", "code": "internal"}  # nosec B101
