"""Shared fixtures for the jobhunter_providers test suite.

- ``make_settings`` builds ``ServerSettings`` from an explicit mapping so no
  test depends on the developer's environment or ``.env`` file.
- ``uow`` provisions an isolated on-disk SQLite database per test.
- ``fake_provider_cls`` is an in-memory ``AIProvider`` double.
- ``http_recorder`` wraps ``httpx.MockTransport`` and keeps every request.
- ``cancel_mid_request`` cancels a provider call while its upstream stalls.
- ``log_events`` captures structured events emitted under ``jobhunter``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

import httpx
import pytest

from jobhunter_providers.base.cancellation import CancellationToken, CancelledError
from jobhunter_providers.base.logging import BASE_LOGGER_NAME, get_logger
from jobhunter_providers.base.models import (
    EffectiveConfig,
    GenerationRequest,
    GenerationResult,
    ProviderId,
    ProviderSlot,
)
from jobhunter_providers.config.env import ServerSettings, load_server_settings
from jobhunter_providers.persistence.sqlite import UnitOfWorkSqlite, get_uow

# Explicitly empty so the local-server defaults do not leak into tests.
_EMPTY_ENV = {"LOCAL_LLM_URL": "", "LOCAL_LLM_MODEL": ""}


@pytest.fixture()
def make_settings() -> Callable[..., ServerSettings]:
    """Return a factory: ``make_settings(OPENAI_API_KEY="sk-...")``."""

    def _make(**env: str) -> ServerSettings:
        return load_server_settings({**_EMPTY_ENV, **env})

    return _make


@pytest.fixture()
def db_path(tmp_path) -> str:
    return str(tmp_path / "jobhunter.db")


@pytest.fixture()
def uow(db_path: str) -> Iterator[UnitOfWorkSqlite]:
    """Unit of Work over a fresh temporary database (closed after the test)."""
    unit = get_uow(db_path)
    try:
        yield unit
    finally:
        unit.close()


def make_config(
    active: str = "openai",
    *,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    **slots: ProviderSlot,
) -> EffectiveConfig:
    return EffectiveConfig(
        active_provider=active,
        slots={ProviderId(name): slot for name, slot in slots.items()},
        temperature=temperature,
        max_tokens=max_tokens,
    )


@pytest.fixture()
def config_factory() -> Callable[..., EffectiveConfig]:
    """``config_factory("local", local=ProviderSlot("http://h:1"))``."""
    return make_config


class FakeProvider:
    """In-memory provider double recording every request it receives."""

    def __init__(
        self,
        provider_id: ProviderId,
        *,
        text: str = "generated text",
        error: Optional[BaseException] = None,
    ) -> None:
        self._provider_id = provider_id
        self.text = text
        self.error = error
        self.calls: List[GenerationRequest] = []

    @property
    def provider_id(self) -> ProviderId:
        return self._provider_id

    def is_available(self, config: EffectiveConfig) -> bool:
        return bool(config.slot(self._provider_id).credential)

    async def generate(self, request, config, *, cancel=None) -> GenerationResult:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return GenerationResult(
            text=self.text,
            provider_id=self._provider_id.value,
            model_id=config.slot(self._provider_id).model or "fake-model",
            tokens_used=7,
        )


@pytest.fixture()
def fake_provider_cls() -> type:
    return FakeProvider


class HttpRecorder:
    """``httpx.MockTransport`` that records requests and replays a responder."""

    def __init__(self, responder: Callable[[httpx.Request], Any]) -> None:
        self.requests: List[httpx.Request] = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request):
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


@pytest.fixture()
def http_recorder() -> Callable[..., HttpRecorder]:
    """Factory taking a responder ``(request) -> httpx.Response``."""
    return HttpRecorder


class _EventCollector(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"msg": record.getMessage()}
        payload.setdefault("level", record.levelname)
        self.events.append(payload)


@pytest.fixture()
def log_events() -> Iterator[List[Dict[str, Any]]]:
    """Structured events emitted under the ``jobhunter`` logger during the test.

    The base logger does not propagate to root, so ``caplog`` cannot see these
    records; a collector is attached to the base logger directly.
    """
    get_logger()
    base = logging.getLogger(BASE_LOGGER_NAME)
    collector = _EventCollector()
    base.addHandler(collector)
    try:
        yield collector.events
    finally:
        base.removeHandler(collector)


def _cancel_mid_request(
    make_provider: Callable[[httpx.AsyncBaseTransport], Any],
    config: EffectiveConfig,
) -> List[str]:
    """Start a generation against a stalled upstream, then fire its token.

    Returns the upstream completions that ran to the end (empty when the
    request was abandoned).
    """

    async def _main() -> List[str]:
        started = asyncio.Event()
        finished: List[str] = []

        async def _stall(request: httpx.Request) -> httpx.Response:
            started.set()
            await asyncio.sleep(30)
            finished.append(str(request.url))
            return httpx.Response(200, json={})

        provider = make_provider(httpx.MockTransport(_stall))
        token = CancellationToken()
        task = asyncio.ensure_future(
            provider.generate(GenerationRequest("hi"), config, cancel=token)
        )
        await asyncio.wait_for(started.wait(), timeout=5)
        token.cancel("client disconnected")
        with pytest.raises(CancelledError):
            await asyncio.wait_for(task, timeout=5)
        return finished

    return asyncio.run(_main())


@pytest.fixture()
def cancel_mid_request() -> Callable[..., List[str]]:
    """``cancel_mid_request(lambda transport: Provider(transport=transport), config)``."""
    return _cancel_mid_request
