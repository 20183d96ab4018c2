"""Client-disconnect watcher used by the generation routes."""

from __future__ import annotations

import asyncio

from jobhunter_providers.service.app_parts.disconnect import cancel_on_disconnect


class _ConnectedRequest:
    """Client that never goes away; counts disconnect checks."""

    def __init__(self) -> None:
        self.checks = 0

    async def is_disconnected(self) -> bool:
        self.checks += 1
        return False


class _AbsorbingRequest(_ConnectedRequest):
    """Disconnect check that swallows a task cancellation, as an anyio scope can."""

    async def is_disconnected(self) -> bool:
        self.checks += 1
        try:
            await asyncio.sleep(0.01)
        except asyncio.CancelledError:
            pass
        return False


class _GoneAfter(_ConnectedRequest):
    def __init__(self, checks_before_gone: int) -> None:
        super().__init__()
        self._limit = checks_before_gone

    async def is_disconnected(self) -> bool:
        self.checks += 1
        return self.checks > self._limit


def test_normal_completion_leaves_token_untouched():
    request = _ConnectedRequest()

    async def _main():
        async with cancel_on_disconnect(request, poll_seconds=0.01) as token:
            await asyncio.sleep(0.05)
        return token

    token = asyncio.run(asyncio.wait_for(_main(), timeout=5))
    assert token.cancelled is False  # nosec B101
    assert request.checks >= 1  # nosec B101


def test_exit_does_not_wait_on_an_absorbed_cancellation():
    request = _AbsorbingRequest()

    async def _main():
        async with cancel_on_disconnect(request, poll_seconds=0.01) as token:
            await asyncio.sleep(0.03)
        return token

    token = asyncio.run(asyncio.wait_for(_main(), timeout=5))
    assert token.cancelled is False  # nosec B101


def test_exit_is_prompt_with_a_long_poll_interval():
    request = _ConnectedRequest()

    async def _main():
        loop = asyncio.get_running_loop()
        started = loop.time()
        async with cancel_on_disconnect(request, poll_seconds=30):
            await asyncio.sleep(0)
        return loop.time() - started

    elapsed = asyncio.run(asyncio.wait_for(_main(), timeout=5))
    assert elapsed < 1.0  # nosec B101


def test_disconnect_cancels_the_token():
    request = _GoneAfter(2)

    async def _main():
        async with cancel_on_disconnect(request, poll_seconds=0.01) as token:
            for _ in range(200):
                if token.cancelled:
                    break
                await asyncio.sleep(0.01)
        return token

    token = asyncio.run(asyncio.wait_for(_main(), timeout=5))
    assert token.cancelled is True  # nosec B101
    assert token.reason == "client disconnected"  # nosec B101
