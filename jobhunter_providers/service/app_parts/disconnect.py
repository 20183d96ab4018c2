"""Client-disconnect detection for long-running generation routes.

``cancel_on_disconnect`` yields a ``CancellationToken`` and polls
``Request.is_disconnected`` in a background task; when the client goes away
the token is cancelled, which aborts the provider's in-flight HTTP call.

The watcher is stopped through an ``asyncio.Event`` rather than
``Task.cancel``: ``is_disconnected`` runs inside an anyio cancel scope that
can absorb a task cancellation, leaving the watcher parked in its poll sleep.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Request

from ...base.cancellation import CancellationToken
from ...config.defaults import DISCONNECT_POLL_SECONDS


@asynccontextmanager
async def cancel_on_disconnect(
    request: Request, poll_seconds: float = DISCONNECT_POLL_SECONDS
) -> AsyncIterator[CancellationToken]:
    token = CancellationToken()
    stop = asyncio.Event()

    async def _watch() -> None:
        while not (stop.is_set() or token.cancelled):
            if await request.is_disconnected():
                token.cancel("client disconnected")
                return
            try:
                await asyncio.wait_for(stop.wait(), timeout=poll_seconds)
            except asyncio.TimeoutError:
                continue

    watcher = asyncio.create_task(_watch())
    try:
        yield token
    finally:
        stop.set()
        done, _ = await asyncio.wait({watcher}, timeout=poll_seconds)
        if not done:
            watcher.cancel()


__all__ = ["cancel_on_disconnect"]
