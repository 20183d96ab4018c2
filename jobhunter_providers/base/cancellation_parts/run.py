"""Bridge between cancellation tokens and asyncio tasks.

``run_cancellable`` runs an awaitable (typically one outbound HTTP call) as
its own task and cancels that task as soon as the token fires. Cancelling the
task closes the underlying ``httpx`` request, so the network call is
abandoned rather than having its result discarded later.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar

from .cancellation_token import CancellationToken
from .cancelled_error import CancelledError

T = TypeVar("T")


def _discard(awaitable: Awaitable[object]) -> None:
    # avoid "coroutine was never awaited" warnings
    close = getattr(awaitable, "close", None)
    if asyncio.iscoroutine(awaitable) and close is not None:
        close()


async def run_cancellable(awaitable: Awaitable[T], token: Optional[CancellationToken] = None) -> T:
    """Await ``awaitable`` while honouring ``token``.

    Parameters
    ----------
    awaitable:
        Coroutine or future performing the outbound call.
    token:
        Optional cancellation token. ``None`` awaits directly.

    Returns
    -------
    T
        Result of the awaitable.

    Raises
    ------
    CancelledError
        When the token is cancelled before or during the call.
    asyncio.CancelledError
        When the surrounding task itself is cancelled; the inner task is
        cancelled along with it.
    """
    if token is None:
        return await awaitable
    if token.cancelled:
        _discard(awaitable)
        token.raise_if_cancelled()

    loop = asyncio.get_running_loop()
    task = asyncio.ensure_future(awaitable)

    def _on_cancel(_reason: Optional[str]) -> None:
        loop.call_soon_threadsafe(task.cancel)

    unregister = token.add_callback(_on_cancel)
    try:
        return await task
    except asyncio.CancelledError:
        if token.cancelled and task.cancelled():
            raise CancelledError(token.reason or "operation cancelled") from None
        raise
    finally:
        unregister()


__all__ = ["run_cancellable"]
