"""Logged execution of a single provider call.

Purpose
-------
Wrap one provider round trip with the normalized ``generate.start`` /
``generate.end`` / ``generate.error`` / ``generate.cancelled`` events so
adapters only deal with request shaping and response parsing.

No retries and no timeouts are applied here; a single attempt is made and
failures propagate unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

from .cancellation import CancelledError
from .errors import ProviderError, classify_exception
from .logging import LogContext, normalized_log_event
from .models import GenerationResult


async def invoke_logged(
    logger: logging.Logger,
    ctx: LogContext,
    call: Callable[[], Awaitable[GenerationResult]],
) -> GenerationResult:
    """Run ``call`` once, emitting normalized lifecycle events.

    Parameters
    ----------
    logger:
        Provider logger from ``get_logger``.
    ctx:
        Provider/model context for every event.
    call:
        Zero-argument coroutine factory performing the request.

    Returns
    -------
    GenerationResult
        The provider result, unchanged.
    """
    t0 = time.perf_counter()
    normalized_log_event(logger, "generate.start", ctx, phase="start")
    try:
        result = await call()
    except (CancelledError, asyncio.CancelledError):
        normalized_log_event(
            logger,
            "generate.cancelled",
            ctx,
            phase="cancelled",
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
        )
        raise
    except ProviderError as exc:
        normalized_log_event(
            logger,
            "generate.error",
            ctx,
            phase="error",
            level=logging.WARNING,
            error_code=exc.code.value,
            status_code=exc.status_code,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
        )
        raise
    except Exception as exc:
        normalized_log_event(
            logger,
            "generate.error",
            ctx,
            phase="error",
            level=logging.WARNING,
            error_code=classify_exception(exc).value,
            error_type=exc.__class__.__name__,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
        )
        raise
    normalized_log_event(
        logger,
        "generate.end",
        ctx,
        phase="finalize",
        tokens=result.tokens_used,
        latency_ms=round((time.perf_counter() - t0) * 1000.0, 1),
    )
    return result


__all__ = ["invoke_logged"]
