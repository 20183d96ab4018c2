"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable, provider-agnostic cancellation constructs via the canonical
``jobhunter_providers.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` carries the caller's cancel signal from the HTTP route
  down to each provider.
- ``run_cancellable`` binds a token to one awaitable network call.
- ``CancelledError`` is raised by operations that observe a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.run import run_cancellable

__all__ = ["CancellationToken", "CancelledError", "run_cancellable"]
