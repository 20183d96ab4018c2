"""Cancellation error type.

Defines the public ``CancelledError`` raised when an operation observes a
cancellation request on its token.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from ``asyncio.CancelledError``: this one means the caller's
    token fired (for example the HTTP client disconnected). The dispatcher
    never wraps it as a generation failure.
    """


__all__ = ["CancelledError"]
