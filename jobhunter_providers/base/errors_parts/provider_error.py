"""
Structured provider error exception type.

Wraps backend-specific failures (HTTP status + body, or a transport error)
with a normalized `ErrorCode` so the dispatcher and probe can report them
uniformly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable, operator-actionable message. Upstream error
            text is kept intact.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        status_code: Upstream HTTP status when the backend answered.
        body: Upstream response body text when the backend answered.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status_code: Optional[int] = None
    body: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:
        return self.message


__all__ = ["ProviderError"]
