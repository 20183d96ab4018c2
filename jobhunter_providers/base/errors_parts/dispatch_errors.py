"""
Dispatch-level error hierarchy.

These errors are raised by the configuration resolver, registry, dispatcher,
and task wrappers. Each carries a normalized :class:`ErrorCode` and the HTTP
status the service layer should answer with, so the FastAPI exception handler
needs no per-type branching.

Validation, configuration, and availability errors are expected and local;
``GenerationFailedError`` wraps an upstream failure and keeps its message
intact for operators.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode


class DispatchError(Exception):
    """Base class for expected, user-facing failures of the AI layer.

    Attributes:
        message: Text surfaced verbatim to the caller.
        code: Normalized error code placed in the error envelope.
        status_code: HTTP status used by the service layer.
    """

    code: ErrorCode = ErrorCode.INTERNAL
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RequestValidationFailed(DispatchError):
    """Malformed request; the message carries ``field: detail`` pairs."""

    code = ErrorCode.VALIDATION
    status_code = 400


class NotConfiguredError(DispatchError):
    """No provider configuration record exists for the user."""

    code = ErrorCode.NOT_CONFIGURED
    status_code = 404

    def __init__(self, message: str = "AI configuration not found. Please set up your AI provider.") -> None:
        super().__init__(message)


class UnknownProviderError(DispatchError):
    """Provider identifier is not part of the closed registry."""

    code = ErrorCode.UNKNOWN_PROVIDER
    status_code = 400

    def __init__(self, provider: object) -> None:
        super().__init__(f"Unknown AI provider: {provider}")
        self.provider = provider


class UnavailableError(DispatchError):
    """Selected provider has no usable credential in the effective config."""

    code = ErrorCode.UNAVAILABLE
    status_code = 400

    def __init__(self, provider: str) -> None:
        super().__init__(
            f'Provider "{provider}" is not configured. Please add your API key in AI settings.'
        )
        self.provider = provider


class GenerationFailedError(DispatchError):
    """Upstream failure re-wrapped with the attempted provider id.

    Attributes:
        provider_id: Provider that was invoked.
        cause: Underlying exception (usually a ``ProviderError``).
    """

    code = ErrorCode.GENERATION_FAILED
    status_code = 400

    def __init__(self, provider_id: str, cause: BaseException) -> None:
        super().__init__(f"AI generation failed ({provider_id}): {cause}")
        self.provider_id = provider_id
        self.cause = cause

    @property
    def upstream_code(self) -> Optional[ErrorCode]:
        """Normalized code of the wrapped provider failure, when known."""
        return getattr(self.cause, "code", None)


class ProfileNotFoundError(DispatchError):
    """Candidate profile is missing for the user."""

    code = ErrorCode.NOT_FOUND
    status_code = 404

    def __init__(self, message: str = "Profile not found. Please set up your profile first.") -> None:
        super().__init__(message)


__all__ = [
    "DispatchError",
    "RequestValidationFailed",
    "NotConfiguredError",
    "UnknownProviderError",
    "UnavailableError",
    "GenerationFailedError",
    "ProfileNotFoundError",
]
