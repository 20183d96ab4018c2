"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``jobhunter_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, classify_status
from .errors_parts.dispatch_errors import (
    DispatchError,
    GenerationFailedError,
    NotConfiguredError,
    ProfileNotFoundError,
    RequestValidationFailed,
    UnavailableError,
    UnknownProviderError,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_status",
    "DispatchError",
    "GenerationFailedError",
    "NotConfiguredError",
    "ProfileNotFoundError",
    "RequestValidationFailed",
    "UnavailableError",
    "UnknownProviderError",
]
