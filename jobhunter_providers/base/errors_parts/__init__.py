"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `jobhunter_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception
from .dispatch_errors import (
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
    "DispatchError",
    "GenerationFailedError",
    "NotConfiguredError",
    "ProfileNotFoundError",
    "RequestValidationFailed",
    "UnavailableError",
    "UnknownProviderError",
]
