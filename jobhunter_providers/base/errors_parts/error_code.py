"""
Normalized error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by provider adapters, the
dispatcher, and the HTTP error envelope. Values are lowercase snake_case and
are considered a stable public contract for clients and structured logs.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    # upstream / transport
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    NETWORK = "network"
    BAD_RESPONSE = "bad_response"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    # dispatch
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    NOT_CONFIGURED = "not_configured"
    UNKNOWN_PROVIDER = "unknown_provider"
    GENERATION_FAILED = "generation_failed"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
