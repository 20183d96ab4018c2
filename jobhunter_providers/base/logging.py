"""Base structured logging utilities for the provider layer.

Rationale:
- Central place to configure consistent JSON logging on stderr.
- Avoid sprinkling ad-hoc logger setup across adapters and services.

All loggers returned by :func:`get_logger` are children of the shared
``jobhunter`` logger. The level is read from ``JOBHUNTER_LOG_LEVEL``.

``normalized_log_event`` wraps ``log_event`` and guarantees the canonical
keys ``phase``, ``error_code`` and ``tokens`` so provider events can be
aggregated regardless of backend. Credentials must never be passed as fields.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "jobhunter"
LOG_LEVEL_ENV = "JOBHUNTER_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_jobhunter_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_jobhunter_console_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``jobhunter`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
            for handler in logger.handlers:
                handler.setLevel(desired_level)
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(JsonFormatter())
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """Return a logger under the shared ``jobhunter`` hierarchy.

    Parameters
    ----------
    name:
        Dotted logger name. Names outside the ``jobhunter`` namespace are
        prefixed so they inherit the shared JSON handler.
    level:
        Default level when ``JOBHUNTER_LOG_LEVEL`` is unset.
    """
    base_logger = _ensure_base_logger(level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (JSON formatted by ``get_logger``).
    event: str
        Event name (e.g. ``generate.start``).
    ctx: LogContext | None
        Provider/model context; merged shallowly.
    level: int
        Logging level for the record.
    keep_none: bool
        When ``True``, preserve keys whose values are ``None``.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "tokens")


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    tokens: int | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit a provider event with the canonical ``phase``/``tokens`` keys.

    ``error_code`` is only present on failures. Extra fields never clobber
    the normalized ones.
    """
    base_fields: Dict[str, Any] = {"phase": phase, "tokens": tokens}
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
]
