"""jobhunter_providers.config.defaults
====================================

Central place for small, stable default values used across the provider
layer and the service. Values here are plain constants (no I/O); server-level
overrides come from the environment via ``config.env``.

This module intentionally avoids importing from other packages to prevent
circular dependencies.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the dev server.
SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
SERVICE_DEFAULT_HOST = "127.0.0.1"
SERVICE_DEFAULT_PORT = 4000
# Seconds between client-disconnect checks while a generation is in flight.
DISCONNECT_POLL_SECONDS = 0.25

# ---- Provider-specific defaults ----

OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
ANTHROPIC_DEFAULT_MODEL = "claude-sonnet-4-20250514"
OPENROUTER_DEFAULT_MODEL = "anthropic/claude-sonnet-4-20250514"
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
# OpenRouter attribution headers.
OPENROUTER_DEFAULT_REFERER = "https://jobhunter.app"
OPENROUTER_DEFAULT_TITLE = "JobHunter"
LOCAL_LLM_DEFAULT_URL = "http://localhost:11434"
LOCAL_LLM_DEFAULT_MODEL = "llama3"
LOCAL_LLM_CHAT_PATH = "/v1/chat/completions"

# ---- Sampling fallbacks (request > user config > these) ----

FALLBACK_TEMPERATURE = 0.7
FALLBACK_MAX_TOKENS = 1024
ANTHROPIC_MAX_TEMPERATURE = 1.0
TEMPERATURE_RANGE = (0.0, 2.0)
MAX_TOKENS_RANGE = (1, 8192)

# ---- Connectivity probe ----

PROBE_PROMPT = 'Say "Connection successful!" in exactly those words.'
PROBE_MAX_TOKENS = 20

# ---- Transport ----

# Matches the openai/anthropic SDK default read timeout.
HTTP_TIMEOUT_SECONDS = 600.0
HTTP_CONNECT_TIMEOUT_SECONDS = 5.0

# ---- SQLite ----

SQLITE_BUSY_TIMEOUT_MS = 5000
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"


__all__ = [
    "SERVICE_CORS_DEFAULT_ORIGINS",
    "SERVICE_DEFAULT_HOST",
    "SERVICE_DEFAULT_PORT",
    "DISCONNECT_POLL_SECONDS",
    "OPENAI_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_REFERER",
    "OPENROUTER_DEFAULT_TITLE",
    "LOCAL_LLM_DEFAULT_URL",
    "LOCAL_LLM_DEFAULT_MODEL",
    "LOCAL_LLM_CHAT_PATH",
    "FALLBACK_TEMPERATURE",
    "FALLBACK_MAX_TOKENS",
    "ANTHROPIC_MAX_TEMPERATURE",
    "TEMPERATURE_RANGE",
    "MAX_TOKENS_RANGE",
    "PROBE_PROMPT",
    "PROBE_MAX_TOKENS",
    "HTTP_TIMEOUT_SECONDS",
    "HTTP_CONNECT_TIMEOUT_SECONDS",
    "SQLITE_BUSY_TIMEOUT_MS",
    "SQLITE_JOURNAL_MODE",
    "SQLITE_SYNCHRONOUS",
]
