"""jobhunter_providers.config.env
==============================

Server-level environment configuration.

Purpose
-------
- Single source of truth mapping provider identifiers to the environment
  variables holding their server-level fallback credentials.
- Build a ``ServerSettings`` snapshot from the process environment. The
  snapshot is rebuilt on every call so that edits to the environment (or to
  ``.env`` before first use) need no restart-aware caching.

Design Notes
------------
- Fallback values never override a user-supplied value; that precedence is
  applied by ``config.resolver``.
- ``LOCAL_LLM_URL`` and ``LOCAL_LLM_MODEL`` default to the stock Ollama
  endpoint and ``llama3`` when unset. An explicitly empty variable means
  "no server default".
- A ``.env`` file (path from ``DOTENV_FILE``, default ``.env``) is parsed once
  per process; existing variables win unless they hold placeholder values.

Failure Modes
-------------
Helpers never raise on unset variables; absent values are ``None``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .defaults import (
    LOCAL_LLM_DEFAULT_MODEL,
    LOCAL_LLM_DEFAULT_URL,
    OPENROUTER_DEFAULT_REFERER,
    OPENROUTER_DEFAULT_TITLE,
)

# Provider -> env var holding its server-level fallback credential.
ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
    "local": "LOCAL_LLM_URL",
}
LOCAL_MODEL_ENV = "LOCAL_LLM_MODEL"
OPENROUTER_REFERER_ENV = "OPENROUTER_REFERER"
OPENROUTER_TITLE_ENV = "OPENROUTER_TITLE"
APP_ENV = "JOBHUNTER_ENV"

_DOTENV_LOADED = False


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder', 'changeme', or 'your-'. The check is
    case-insensitive and resilient to surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith("your-")


def load_dotenv_once(path: Optional[str] = None) -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = path or os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                if k.startswith("export "):
                    k = k[len("export "):].strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class ServerSettings:
    """Server-level fallbacks and attribution settings.

    Attributes:
        secrets: Provider id -> fallback credential (``None`` when unset).
            For ``local`` the credential is the default server URL.
        local_llm_model: Default model for the local server.
        openrouter_referer / openrouter_title: OpenRouter attribution headers.
        environment: Deployment environment name (``development``,
            ``production`` or ``test``).
    """

    secrets: Mapping[str, Optional[str]]
    local_llm_model: Optional[str] = LOCAL_LLM_DEFAULT_MODEL
    openrouter_referer: str = OPENROUTER_DEFAULT_REFERER
    openrouter_title: str = OPENROUTER_DEFAULT_TITLE
    environment: str = "development"

    def secret_for(self, provider: str) -> Optional[str]:
        return self.secrets.get(provider)

    def has_secret(self, provider: str) -> bool:
        return bool(self.secrets.get(provider))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def load_server_settings(environ: Optional[Mapping[str, str]] = None) -> ServerSettings:
    """Build a fresh :class:`ServerSettings` from the environment.

    Parameters
    ----------
    environ:
        Mapping to read instead of ``os.environ`` (tests). When omitted the
        ``.env`` file is loaded first (once per process).
    """
    if environ is None:
        load_dotenv_once()
        environ = os.environ
    secrets: Dict[str, Optional[str]] = {
        provider: _clean(environ.get(var)) for provider, var in ENV_MAP.items()
    }
    if ENV_MAP["local"] not in environ:
        secrets["local"] = LOCAL_LLM_DEFAULT_URL
    local_model = (
        _clean(environ.get(LOCAL_MODEL_ENV)) if LOCAL_MODEL_ENV in environ else LOCAL_LLM_DEFAULT_MODEL
    )
    return ServerSettings(
        secrets=secrets,
        local_llm_model=local_model,
        openrouter_referer=_clean(environ.get(OPENROUTER_REFERER_ENV)) or OPENROUTER_DEFAULT_REFERER,
        openrouter_title=_clean(environ.get(OPENROUTER_TITLE_ENV)) or OPENROUTER_DEFAULT_TITLE,
        environment=(_clean(environ.get(APP_ENV)) or "development").lower(),
    )


__all__ = [
    "ENV_MAP",
    "LOCAL_MODEL_ENV",
    "APP_ENV",
    "ServerSettings",
    "load_server_settings",
    "load_dotenv_once",
    "is_placeholder",
]
