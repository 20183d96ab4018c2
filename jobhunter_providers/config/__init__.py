"""Configuration layer for the provider package.

* ``defaults``: stable constants (default models, URLs, sampling fallbacks).
* ``env``: server-level fallback secrets and settings read from the
  environment on every call.
* ``resolver``: per-user merge of persisted settings with server fallbacks.
"""

from .env import ENV_MAP, ServerSettings, load_server_settings

__all__ = ["ENV_MAP", "ServerSettings", "load_server_settings"]
