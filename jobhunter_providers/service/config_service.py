"""User-facing AI configuration operations.

- ``get_config_view``: persisted settings with every secret masked, plus
  flags telling the client whether a server-level key exists as fallback.
- ``update_config``: upsert; only supplied fields change and an empty
  string clears a field.
- ``provision``: create the default record for a new account.

Writes go through the repository without committing; the caller's Unit of
Work owns the transaction.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from pydantic.alias_generators import to_camel

from ..base.errors import NotConfiguredError
from ..base.masking import mask_secret
from ..base.models import EDITABLE_FIELDS, ProviderConfig, ProviderId
from ..config.env import ServerSettings, load_server_settings
from ..persistence.interfaces.repos import IProviderConfigRepo

_SECRET_FIELDS = ("openai_api_key", "anthropic_api_key", "openrouter_api_key")
_SERVER_KEY_FLAGS = {
    "serverHasOpenaiKey": "openai",
    "serverHasAnthropicKey": "anthropic",
    "serverHasOpenrouterKey": "openrouter",
}


class ConfigService:
    """Read/modify a user's provider configuration record."""

    def __init__(
        self,
        repo: IProviderConfigRepo,
        settings_loader: Callable[[], ServerSettings] = load_server_settings,
    ) -> None:
        self._repo = repo
        self._settings_loader = settings_loader

    def get_config_view(self, user_id: str) -> Dict[str, Any]:
        """Return the masked view; raises ``NotConfiguredError`` when absent."""
        record = self._repo.get(user_id)
        if record is None:
            raise NotConfiguredError("AI configuration not found")
        return self._view(record)

    def update_config(self, user_id: str, changes: Mapping[str, Any]) -> Dict[str, Any]:
        """Upsert ``changes`` (snake_case keys) and return the masked view.

        ``active_provider`` must be a known provider identity.
        """
        cleaned = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
        if cleaned.get("active_provider") is not None:
            cleaned["active_provider"] = ProviderId.parse(cleaned["active_provider"]).value
        else:
            cleaned.pop("active_provider", None)
        return self._view(self._repo.upsert(user_id, cleaned))

    def provision(self, user_id: str) -> ProviderConfig:
        """Ensure the default record exists for ``user_id``."""
        return self._repo.create_default(user_id)

    def _view(self, record: ProviderConfig) -> Dict[str, Any]:
        settings = self._settings_loader()
        view: Dict[str, Any] = {}
        for name in EDITABLE_FIELDS:
            value = getattr(record, name)
            if name in _SECRET_FIELDS:
                value = mask_secret(value)
            view[to_camel(name)] = value
        view["updatedAt"] = record.updated_at
        for flag, provider in _SERVER_KEY_FLAGS.items():
            view[flag] = settings.has_secret(provider)
        return view


__all__ = ["ConfigService"]
