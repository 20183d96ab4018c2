"""Per-user configuration resolution.

``ConfigResolver.get_effective_config`` merges a user's persisted
``ProviderConfig`` with server-level fallbacks:

    effective = user value if present, else server value if present, else absent

for every provider credential and for the local server URL and model. The
merge is recomputed on every call; nothing is cached so configuration edits
apply to the next request. The persisted record is never modified.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ..base.errors import NotConfiguredError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import EffectiveConfig, ProviderConfig, ProviderId, ProviderSlot
from ..persistence.interfaces.repos import IProviderConfigRepo
from .env import ServerSettings, load_server_settings


def _present(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def first_present(user_value: Optional[str], fallback_value: Optional[str]) -> Optional[str]:
    """Apply the fixed precedence: user value, then fallback, then absent."""
    return _present(user_value) or _present(fallback_value)


class ConfigResolver:
    """Build ``EffectiveConfig`` snapshots for users.

    Parameters
    ----------
    repo:
        Repository returning the persisted ``ProviderConfig`` for a user.
    settings_loader:
        Callable returning current ``ServerSettings``; invoked on every
        resolution (defaults to reading the process environment).
    """

    def __init__(
        self,
        repo: IProviderConfigRepo,
        settings_loader: Callable[[], ServerSettings] = load_server_settings,
    ) -> None:
        self._repo = repo
        self._settings_loader = settings_loader
        self._logger = get_logger("jobhunter.config")

    def get_effective_config(self, user_id: str) -> EffectiveConfig:
        """Return the merged configuration snapshot for ``user_id``.

        Raises
        ------
        NotConfiguredError
            When the user has no persisted configuration record.
        """
        record = self._repo.get(user_id)
        if record is None:
            raise NotConfiguredError()
        settings = self._settings_loader()
        effective = resolve(record, settings)
        log_event(
            self._logger,
            "config.resolved",
            LogContext(provider=effective.active_provider, user_id=user_id),
            level=logging.DEBUG,
            available=sorted(p.value for p, s in effective.slots.items() if s.credential),
        )
        return effective


def resolve(record: ProviderConfig, settings: ServerSettings) -> EffectiveConfig:
    """Pure merge of one persisted record with server settings."""
    slots: Dict[ProviderId, ProviderSlot] = {
        ProviderId.OPENAI: ProviderSlot(
            credential=first_present(record.openai_api_key, settings.secret_for("openai")),
            model=_present(record.openai_model),
        ),
        ProviderId.ANTHROPIC: ProviderSlot(
            credential=first_present(record.anthropic_api_key, settings.secret_for("anthropic")),
            model=_present(record.anthropic_model),
        ),
        ProviderId.OPENROUTER: ProviderSlot(
            credential=first_present(record.openrouter_api_key, settings.secret_for("openrouter")),
            model=_present(record.openrouter_model),
        ),
        ProviderId.LOCAL: ProviderSlot(
            credential=first_present(record.local_llm_url, settings.secret_for("local")),
            model=first_present(record.local_llm_model, settings.local_llm_model),
        ),
    }
    return EffectiveConfig(
        active_provider=record.active_provider,
        slots=slots,
        temperature=record.temperature,
        max_tokens=record.max_tokens,
    )


__all__ = ["ConfigResolver", "resolve", "first_present"]
