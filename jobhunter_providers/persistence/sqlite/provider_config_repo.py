"""SQLite-backed implementation of ``IProviderConfigRepo``.

Stores one ``ai_configs`` row per user. Writes defer commit/rollback to the
surrounding Unit of Work.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Mapping, Optional

from ...base.models import (
    DEFAULT_ACTIVE_PROVIDER,
    EDITABLE_FIELDS,
    ProviderConfig,
)
from ...config.defaults import FALLBACK_MAX_TOKENS, FALLBACK_TEMPERATURE
from ..interfaces.repos import IProviderConfigRepo

_COLUMNS = ("user_id",) + EDITABLE_FIELDS + ("updated_at",)


class ProviderConfigRepoSqlite(IProviderConfigRepo):
    """SQLite repository for per-user provider configuration.

    All writes defer transaction commit to the Unit of Work; no implicit
    commits occur here.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get(self, user_id: str) -> Optional[ProviderConfig]:
        """Return the stored record for ``user_id`` or ``None``."""
        cur = self.conn.execute(
            f"SELECT {', '.join(_COLUMNS)} FROM ai_configs WHERE user_id = ?",
            (user_id,),
        )
        row = cur.fetchone()
        if row is None:
            return None
        return ProviderConfig(**{col: row[col] for col in _COLUMNS})

    def upsert(self, user_id: str, changes: Mapping[str, Any]) -> ProviderConfig:
        """Create the record if absent, otherwise merge ``changes`` (no commit).

        Only keys listed in ``EDITABLE_FIELDS`` are applied; empty strings
        clear optional text fields.
        """
        current = self.get(user_id) or ProviderConfig(user_id=user_id)
        updated = current.merged(dict(changes))
        self._write(updated)
        return self.get(user_id) or updated

    def create_default(self, user_id: str) -> ProviderConfig:
        """Insert the default record when none exists (no commit)."""
        self.conn.execute(
            "INSERT INTO ai_configs(user_id, active_provider, temperature, max_tokens) "
            "VALUES(?, ?, ?, ?) ON CONFLICT(user_id) DO NOTHING",
            (user_id, DEFAULT_ACTIVE_PROVIDER, FALLBACK_TEMPERATURE, FALLBACK_MAX_TOKENS),
        )
        return self.get(user_id) or ProviderConfig(
            user_id=user_id,
            temperature=FALLBACK_TEMPERATURE,
            max_tokens=FALLBACK_MAX_TOKENS,
        )

    def _write(self, record: ProviderConfig) -> None:
        values = [getattr(record, name) for name in EDITABLE_FIELDS]
        placeholders = ", ".join("?" for _ in EDITABLE_FIELDS)
        assignments = ", ".join(f"{name}=excluded.{name}" for name in EDITABLE_FIELDS)
        self.conn.execute(
            f"INSERT INTO ai_configs(user_id, {', '.join(EDITABLE_FIELDS)}, updated_at) "
            f"VALUES(?, {placeholders}, CURRENT_TIMESTAMP) "
            f"ON CONFLICT(user_id) DO UPDATE SET {assignments}, updated_at=CURRENT_TIMESTAMP",
            (record.user_id, *values),
        )


__all__ = ["ProviderConfigRepoSqlite"]
