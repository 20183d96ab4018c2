"""SQLite-backed implementation of ``IProfileRepo``.

The profile collaborator owns the candidate data; this layer only needs a
read-only projection, so each user's profile is kept as one JSON document.
"""

from __future__ import annotations

import json
import sqlite3
from typing import Any, Dict, Mapping, Optional

from ..interfaces.repos import IProfileRepo


class ProfileRepoSqlite(IProfileRepo):
    """Stores candidate profile documents keyed by user id (no implicit commit)."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def get_document(self, user_id: str) -> Optional[Dict[str, Any]]:
        cur = self.conn.execute(
            "SELECT document_json FROM profiles WHERE user_id = ?", (user_id,)
        )
        row = cur.fetchone()
        if row is None:
            return None
        data = json.loads(row[0])
        return data if isinstance(data, dict) else None

    def save_document(self, user_id: str, document: Mapping[str, Any]) -> None:
        self.conn.execute(
            "INSERT INTO profiles(user_id, document_json, updated_at) VALUES(?, ?, CURRENT_TIMESTAMP) "
            "ON CONFLICT(user_id) DO UPDATE SET document_json=excluded.document_json, updated_at=CURRENT_TIMESTAMP",
            (user_id, json.dumps(dict(document), ensure_ascii=False)),
        )


__all__ = ["ProfileRepoSqlite"]
