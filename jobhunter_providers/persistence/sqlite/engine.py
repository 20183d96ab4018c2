"""SQLite engine helpers for the persistence layer.

Purpose
-------
Provide centralized helpers for opening SQLite connections and ensuring the
``ai_configs`` and ``profiles`` tables exist.

Reliability strategy
--------------------
- Applies a standard ``busy_timeout`` (milliseconds) from
  ``jobhunter_providers.config.defaults`` to mitigate lock contention.
- Enables WAL journaling and NORMAL synchronous mode.
- Connections are opened with ``check_same_thread=False`` because FastAPI may
  create a request's unit of work in a worker thread and use it on the event
  loop thread. A connection is never shared between concurrent requests.
"""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import Optional

from ...config.defaults import (
    SQLITE_BUSY_TIMEOUT_MS,
    SQLITE_JOURNAL_MODE,
    SQLITE_SYNCHRONOUS,
)


DB_PATH_ENV = "JOBHUNTER_DB_PATH"
DEFAULT_DB_PATH = Path.home() / ".jobhunter" / "jobhunter.db"
MEMORY_DB = ":memory:"


def get_db_path(db_path: Optional[str] = None) -> str:
    """Return the database location.

    Precedence: explicit argument, then ``JOBHUNTER_DB_PATH``, then
    ``~/.jobhunter/jobhunter.db``. ``":memory:"`` is passed through.
    """
    raw = db_path or os.getenv(DB_PATH_ENV)
    if raw == MEMORY_DB:
        return raw
    return str(Path(raw).expanduser()) if raw else str(DEFAULT_DB_PATH)


def create_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Open a SQLite connection and apply PRAGMA settings.

    Parameters
    ----------
    db_path:
        Optional path to the database file (see :func:`get_db_path`).

    Returns
    -------
    sqlite3.Connection
        An open connection with ``row_factory`` set to ``sqlite3.Row``.
    """
    path = get_db_path(db_path)
    if path != MEMORY_DB:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    if path != MEMORY_DB:
        conn.execute(f"PRAGMA journal_mode={SQLITE_JOURNAL_MODE};")
    conn.execute(f"PRAGMA synchronous={SQLITE_SYNCHRONOUS};")
    conn.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS};")  # ms
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create required tables if they do not exist, then commit.

    Schema overview
    ---------------
    - ``ai_configs``: one provider configuration row per user
    - ``profiles``: one candidate profile JSON document per user
    """
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS ai_configs (
            user_id            TEXT PRIMARY KEY,
            active_provider    TEXT NOT NULL DEFAULT 'openai',
            openai_api_key     TEXT,
            openai_model       TEXT,
            anthropic_api_key  TEXT,
            anthropic_model    TEXT,
            openrouter_api_key TEXT,
            openrouter_model   TEXT,
            local_llm_url      TEXT,
            local_llm_model    TEXT,
            temperature        REAL,
            max_tokens         INTEGER,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        """
    )
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS profiles (
            user_id       TEXT PRIMARY KEY,
            document_json TEXT NOT NULL,
            updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        );
        """
    )
    conn.commit()


__all__ = ["create_connection", "init_schema", "get_db_path", "DB_PATH_ENV"]
