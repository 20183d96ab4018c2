"""SQLite-backed Unit of Work implementation aggregating repositories.

This adapter composes repository implementations and manages transaction
boundaries. On context exit it commits when no exception occurred; otherwise
it rolls back. No implicit commits happen inside repositories.
"""

from __future__ import annotations

import sqlite3

from ..interfaces.repos import IUnitOfWork
from .profile_repo import ProfileRepoSqlite
from .provider_config_repo import ProviderConfigRepoSqlite


class UnitOfWorkSqlite(IUnitOfWork):
    """Unit of Work implementation for SQLite.

    Aggregates concrete repository adapters and manages transaction
    boundaries. The connection is closed by :meth:`close`.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        self.configs = ProviderConfigRepoSqlite(conn)
        self.profiles = ProfileRepoSqlite(conn)
        self._active = False

    def __enter__(self) -> "UnitOfWorkSqlite":
        self._active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """Commit if no exception was raised; otherwise roll back."""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._active = False

    def commit(self) -> None:
        """Commit the current transaction."""
        self._conn.commit()

    def rollback(self) -> None:
        """Rollback the current transaction (idempotent)."""
        self._conn.rollback()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()


__all__ = ["UnitOfWorkSqlite"]
