"""Repository & Unit of Work protocol definitions for the AI layer.

The config resolver, dispatcher and FastAPI service depend only on these
abstractions; concrete implementations live under ``persistence/sqlite/``.
Tests substitute in-memory fakes that satisfy the same protocols.

Design Principles:
- No concrete behavior; pure structural typing via ``Protocol``.
- Domain dataclasses (``ProviderConfig``, profile JSON documents) cross the
  repository boundary.
- Transaction control is delegated to the ``IUnitOfWork`` implementation;
  repositories never commit.

Failure Semantics:
- Missing rows are reported as ``None``. Backend exceptions (I/O failures,
  integrity errors) propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol

from ...base.models import ProviderConfig


class IProviderConfigRepo(Protocol):
    """Storage of the per-user AI configuration record (one row per user)."""

    def get(self, user_id: str) -> Optional[ProviderConfig]:
        """Return the user's record or ``None`` when none exists."""
        ...

    def upsert(self, user_id: str, changes: Mapping[str, Any]) -> ProviderConfig:
        """Create the record if absent, otherwise merge ``changes`` into it."""
        ...

    def create_default(self, user_id: str) -> ProviderConfig:
        """Insert the default record if absent and return the stored record."""
        ...


class IProfileRepo(Protocol):
    """Read access to the candidate profile JSON document of a user."""

    def get_document(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Return the raw profile document or ``None``."""
        ...

    def save_document(self, user_id: str, document: Mapping[str, Any]) -> None:
        """Insert or replace the user's profile document (no commit)."""
        ...


class IUnitOfWork(Protocol):
    """Transaction boundary aggregating repositories.

    Attributes:
        configs: provider configuration repository.
        profiles: candidate profile repository.
    """

    configs: IProviderConfigRepo
    profiles: IProfileRepo

    def __enter__(self) -> "IUnitOfWork":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["IProviderConfigRepo", "IProfileRepo", "IUnitOfWork"]
