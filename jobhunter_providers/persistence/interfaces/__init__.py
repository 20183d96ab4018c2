"""Repository and Unit of Work protocols."""

from .repos import IProfileRepo, IProviderConfigRepo, IUnitOfWork

__all__ = ["IProfileRepo", "IProviderConfigRepo", "IUnitOfWork"]
