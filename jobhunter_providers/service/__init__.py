"""Service layer: dispatcher, connectivity probe, config service, HTTP app."""

from .config_service import ConfigService
from .dispatcher import GenerationDispatcher
from .probe import ConnectionProbe

__all__ = ["ConfigService", "ConnectionProbe", "GenerationDispatcher"]
