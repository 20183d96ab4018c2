"""
OpenRouter provider package.

Exports:
- OpenRouterProvider: OpenAI-compatible gateway adapter over ``httpx``
"""

from .client import OpenRouterProvider

__all__ = ["OpenRouterProvider"]
