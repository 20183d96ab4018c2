"""
OpenAI provider package.

Exports:
- OpenAIProvider: ``AIProvider`` adapter over the official ``openai`` SDK
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
