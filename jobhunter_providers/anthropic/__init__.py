"""
Anthropic provider package.

Exports:
- AnthropicProvider: ``AIProvider`` adapter over the ``anthropic`` Messages API
"""

from .client import AnthropicProvider

__all__ = ["AnthropicProvider"]
