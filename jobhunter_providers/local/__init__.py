"""
Self-hosted server provider package.

Exports:
- LocalLLMProvider: adapter for OpenAI-compatible local servers (Ollama,
  LM Studio, vLLM, text-generation-webui)
"""

from .client import LocalLLMProvider

__all__ = ["LocalLLMProvider"]
