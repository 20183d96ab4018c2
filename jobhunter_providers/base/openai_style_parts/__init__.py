"""Shared building blocks for OpenAI-compatible chat-completion backends.

Used by the OpenAI SDK adapter and by the raw ``httpx`` adapters (OpenRouter
and self-hosted servers), which all speak the same request/response shape.
"""

from .sampling import Sampling, build_chat_payload, build_messages, resolve_sampling
from .envelopes import ChatCompletionEnvelope, parse_envelope
from .http_chat import post_chat_completion

__all__ = [
    "Sampling",
    "build_chat_payload",
    "build_messages",
    "resolve_sampling",
    "ChatCompletionEnvelope",
    "parse_envelope",
    "post_chat_completion",
]
