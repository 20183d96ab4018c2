"""OpenAI-style helpers public surface.

Re-exports ``jobhunter_providers.base.openai_style_parts`` for adapters that
speak the chat-completion contract.
"""

from .openai_style_parts import (
    ChatCompletionEnvelope,
    Sampling,
    build_chat_payload,
    build_messages,
    parse_envelope,
    post_chat_completion,
    resolve_sampling,
)

__all__ = [
    "ChatCompletionEnvelope",
    "Sampling",
    "build_chat_payload",
    "build_messages",
    "parse_envelope",
    "post_chat_completion",
    "resolve_sampling",
]
