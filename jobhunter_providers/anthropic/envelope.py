"""Narrow validated view of an Anthropic Messages API response."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ContentBlock(_Lenient):
    type: str
    text: Optional[str] = None


class MessageUsage(_Lenient):
    input_tokens: int = 0
    output_tokens: int = 0


class MessageEnvelope(_Lenient):
    """``{"content": [{"type": "text", "text": ...}], "usage": {...}}``"""

    content: List[ContentBlock] = []
    usage: Optional[MessageUsage] = None

    @property
    def text(self) -> str:
        """Concatenation of all text blocks; other block types are skipped."""
        return "".join(block.text or "" for block in self.content if block.type == "text")

    @property
    def total_tokens(self) -> Optional[int]:
        if self.usage is None:
            return None
        return self.usage.input_tokens + self.usage.output_tokens


__all__ = ["MessageEnvelope", "ContentBlock", "MessageUsage"]
