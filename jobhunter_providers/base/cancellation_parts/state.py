"""Internal state holder for cancellation tokens.

Dataclass used by ``CancellationToken`` to track cancellation status, the
optional reason, and the callbacks waiting to be fired on cancel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass
class State:
    """Internal state for cooperative cancellation tokens."""

    cancelled: bool = False
    reason: Optional[str] = None
    callbacks: Dict[int, Callable[[Optional[str]], None]] = field(default_factory=dict)
    next_callback_id: int = 0


__all__ = ["State"]
