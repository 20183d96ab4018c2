"""Display-only redaction of credential values.

Masked values are shown in configuration views so users can recognise which
key is stored. They are never used for authorization or equality checks.
"""

from __future__ import annotations

from typing import Optional

REDACTED = "***"
SEPARATOR = "..."
_MIN_VISIBLE_LENGTH = 8
_VISIBLE = 4


def mask_secret(secret: Optional[str]) -> str:
    """Return a redacted rendering of ``secret``.

    - empty or ``None`` -> ``""``
    - fewer than 8 characters -> ``"***"``
    - otherwise the first 4 and last 4 characters joined by ``"..."``
    """
    if not secret:
        return ""
    if len(secret) < _MIN_VISIBLE_LENGTH:
        return REDACTED
    return f"{secret[:_VISIBLE]}{SEPARATOR}{secret[-_VISIBLE:]}"


__all__ = ["mask_secret", "REDACTED", "SEPARATOR"]
