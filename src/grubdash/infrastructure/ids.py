"""Id generation for newly created dishes and orders."""

from __future__ import annotations

import uuid


def next_id() -> str:
    """Return a fresh 32-character hex id, unique for the process lifetime."""
    return uuid.uuid4().hex
