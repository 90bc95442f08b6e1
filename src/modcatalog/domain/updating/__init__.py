"""Catalog update sessions."""

from __future__ import annotations

from .session import SessionResult, SessionState, SessionStateError, UpdateSession

__all__ = [
    "SessionResult",
    "SessionState",
    "SessionStateError",
    "UpdateSession",
]
