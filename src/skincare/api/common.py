"""Shared API helpers."""

from __future__ import annotations

from datetime import datetime, timezone

from flask import session

SESSION_KEY = "sid"


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def current_session_id() -> str | None:
    value = session.get(SESSION_KEY)
    return value if isinstance(value, str) and value else None


def remember_session_id(session_id: str) -> None:
    session[SESSION_KEY] = session_id


def forget_session_id() -> None:
    session.pop(SESSION_KEY, None)
