"""Shared helpers for database error handling."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

MYSQL_DUPLICATE_ENTRY_CODES = {1062, 1586}
DUPLICATE_SQLSTATES = {"23505"}


def _extract_error_code(exc: IntegrityError) -> tuple[int | None, str | None]:
    orig = getattr(exc, "orig", None)
    if not orig:
        return None, None
    code = None
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if getattr(orig, "args", None):
        try:
            code = int(orig.args[0])
        except (TypeError, ValueError):
            code = None
    return code, sqlstate


def is_duplicate_entry(exc: IntegrityError) -> bool:
    """Return True when the integrity failure is a unique-key violation."""

    code, sqlstate = _extract_error_code(exc)
    if code in MYSQL_DUPLICATE_ENTRY_CODES:
        return True
    if sqlstate in DUPLICATE_SQLSTATES:
        return True
    message = str(getattr(exc, "orig", exc)).lower()
    return (
        "duplicate entry" in message
        or "unique constraint failed" in message
        or "duplicate key value" in message
    )
