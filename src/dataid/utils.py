"""Shared helpers for the dataid checks."""

from __future__ import annotations

from dataid.errors import InvalidArgumentError


def require_text(value: str | None, label: str) -> str:
    """Return value stripped of surrounding whitespace.

    This is the single emptiness check used by every public function:
    None, non-strings, empty and blank strings raise InvalidArgumentError.
    """
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{label} must not be empty")
    return value.strip()
