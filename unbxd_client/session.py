"""Read-only lookup of a previously stored visitor id."""

from __future__ import annotations

from typing import Protocol

UID_KEY = "uid"


class SessionStore(Protocol):
    """Any key-value store with a ``dict``-style ``get``."""

    def get(self, key: str, default: str | None = None) -> str | None: ...


def read_uid(store: SessionStore | None, key: str = UID_KEY) -> str | None:
    """Return the stored visitor id, or ``None`` when absent or blank."""

    if store is None:
        return None
    value = store.get(key, None)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


__all__ = ["UID_KEY", "SessionStore", "read_uid"]
