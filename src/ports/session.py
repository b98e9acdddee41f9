"""Protocol for session-scoped key/value storage.

Mirrors a browser's per-tab session storage: string keys, string values,
cleared when the session ends.
"""

from typing import Protocol


class SessionStore(Protocol):
    """Session-scoped string store shared by the landing and biome pages."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never written."""
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...
