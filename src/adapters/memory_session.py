"""In-memory session storage.

Each ``MemorySessionStore`` stands in for one browser tab's session storage.
``MemorySessionRegistry`` hands out one store per session id for the HTTP
layer. Data is lost on restart, matching session storage semantics.
"""


class MemorySessionStore:
    """Dict-backed implementation of the SessionStore protocol."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


class MemorySessionRegistry:
    """One MemorySessionStore per session id, created on first use."""

    def __init__(self) -> None:
        self._stores: dict[str, MemorySessionStore] = {}

    def get_or_create(self, session_id: str) -> MemorySessionStore:
        if session_id not in self._stores:
            self._stores[session_id] = MemorySessionStore()
        return self._stores[session_id]

    def get(self, session_id: str) -> MemorySessionStore | None:
        return self._stores.get(session_id)

    def drop(self, session_id: str) -> None:
        self._stores.pop(session_id, None)

    def clear(self) -> None:
        self._stores.clear()

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._stores

    def __len__(self) -> int:
        return len(self._stores)
