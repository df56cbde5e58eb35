from __future__ import annotations

from typing import Optional


class MemoryBackend:
    """Dict-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, payload: str) -> None:
        self._data[key] = payload

    def close(self) -> None:
        return None

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
