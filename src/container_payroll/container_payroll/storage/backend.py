from __future__ import annotations

from typing import Optional, Protocol


class StorageBackend(Protocol):
    """Persistence adapter: one serialized payload per collection key.

    Implementations raise `PersistenceError` on any fault of the medium.
    """

    def read(self, key: str) -> Optional[str]:
        """Return the stored payload, or None if the key was never written."""

        raise NotImplementedError

    def write(self, key: str, payload: str) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError
