from __future__ import annotations

import copy
import json
import logging
from typing import Any, Callable, Iterable, Sequence, TypeVar

from ..core.enums import Collection
from ..core.exceptions import PersistenceError
from .backend import StorageBackend

logger = logging.getLogger(__name__)

Record = dict[str, Any]
T = TypeVar("T")

# Raised by `from_record` on missing keys, bad dates, bad amounts or wrong types.
MALFORMED_RECORD_ERRORS = (KeyError, ValueError, TypeError, AttributeError, ArithmeticError)


def load_entities(collection: Collection, records: Iterable[Record], from_record: Callable[[Record], T]) -> list[T]:
    """Map stored records to entities, skipping (and logging) records that do not parse."""
    out: list[T] = []
    for record in records:
        try:
            out.append(from_record(record))
        except MALFORMED_RECORD_ERRORS as e:
            logger.warning("Skipping malformed %s record %r: %r", collection.value, record.get("id"), e)
    return out


class Repository:
    """In-memory view of the named collections plus the backend that persists them.

    Constructed once per session; services receive it from the container.
    `save` is all-or-nothing: the in-memory state only changes once the backend
    accepted the new payload, and storage faults come back as `False`.
    """

    def __init__(self, backend: StorageBackend, *, collections: Iterable[Collection] = tuple(Collection)):
        self._backend = backend
        self._collections = tuple(collections)
        self._state: dict[str, list[Record]] = {}

    def initialize(self) -> None:
        """Load every collection, seeding absent ones with an empty sequence."""
        for collection in self._collections:
            key = collection.value
            try:
                payload = self._backend.read(key)
            except PersistenceError:
                logger.exception("Could not load collection %s; starting empty", key)
                self._state[key] = []
                continue

            if payload is None:
                self._state[key] = []
                if not self.save(collection, []):
                    logger.error("Could not seed empty collection %s", key)
                continue

            self._state[key] = self._decode(key, payload)
        logger.debug("Repository initialized: %s", {k: len(v) for k, v in self._state.items()})

    @staticmethod
    def _decode(key: str, payload: str) -> list[Record]:
        try:
            records = json.loads(payload)
        except ValueError:
            logger.error("Stored collection %s is not valid JSON; treating it as empty", key)
            return []
        if not isinstance(records, list):
            logger.error("Stored collection %s is not a list; treating it as empty", key)
            return []
        return [r for r in records if isinstance(r, dict)]

    def get_all(self, collection: Collection) -> list[Record]:
        """Copies of the stored records, in stored order. Never None."""
        return copy.deepcopy(self._state.get(collection.value, []))

    def save(self, collection: Collection, records: Sequence[Record]) -> bool:
        key = collection.value
        try:
            payload = json.dumps(list(records), ensure_ascii=False)
        except (TypeError, ValueError):
            logger.exception("Could not serialize collection %s", key)
            return False

        try:
            self._backend.write(key, payload)
        except PersistenceError:
            logger.exception("Could not persist collection %s", key)
            return False

        self._state[key] = json.loads(payload)
        return True

    def flush(self) -> bool:
        """Write every loaded collection back to the backend."""
        ok = True
        for collection in self._collections:
            if collection.value in self._state:
                ok = self.save(collection, self._state[collection.value]) and ok
        return ok

    def close(self) -> None:
        self.flush()
        self._backend.close()
