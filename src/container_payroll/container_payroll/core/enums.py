from __future__ import annotations

from enum import Enum


class Collection(str, Enum):
    """Named collections kept by the repository layer (also the storage keys)."""

    WORKERS = "workers"
    TEAMS = "teams"
    CONTAINERS = "containers"


class StorageBackendKind(str, Enum):
    JSON = "json"
    MYSQL = "mysql"
    MEMORY = "memory"
