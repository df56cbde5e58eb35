from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.constants import MYSQL_COLLECTIONS_TABLE
from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, quote_identifier


class MySQLBackend:
    """Collections stored as JSON payloads in a `name -> payload` table."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = MYSQL_COLLECTIONS_TABLE):
        self._conn_factory = conn_factory
        self._table = quote_identifier(table)

    def read(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"SELECT payload FROM {self._table} WHERE name=%s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot read collection {key!r}: {e}") from e
        if not row:
            return None
        return str(row["payload"])

    def write(self, key: str, payload: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO {self._table}(name, payload)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key, payload),
                )
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot write collection {key!r}: {e}") from e

    def close(self) -> None:
        return None
