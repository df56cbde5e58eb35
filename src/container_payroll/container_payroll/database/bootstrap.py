from __future__ import annotations

from ..core.constants import MYSQL_COLLECTIONS_TABLE
from .connection import DatabaseConnection
from .mysql_base import quote_identifier


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = quote_identifier(conn_factory.config.database)
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS {database} CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def ensure_collections_table(conn_factory: DatabaseConnection, *, table: str = MYSQL_COLLECTIONS_TABLE) -> None:
    """Key/value table holding one JSON payload per collection (idempotent)."""
    table_sql = quote_identifier(table)
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {table_sql} (
                name VARCHAR(64) NOT NULL PRIMARY KEY,
                payload LONGTEXT NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
            ) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
            """
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection) -> None:
    ensure_database_exists(conn_factory)
    ensure_collections_table(conn_factory)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
