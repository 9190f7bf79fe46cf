import psycopg

from seteuk.storage.base import BaseKeyValueStorage
from seteuk.storage.connection import get_connection
from seteuk.storage.exceptions import StorageError


class PostgresStorage(BaseKeyValueStorage):
    """Keyed storage on the kv_store table of the shared connection pool."""

    def ensure_schema(self) -> None:
        self._execute(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            )
            """,
            (),
        )

    def get(self, key: str) -> str | None:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT value FROM kv_store WHERE key = %s", (key,))
                    row = cur.fetchone()
        except psycopg.Error as exc:
            raise StorageError(f"Failed to read key {key!r}: {exc}") from exc
        if row is None:
            return None
        return row[0]

    def set(self, key: str, value: str) -> None:
        self._execute(
            """
            INSERT INTO kv_store (key, value)
            VALUES (%s, %s)
            ON CONFLICT (key) DO UPDATE
            SET value = EXCLUDED.value, updated_at = NOW()
            """,
            (key, value),
        )

    def remove(self, key: str) -> None:
        self._execute("DELETE FROM kv_store WHERE key = %s", (key,))

    def _execute(self, query: str, params: tuple[str, ...]) -> None:
        try:
            with get_connection() as conn:
                conn.execute(query, params)
                conn.commit()
        except psycopg.Error as exc:
            raise StorageError(f"Storage write failed: {exc}") from exc
