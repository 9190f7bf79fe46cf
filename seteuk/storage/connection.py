"""Shared PostgreSQL connection pool for the postgres storage backend."""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from seteuk.config.settings import Settings
from seteuk.logging.logger import Log

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=settings.db_connect_timeout_seconds,
    )


def init_pool(settings: Settings) -> None:
    """Open the global pool. Calling it again replaces the previous pool."""
    global _pool  # noqa: PLW0603
    close_pool()
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=1,
        max_size=settings.db_pool_max_size,
        timeout=settings.db_connect_timeout_seconds,
        open=True,
    )
    Log.info(
        "Connection pool opened",
        host=settings.db_host,
        database=settings.db_database,
        max_size=settings.db_pool_max_size,
    )


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is None:
        return
    _pool.close()
    _pool = None
    Log.debug("Connection pool closed")


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection. Callers commit their own writes."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
