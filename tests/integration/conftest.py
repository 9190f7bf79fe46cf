import os
from collections.abc import Generator

import pytest

from seteuk.config.settings import Settings
from seteuk.storage.connection import close_pool, get_connection, init_pool
from seteuk.storage.postgres_storage import PostgresStorage

TEST_KEY_PREFIX = "integration_"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "seteuk_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        PostgresStorage().ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def postgres_storage(integration_pool: None) -> Generator[PostgresStorage, None, None]:
    yield PostgresStorage()
    with get_connection() as conn:
        conn.execute("DELETE FROM kv_store WHERE key LIKE %s", (f"{TEST_KEY_PREFIX}%",))
        conn.commit()
