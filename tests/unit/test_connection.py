from unittest.mock import patch

import pytest

from seteuk.config.settings import Settings
from seteuk.storage import connection


class TestConnectionPool:
    def test_conninfo_from_settings(self) -> None:
        settings = Settings(_env_file=None, db_host="db.test", db_password="p w", db_port=6543)
        conninfo = connection.build_conninfo(settings)
        assert "host=db.test" in conninfo
        assert "port=6543" in conninfo
        assert "password='p w'" in conninfo
        assert "connect_timeout=10" in conninfo

    def test_get_connection_requires_pool(self) -> None:
        connection.close_pool()
        with pytest.raises(RuntimeError, match="not initialized"):
            with connection.get_connection():
                pass

    def test_init_and_close(self) -> None:
        settings = Settings(_env_file=None, db_pool_max_size=2)
        with patch("seteuk.storage.connection.ConnectionPool") as mock_pool_cls:
            connection.init_pool(settings)
            _, kwargs = mock_pool_cls.call_args
            assert kwargs["max_size"] == 2
            assert kwargs["open"] is True
            connection.close_pool()
        mock_pool_cls.return_value.close.assert_called_once()
        connection.close_pool()
