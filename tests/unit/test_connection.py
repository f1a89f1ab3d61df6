from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from docscan.config.settings import Settings
from docscan.database import connection
from docscan.database.connection import (
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)


@pytest.fixture(autouse=True)
def _reset_pool() -> Iterator[None]:
    connection._pool = None
    yield
    connection._pool = None


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "db_host": "db",
        "db_port": 5433,
        "db_database": "docscan",
        "db_username": "worker",
        "db_password": "secret",
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


class TestBuildConninfo:
    def test_contains_connection_fields(self) -> None:
        conninfo = build_conninfo(_settings())

        for part in ("host=db", "port=5433", "dbname=docscan", "user=worker", "password=secret"):
            assert part in conninfo

    def test_quotes_password_with_spaces(self) -> None:
        conninfo = build_conninfo(_settings(db_password="two words"))

        assert "password='two words'" in conninfo


class TestInitPool:
    @patch("docscan.database.connection.ConnectionPool")
    def test_pool_is_sized_by_max_instances(self, mock_pool_cls: MagicMock) -> None:
        init_pool(_settings(max_instances=3, db_pool_timeout=2.5))

        kwargs = mock_pool_cls.call_args.kwargs
        assert kwargs["max_size"] == 3
        assert kwargs["min_size"] == 1
        assert kwargs["timeout"] == 2.5
        assert kwargs["open"] is True

    @patch("docscan.database.connection.ConnectionPool")
    def test_second_call_keeps_existing_pool(self, mock_pool_cls: MagicMock) -> None:
        init_pool(_settings())
        init_pool(_settings())

        mock_pool_cls.assert_called_once()

    @patch("docscan.database.connection.ConnectionPool")
    def test_close_pool_closes_and_forgets(self, mock_pool_cls: MagicMock) -> None:
        init_pool(_settings())

        close_pool()
        close_pool()

        mock_pool_cls.return_value.close.assert_called_once()
        assert connection._pool is None


class TestGetConnection:
    def test_raises_when_pool_not_open(self) -> None:
        with pytest.raises(RuntimeError, match="init_pool"):
            with get_connection():
                pass

    @patch("docscan.database.connection.ConnectionPool")
    def test_yields_pooled_connection(self, mock_pool_cls: MagicMock) -> None:
        conn = MagicMock()
        mock_pool_cls.return_value.connection.return_value.__enter__.return_value = conn
        init_pool(_settings())

        with get_connection() as borrowed:
            assert borrowed is conn
