from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from docscan.config.settings import Settings

_pool: ConnectionPool | None = None


def build_conninfo(settings: Settings) -> str:
    """libpq connection string for the record database; values are quoted as needed."""
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
    )


def init_pool(settings: Settings) -> None:
    """Open the record pool once per process.

    One connection per concurrent invocation is enough, so the pool is capped
    at ``max_instances``. Later calls are no-ops.
    """
    global _pool  # noqa: PLW0603
    if _pool is not None:
        return
    _pool = ConnectionPool(
        build_conninfo(settings),
        min_size=1,
        max_size=max(1, settings.max_instances),
        timeout=settings.db_pool_timeout,
        name="docscan-records",
        open=True,
    )


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    if _pool is None:
        return
    _pool.close()
    _pool = None


@contextmanager
def get_connection() -> Iterator[psycopg.Connection[Any]]:
    """Borrow a pooled connection; commit and rollback are up to the caller."""
    if _pool is None:
        raise RuntimeError("Record database pool is not open; call init_pool() first")
    with _pool.connection() as conn:
        yield conn
