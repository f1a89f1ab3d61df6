import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import psycopg
import pytest

from docscan.config.settings import Settings
from docscan.database.connection import close_pool, get_connection, init_pool
from docscan.database.repositories.documents_repository import DocumentsRepository
from docscan.records.base import BaseRecordStore
from docscan.storage.local_adapter import LocalBlobStore

BUCKET = "scans-bucket"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docscan_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        DocumentsRepository().create_schema()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    record_ids: list[str] = []
    yield record_ids
    if not record_ids:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for record_id in record_ids:
                cur.execute("DELETE FROM documents WHERE id = %s", (int(record_id),))
        conn.commit()


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    root = tmp_path / "storage"
    root.mkdir()
    return root


@pytest.fixture
def scratch_root(tmp_path: Path) -> Path:
    root = tmp_path / "scratch"
    root.mkdir()
    return root


@pytest.fixture
def blob_store(storage_root: Path) -> LocalBlobStore:
    return LocalBlobStore(root=storage_root)


@pytest.fixture
def record_store() -> MagicMock:
    store = MagicMock(spec=BaseRecordStore)
    store.add.return_value = "rec-1"
    return store


@pytest.fixture
def uploaded_jpeg(blob_store: LocalBlobStore, wide_jpeg_bytes: bytes) -> str:
    path = "users/u1/folders/f1/raw_images/doc.jpg"
    target = blob_store.object_path(BUCKET, path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(wide_jpeg_bytes)
    return path
