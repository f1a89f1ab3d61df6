from datetime import datetime, timezone
from typing import Any

import psycopg
import pytest

from docscan.database.repositories.documents_repository import DocumentsRepository
from docscan.processor.models import DocumentRecord


def _make_record(created_at: datetime | None = None) -> DocumentRecord:
    return DocumentRecord(
        name="doc",
        pdf_path="users/u1/folders/f1/documents/doc.pdf",
        pdf_url="https://host/v0/b/b/o/doc.pdf?alt=media",
        ocr_text="Invoice #42",
        original_image_name="doc.jpg",
        created_at=created_at,
    )


@pytest.mark.integration
class TestDocumentsRepositoryAdd:
    def test_add_persists_record(
        self,
        db_conn: psycopg.Connection[Any],
        integration_cleanup: list[str],
    ) -> None:
        record_id = DocumentsRepository().add("u1", "f1", _make_record())
        integration_cleanup.append(record_id)

        with db_conn.cursor() as cur:
            cur.execute(
                """
                SELECT user_id, folder_id, name, pdf_path, ocr_text,
                       original_image_name, created_at
                FROM documents WHERE id = %s
                """,
                (int(record_id),),
            )
            row = cur.fetchone()
        assert row is not None
        assert row[:6] == (
            "u1",
            "f1",
            "doc",
            "users/u1/folders/f1/documents/doc.pdf",
            "Invoice #42",
            "doc.jpg",
        )
        assert row[6] is not None

    def test_add_keeps_explicit_timestamp(
        self,
        db_conn: psycopg.Connection[Any],
        integration_cleanup: list[str],
    ) -> None:
        created = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        record_id = DocumentsRepository().add("u1", "f1", _make_record(created))
        integration_cleanup.append(record_id)

        with db_conn.cursor() as cur:
            cur.execute("SELECT created_at FROM documents WHERE id = %s", (int(record_id),))
            row = cur.fetchone()
        assert row is not None
        assert row[0] == created

    def test_records_are_append_only(
        self,
        db_conn: psycopg.Connection[Any],
        integration_cleanup: list[str],
    ) -> None:
        repo = DocumentsRepository()
        first = repo.add("u1", "f1", _make_record())
        second = repo.add("u1", "f1", _make_record())
        integration_cleanup.extend([first, second])

        assert first != second
