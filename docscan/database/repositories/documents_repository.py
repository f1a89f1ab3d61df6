from psycopg import Error as PsycopgError

from docscan.database.connection import get_connection
from docscan.processor.exceptions import RecordError
from docscan.processor.models import DocumentRecord
from docscan.records.base import BaseRecordStore

CREATE_DOCUMENTS_TABLE = """
CREATE TABLE IF NOT EXISTS documents (
    id BIGSERIAL PRIMARY KEY,
    user_id TEXT NOT NULL,
    folder_id TEXT NOT NULL,
    name TEXT NOT NULL,
    pdf_path TEXT NOT NULL,
    pdf_url TEXT NOT NULL,
    ocr_text TEXT NOT NULL,
    original_image_name TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""


class DocumentsRepository(BaseRecordStore):
    """Append-only document records in the PostgreSQL documents table."""

    def create_schema(self) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(CREATE_DOCUMENTS_TABLE)
            conn.commit()

    def add(self, user_id: str, folder_id: str, record: DocumentRecord) -> str:
        """Insert a record; ``created_at=None`` uses the database clock.

        Raises:
            RecordError: if the insert fails.
        """
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO documents
                        (user_id, folder_id, name, pdf_path, pdf_url,
                         ocr_text, original_image_name, created_at)
                        VALUES (%s, %s, %s, %s, %s, %s, %s, COALESCE(%s::timestamptz, now()))
                        RETURNING id
                        """,
                        (
                            user_id,
                            folder_id,
                            record.name,
                            record.pdf_path,
                            record.pdf_url,
                            record.ocr_text,
                            record.original_image_name,
                            record.created_at,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except PsycopgError as exc:
            raise RecordError(f"Document record insert failed: {exc}") from exc

        if row is None:
            raise RecordError("Document record insert returned no id")
        return str(row[0])
