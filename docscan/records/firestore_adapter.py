from typing import Any

from google.cloud import firestore

from docscan.processor.exceptions import RecordError
from docscan.processor.models import DocumentRecord
from docscan.records.base import BaseRecordStore


class FirestoreRecordStore(BaseRecordStore):
    """Writes document records into nested Firestore collections."""

    def __init__(self, client: Any | None = None, project: str | None = None) -> None:
        self._client = client if client is not None else firestore.Client(project=project)

    def add(self, user_id: str, folder_id: str, record: DocumentRecord) -> str:
        data = record.to_document()
        if record.created_at is None:
            data["createdAt"] = firestore.SERVER_TIMESTAMP
        try:
            collection = (
                self._client.collection("users")
                .document(user_id)
                .collection("folders")
                .document(folder_id)
                .collection("documents")
            )
            _update_time, ref = collection.add(data)
        except Exception as exc:
            raise RecordError(f"Firestore write failed: {exc}") from exc
        return str(ref.id)
