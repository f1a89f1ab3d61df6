from docscan.config.settings import Settings
from docscan.database.repositories.documents_repository import DocumentsRepository
from docscan.records.base import BaseRecordStore
from docscan.records.firestore_adapter import FirestoreRecordStore


class RecordStoreFactory:
    """Creates the configured metadata record store."""

    STORES = ("firestore", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseRecordStore:
        store = settings.record_store.lower()
        if store == "firestore":
            return FirestoreRecordStore(project=settings.firestore_project)
        if store == "postgres":
            return DocumentsRepository()
        raise ValueError(
            f"Unknown record store '{store}'. Choose from: {list(cls.STORES)}"
        )
