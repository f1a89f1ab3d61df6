from unittest.mock import MagicMock, patch

import pytest

from docscan.database.repositories.documents_repository import DocumentsRepository
from docscan.records.factory import RecordStoreFactory


class TestRecordStoreFactory:
    def test_creates_firestore_store_for_configured_project(self) -> None:
        settings = MagicMock(record_store="firestore", firestore_project="scans-prod")
        with patch("docscan.records.factory.FirestoreRecordStore") as mock_cls:
            store = RecordStoreFactory.create(settings)

        assert store is mock_cls.return_value
        mock_cls.assert_called_once_with(project="scans-prod")

    def test_creates_postgres_repository(self) -> None:
        store = RecordStoreFactory.create(MagicMock(record_store="Postgres"))
        assert isinstance(store, DocumentsRepository)

    def test_raises_for_unknown_store(self) -> None:
        with pytest.raises(ValueError, match="Unknown record store"):
            RecordStoreFactory.create(MagicMock(record_store="mongo"))
