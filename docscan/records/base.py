from abc import ABC, abstractmethod

from docscan.processor.models import DocumentRecord


class BaseRecordStore(ABC):
    """Contract for append-only document metadata stores."""

    @abstractmethod
    def add(self, user_id: str, folder_id: str, record: DocumentRecord) -> str:
        """Create a record under users/{user_id}/folders/{folder_id}/documents.

        Returns:
            Identifier of the created record.

        Raises:
            RecordError: if the record cannot be written.
        """
