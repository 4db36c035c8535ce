from abc import ABC, abstractmethod

from docingest.processor.models import UploadResult


class BaseBlobStore(ABC):
    """Contract for storing the original bytes of an ingested file."""

    @abstractmethod
    def upload(self, data: bytes, file_name: str, mime_type: str) -> UploadResult:
        """Store the file and return where it can be fetched from.

        Raises:
            StorageError: if the file cannot be stored.
        """
