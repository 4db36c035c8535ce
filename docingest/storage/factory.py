from pathlib import Path

from docingest.config.settings import Settings
from docingest.storage.base import BaseBlobStore
from docingest.storage.local_adapter import LocalBlobStore


class BlobStoreFactory:
    """Creates the blob store for the configured storage backend."""

    BACKENDS = ("local",)

    @classmethod
    def create(cls, settings: Settings, storage_root: Path | None = None) -> BaseBlobStore:
        backend = settings.storage_backend.lower()
        if backend != "local":
            raise ValueError(
                f"storage_backend '{backend}' is not supported. Choose from: {list(cls.BACKENDS)}"
            )
        root = storage_root if storage_root is not None else Path(settings.storage_root)
        return LocalBlobStore(root)
