import uuid
from pathlib import Path, PurePath

from docingest.processor.exceptions import StorageError
from docingest.processor.models import UploadResult
from docingest.storage.base import BaseBlobStore


def stored_file_path(storage_root: Path, object_id: str, file_name: str) -> Path:
    """Build path to a stored file: {storage_root}/{object_id}/{file_name}"""
    return storage_root / object_id / file_name


class LocalBlobStore(BaseBlobStore):
    """Writes uploaded files to a local directory tree."""

    def __init__(self, storage_root: Path) -> None:
        self._storage_root = storage_root

    def upload(self, data: bytes, file_name: str, mime_type: str) -> UploadResult:
        safe_name = PurePath(file_name).name or "upload.bin"
        path = stored_file_path(self._storage_root, str(uuid.uuid4()), safe_name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Failed to store {safe_name}: {exc}") from exc
        return UploadResult(url=path.resolve().as_uri())
