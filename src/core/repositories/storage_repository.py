"""Abstract contract for photo object storage."""

from abc import ABC, abstractmethod


class PhotoStorageRepository(ABC):
    """Contract for storing and retrieving photo bytes.

    Implementations could be R2, S3, GCS, local disk, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def upload_photo(
        self,
        *,
        key: str,
        file_data: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """Store photo bytes under ``key``.

        Args:
            key: Storage key
            file_data: Binary photo content
            content_type: MIME type (e.g., 'image/jpeg')
            metadata: Object tags stored alongside the bytes

        Raises:
            StorageError: If upload fails
        """

    @abstractmethod
    def download_photo(self, *, key: str) -> tuple[bytes, str | None]:
        """Download photo bytes by key.

        Args:
            key: Storage key from upload

        Returns:
            Tuple of (content_bytes, stored_content_type)

        Raises:
            NotFoundError: If the object doesn't exist or has no payload
            StorageError: If download fails
        """
