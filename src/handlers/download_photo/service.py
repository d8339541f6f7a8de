"""
Business logic for photo download.

This module looks up a photo's metadata document and fetches the matching
object from storage.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.config import Settings
from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.infrastructure.adapters.s3_adapter import S3Adapter
from core.infrastructure.aws.dynamodb_metadata import DynamoDBMetadata
from core.infrastructure.aws.s3_photo_storage import S3PhotoStorage
from core.models.errors import IncompatibleRecordError, NotFoundError
from core.repositories.metadata_repository import PhotoMetadataRepository
from core.repositories.storage_repository import PhotoStorageRepository
from core.utils.constants import DEFAULT_BINARY_CONTENT_TYPE, ERROR_CODE_PHOTO_NOT_FOUND

from .models import DownloadedPhoto

Metadata = dict[str, Any]

logger = Logger(UTC=True)


class DownloadService:
    """Application service responsible for retrieving photos.

    This service orchestrates:
    - Fetching photo metadata
    - Rejecting records that were never stored in object storage
    - Buffering the object payload
    """

    def __init__(
        self,
        settings: Settings,
        *,
        storage: PhotoStorageRepository | None = None,
        metadata: PhotoMetadataRepository | None = None,
    ) -> None:
        self.storage = storage or S3PhotoStorage(S3Adapter(settings.storage))
        self.metadata = metadata or DynamoDBMetadata(DynamoDBAdapter(settings.metadata))

    def download_photo(self, photo_id: str) -> DownloadedPhoto:
        """
        Fetch a photo's bytes together with its download headers.

        Raises:
            NotFoundError: If metadata or the storage object does not exist
            IncompatibleRecordError: If the record has no storage key
            StorageError, MetadataStoreError: On backend failures
        """
        metadata = self._get_metadata_or_raise(photo_id)

        storage_key = metadata.get("storageKey")
        if not isinstance(storage_key, str) or not storage_key:
            logger.warning(
                "Photo record has no storage key",
                extra={"photo_id": photo_id},
            )
            raise IncompatibleRecordError(
                message="Photo not stored in object storage",
                details=(
                    "This photo was uploaded to a different storage backend "
                    "and cannot be downloaded via this endpoint"
                ),
                context={"photo_id": photo_id},
            )

        content, stored_content_type = self.storage.download_photo(key=storage_key)

        content_type = (
            metadata.get("contentType") or stored_content_type or DEFAULT_BINARY_CONTENT_TYPE
        )
        file_name = metadata.get("fileName") or storage_key.rsplit("/", 1)[-1]

        logger.info(
            "Photo ready for download",
            extra={"photo_id": photo_id, "file_name": file_name, "size": len(content)},
        )

        return DownloadedPhoto(
            content=content,
            content_type=str(content_type),
            file_name=str(file_name),
        )

    def _get_metadata_or_raise(self, photo_id: str) -> Metadata:
        metadata = self.metadata.fetch_metadata(photo_id=photo_id)

        if metadata is None:
            logger.warning(
                "Photo metadata not found",
                extra={"photo_id": photo_id},
            )
            raise NotFoundError(
                message="Photo not found",
                error_code=ERROR_CODE_PHOTO_NOT_FOUND,
                context={"photo_id": photo_id},
            )

        return metadata
