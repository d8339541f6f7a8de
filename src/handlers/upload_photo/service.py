"""Business logic for photo upload operations.

This module writes the photo bytes to object storage and then records the
photo's metadata document, translating failures into domain-specific errors.
"""

import uuid
from urllib.parse import quote

from aws_lambda_powertools import Logger

from core.config import Settings
from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.infrastructure.adapters.s3_adapter import S3Adapter
from core.infrastructure.aws.dynamodb_metadata import DynamoDBMetadata
from core.infrastructure.aws.s3_photo_storage import S3PhotoStorage
from core.models.photo import PhotoMetadata
from core.repositories.metadata_repository import PhotoMetadataRepository
from core.repositories.storage_repository import PhotoStorageRepository
from core.utils.constants import STORAGE_KEY_TEMPLATE
from core.utils.time import utc_now_iso

from .models import PhotoUploadRequest

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for photo uploads.

    This service orchestrates:
    - Generating the photo id and storage key
    - Uploading photo content to object storage
    - Persisting photo metadata
    """

    def __init__(
        self,
        settings: Settings,
        *,
        storage: PhotoStorageRepository | None = None,
        metadata: PhotoMetadataRepository | None = None,
    ) -> None:
        """Initialize the upload service with required infrastructure dependencies."""
        self.settings = settings
        self.storage = storage or S3PhotoStorage(S3Adapter(settings.storage))
        self.metadata = metadata or DynamoDBMetadata(DynamoDBAdapter(settings.metadata))

    @staticmethod
    def generate_photo_id() -> str:
        """Generate a unique photo identifier."""
        return str(uuid.uuid4())

    @staticmethod
    def file_extension(file_name: str) -> str:
        """Return the text after the last '.' of the file name.

        A name without a dot is returned whole.
        """
        return file_name.rsplit(".", 1)[-1]

    @classmethod
    def build_storage_key(cls, *, event_id: str, photo_id: str, file_name: str) -> str:
        return STORAGE_KEY_TEMPLATE.format(
            event_id=event_id,
            photo_id=photo_id,
            extension=cls.file_extension(file_name),
        )

    def upload_photo(self, request: PhotoUploadRequest) -> PhotoMetadata:
        """Store a photo and persist its metadata.

        The upload flow is:
        1. Generate photo id and storage key
        2. Upload bytes to object storage
        3. Persist the metadata document

        Object metadata must be ASCII, so the event id and file name are
        percent-encoded there; the metadata document keeps them unchanged.

        If step 3 fails the stored object is left in place; the key is
        logged so it can be reconciled.

        Returns:
            The persisted metadata record

        Raises:
            StorageError: If the storage upload fails (nothing is persisted)
            MetadataStoreError: If metadata persistence fails
        """
        photo_id = self.generate_photo_id()
        key = self.build_storage_key(
            event_id=request.event_id,
            photo_id=photo_id,
            file_name=request.file_name,
        )
        uploaded_at = utc_now_iso()

        logger.debug(
            "Starting photo upload",
            extra={"photo_id": photo_id, "event_id": request.event_id, "key": key},
        )

        self.storage.upload_photo(
            key=key,
            file_data=request.file_data,
            content_type=request.content_type,
            metadata={
                "eventId": quote(request.event_id, safe=""),
                "originalFileName": quote(request.file_name, safe=""),
                "uploadedAt": uploaded_at,
            },
        )

        record = PhotoMetadata(
            id=photo_id,
            storage_key=key,
            url=self.settings.storage.public_url_for(key),
            event_id=request.event_id,
            file_name=request.file_name,
            size=request.size,
            content_type=request.content_type,
            uploaded_at=uploaded_at,
        )

        try:
            self.metadata.create_metadata(metadata=record.to_item())
        except Exception:
            logger.error(
                "Metadata write failed after storage upload; object left in storage",
                extra={"photo_id": photo_id, "orphaned_key": key},
            )
            raise

        logger.info(
            "Photo uploaded successfully",
            extra={"photo_id": photo_id, "event_id": request.event_id, "key": key},
        )
        return record
