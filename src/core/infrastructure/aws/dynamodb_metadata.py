"""DynamoDB-backed implementation of PhotoMetadataRepository."""

from decimal import Decimal
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapterProtocol
from core.models.errors import MetadataStoreError
from core.repositories.metadata_repository import PhotoMetadataRepository
from core.utils.constants import (
    ERROR_CODE_METADATA_CREATE_FAILED,
    ERROR_CODE_METADATA_DUPLICATE_ID,
    ERROR_CODE_METADATA_FETCH_FAILED,
)

Metadata = dict[str, Any]

logger = Logger(UTC=True)

PARTITION_KEY = "id"


def _from_dynamodb(item: Metadata) -> Metadata:
    """Convert DynamoDB Decimal numbers back to int/float."""
    converted: Metadata = {}

    for name, value in item.items():
        if isinstance(value, Decimal):
            converted[name] = int(value) if value == value.to_integral_value() else float(value)
        else:
            converted[name] = value

    return converted


class DynamoDBMetadata(PhotoMetadataRepository):
    """DynamoDB-backed metadata storage with error handling.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol) -> None:
        """Initialize with DynamoDB adapter."""
        self._db = adapter

    def create_metadata(self, *, metadata: Metadata) -> None:
        """Create the metadata document for a photo.

        Raises:
            ValueError: If metadata has no usable id
            MetadataStoreError: If the id already exists or creation fails
        """
        photo_id = metadata.get(PARTITION_KEY)

        if not photo_id or not isinstance(photo_id, str) or not photo_id.strip():
            raise ValueError("metadata must contain non-empty 'id' (string)")

        logger.debug("Creating metadata", extra={"photo_id": photo_id})

        try:
            self._db.put_item(
                item=metadata,
                condition_expression=f"attribute_not_exists({PARTITION_KEY})",
            )
            logger.info("Metadata created", extra={"photo_id": photo_id})

        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"photo_id": photo_id})

            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise MetadataStoreError(
                    message="Photo id already exists",
                    error_code=ERROR_CODE_METADATA_DUPLICATE_ID,
                    details=f"A metadata record with id {photo_id} already exists",
                    context={"photo_id": photo_id},
                ) from exc

            raise MetadataStoreError(
                message="Unable to save photo metadata at this time",
                error_code=ERROR_CODE_METADATA_CREATE_FAILED,
                details=str(exc.response.get("Error", {}).get("Message") or exc),
                context={"photo_id": photo_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error creating metadata")
            raise MetadataStoreError(
                message="Unable to save photo metadata at this time",
                error_code=ERROR_CODE_METADATA_CREATE_FAILED,
                details=str(exc) or type(exc).__name__,
                context={"photo_id": photo_id},
            ) from exc

    def fetch_metadata(self, *, photo_id: str) -> Metadata | None:
        """Fetch the metadata document of a single photo.

        Raises:
            MetadataStoreError: If fetch fails
        """
        logger.debug("Fetching metadata", extra={"photo_id": photo_id})

        try:
            response = self._db.get_item(key={PARTITION_KEY: photo_id})
            item = response.get("Item")

        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"photo_id": photo_id})
            raise MetadataStoreError(
                message="Unable to retrieve photo metadata",
                error_code=ERROR_CODE_METADATA_FETCH_FAILED,
                details=str(exc.response.get("Error", {}).get("Message") or exc),
                context={"photo_id": photo_id},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error fetching metadata")
            raise MetadataStoreError(
                message="Unable to retrieve photo metadata",
                error_code=ERROR_CODE_METADATA_FETCH_FAILED,
                details=str(exc) or type(exc).__name__,
                context={"photo_id": photo_id},
            ) from exc

        if item is None:
            return None

        if not isinstance(item, dict):
            raise MetadataStoreError(
                message="Invalid photo metadata format",
                error_code=ERROR_CODE_METADATA_FETCH_FAILED,
                details="Metadata record is not a document",
                context={"photo_id": photo_id},
            )

        return _from_dynamodb(item)
