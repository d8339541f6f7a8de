"""S3-API-backed implementation of PhotoStorageRepository (Cloudflare R2)."""

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from core.models.errors import NotFoundError, StorageError
from core.repositories.storage_repository import PhotoStorageRepository
from core.utils.constants import (
    ERROR_CODE_OBJECT_NOT_FOUND,
    ERROR_CODE_PHOTO_DOWNLOAD_FAILED,
    ERROR_CODE_PHOTO_UPLOAD_FAILED,
)

logger = Logger(UTC=True)

NOT_FOUND_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


def _client_error_message(exc: ClientError) -> str:
    error = exc.response.get("Error", {})
    return str(error.get("Message") or error.get("Code") or exc)


class S3PhotoStorage(PhotoStorageRepository):
    """Photo storage implementation backed by an S3-compatible bucket."""

    def __init__(self, adapter: S3AdapterProtocol) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3 = adapter

    def upload_photo(
        self,
        *,
        key: str,
        file_data: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        """Upload photo bytes under the given object key."""
        logger.debug(
            "Uploading photo",
            extra={"key": key, "size": len(file_data), "content_type": content_type},
        )

        try:
            self._s3.put_object(
                key=key,
                body=file_data,
                content_type=content_type,
                metadata=metadata,
            )
            logger.info("Photo uploaded to storage", extra={"key": key})

        except ClientError as exc:
            logger.error("Storage upload failed", extra={"key": key})
            raise StorageError(
                message="Unable to upload photo at this time",
                error_code=ERROR_CODE_PHOTO_UPLOAD_FAILED,
                details=_client_error_message(exc),
                context={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading photo")
            raise StorageError(
                message="Unable to upload photo at this time",
                error_code=ERROR_CODE_PHOTO_UPLOAD_FAILED,
                details=str(exc) or type(exc).__name__,
                context={"key": key},
            ) from exc

    def download_photo(self, *, key: str) -> tuple[bytes, str | None]:
        """Download and fully buffer photo bytes from storage."""
        logger.debug("Downloading photo", extra={"key": key})

        try:
            response = self._s3.get_object(key=key)
            body = response.get("Body")

            if body is None:
                logger.warning("Storage returned no body", extra={"key": key})
                raise NotFoundError(
                    message="File not found in storage",
                    error_code=ERROR_CODE_OBJECT_NOT_FOUND,
                    context={"key": key},
                )

            content: bytes = body.read()
            content_type = response.get("ContentType")

            logger.info(
                "Photo downloaded from storage",
                extra={"key": key, "size": len(content)},
            )

            return content, content_type

        except NotFoundError:
            raise

        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))

            if code in NOT_FOUND_CODES:
                logger.warning("Storage object missing", extra={"key": key})
                raise NotFoundError(
                    message="File not found in storage",
                    error_code=ERROR_CODE_OBJECT_NOT_FOUND,
                    context={"key": key},
                ) from exc

            logger.error("Storage download failed", extra={"key": key, "code": code})
            raise StorageError(
                message="Unable to download photo at this time",
                error_code=ERROR_CODE_PHOTO_DOWNLOAD_FAILED,
                details=_client_error_message(exc),
                context={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error downloading photo")
            raise StorageError(
                message="Unable to download photo at this time",
                error_code=ERROR_CODE_PHOTO_DOWNLOAD_FAILED,
                details=str(exc) or type(exc).__name__,
                context={"key": key},
            ) from exc
