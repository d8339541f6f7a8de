"""Custom exception classes for the photo service."""

from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_INCOMPATIBLE_RECORD,
    ERROR_CODE_METADATA_STORE,
    ERROR_CODE_METHOD_NOT_ALLOWED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORAGE,
    ERROR_CODE_UNSUPPORTED_MIME_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
)


class PhotoServiceError(Exception):
    """
    Base exception for all photo service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    `details` is a human-readable cause returned to the client;
    `context` carries structured values for logging only.
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    message: str
    error_code: str
    details: str | None
    context: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details
        self.context = context or {}

        super().__init__(self.message)


class ConfigurationError(PhotoServiceError):
    """Raised when required environment configuration is missing."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class ValidationError(PhotoServiceError):
    """Raised when request validation fails."""

    status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class MIMETypeError(ValidationError):
    """Raised when an upload is not an image."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_MIME_TYPE,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class FileSizeError(ValidationError):
    """Raised when file size exceeds the allowed limit."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class IncompatibleRecordError(ValidationError):
    """Raised when a metadata record has no object storage key."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INCOMPATIBLE_RECORD,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class MethodNotAllowedError(PhotoServiceError):
    """Raised when a handler is invoked with an unsupported HTTP method."""

    status = HTTPStatus.METHOD_NOT_ALLOWED

    def __init__(
        self,
        *,
        message: str = "Method not allowed",
        error_code: str = ERROR_CODE_METHOD_NOT_ALLOWED,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class NotFoundError(PhotoServiceError):
    """Raised when a requested resource is not found."""

    status = HTTPStatus.NOT_FOUND

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class StorageError(PhotoServiceError):
    """Raised when an object storage operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )


class MetadataStoreError(PhotoServiceError):
    """Raised when a metadata store operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_METADATA_STORE,
        details: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
            context=context,
        )
