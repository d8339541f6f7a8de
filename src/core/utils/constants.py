"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
ERROR_CODE_UNSUPPORTED_MIME_TYPE = "UNSUPPORTED_MIME_TYPE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"
ERROR_CODE_INCOMPATIBLE_RECORD = "INCOMPATIBLE_RECORD"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_PHOTO_NOT_FOUND = "PHOTO_NOT_FOUND"
ERROR_CODE_OBJECT_NOT_FOUND = "OBJECT_NOT_FOUND"

# Configuration Errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_PHOTO_UPLOAD_FAILED = "PHOTO_UPLOAD_FAILED"
ERROR_CODE_PHOTO_DOWNLOAD_FAILED = "PHOTO_DOWNLOAD_FAILED"

# Metadata / DynamoDB Errors
ERROR_CODE_METADATA_STORE = "METADATA_STORE_ERROR"
ERROR_CODE_METADATA_CREATE_FAILED = "METADATA_CREATE_FAILED"
ERROR_CODE_METADATA_FETCH_FAILED = "METADATA_FETCH_FAILED"
ERROR_CODE_METADATA_DUPLICATE_ID = "METADATA_DUPLICATE_ID"


# ============================================================================
# File Upload Constraints
# ============================================================================

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB in bytes

IMAGE_MIME_PREFIX: Final = "image/"
DEFAULT_FILE_NAME: Final = "image.jpg"
DEFAULT_BINARY_CONTENT_TYPE: Final = "application/octet-stream"

# Multipart form field names
FORM_FIELD_PHOTO: Final = "photo"
FORM_FIELD_EVENT_ID: Final = "eventId"

# Storage key layout: events/{event_id}/photos/{photo_id}.{extension}
STORAGE_KEY_TEMPLATE: Final = "events/{event_id}/photos/{photo_id}.{extension}"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length,Content-Disposition"
DEFAULT_CONTENT_TYPE = "application/json"
NO_CACHE = "no-cache"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_R2_ACCOUNT_ID = "R2_ACCOUNT_ID"
ENV_R2_ACCESS_KEY_ID = "R2_ACCESS_KEY_ID"
ENV_R2_SECRET_ACCESS_KEY = "R2_SECRET_ACCESS_KEY"
ENV_R2_BUCKET_NAME = "R2_BUCKET_NAME"
ENV_R2_PUBLIC_URL = "R2_PUBLIC_URL"
ENV_R2_ENDPOINT_URL = "R2_ENDPOINT_URL"
ENV_R2_REGION = "R2_REGION"

ENV_PHOTO_METADATA_TABLE_NAME = "PHOTO_METADATA_TABLE_NAME"
ENV_AWS_REGION = "AWS_REGION"
ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"

R2_ENDPOINT_TEMPLATE = "https://{account_id}.r2.cloudflarestorage.com"
R2_DEFAULT_REGION = "auto"

# ============================================================================
# Metrics
# ============================================================================

METRICS_NAMESPACE = "EventPhotoService"
METRIC_PHOTOS_UPLOADED = "PhotosUploaded"
METRIC_PHOTOS_DOWNLOADED = "PhotosDownloaded"
METRIC_REQUESTS_FAILED = "PhotoRequestsFailed"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
