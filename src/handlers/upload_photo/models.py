"""Models for photo upload request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from core.models.errors import FileSizeError, MIMETypeError, ValidationError
from core.utils.constants import (
    DEFAULT_FILE_NAME,
    FORM_FIELD_EVENT_ID,
    FORM_FIELD_PHOTO,
    IMAGE_MIME_PREFIX,
    MAX_FILE_SIZE,
    format_file_size,
    get_max_file_size_mb,
)
from core.utils.multipart import MultipartForm


class PhotoUploadRequest(BaseModel):
    """Validated upload: one image file plus the event it belongs to."""

    model_config = ConfigDict(frozen=True)

    event_id: StrictStr = Field(..., min_length=1, description="Event identifier")
    file_name: StrictStr = Field(..., min_length=1, description="Original file name")
    content_type: StrictStr = Field(..., description="MIME type sent by the client")
    file_data: bytes = Field(..., repr=False, description="Raw photo bytes")

    @property
    def size(self) -> int:
        return len(self.file_data)

    @classmethod
    def from_form(cls, form: MultipartForm) -> "PhotoUploadRequest":
        """Build a request from a parsed multipart form.

        Checks run in a fixed order so the first problem is the one reported:
        missing file, missing event id, non-image content, oversized payload.

        Raises:
            ValidationError: If the file or event id is missing
            MIMETypeError: If the file is not an image
            FileSizeError: If the file exceeds MAX_FILE_SIZE
        """
        upload = form.files.get(FORM_FIELD_PHOTO)
        if upload is None or (upload.file_name is None and not upload.data):
            raise ValidationError(message="No file uploaded")

        event_id = form.fields.get(FORM_FIELD_EVENT_ID, "")
        if not event_id.strip():
            raise ValidationError(message="Event ID is required")

        content_type = upload.content_type or ""
        if not content_type.startswith(IMAGE_MIME_PREFIX):
            raise MIMETypeError(
                message="Only image files are allowed",
                details=f"Received content type '{content_type or 'unknown'}'",
                context={"content_type": content_type},
            )

        if upload.size > MAX_FILE_SIZE:
            raise FileSizeError(
                message="File too large",
                details=(
                    f"File is {format_file_size(upload.size)}; "
                    f"maximum allowed is {get_max_file_size_mb()}MB"
                ),
                context={"size": upload.size},
            )

        return cls(
            event_id=event_id,
            file_name=upload.file_name or DEFAULT_FILE_NAME,
            content_type=content_type,
            file_data=upload.data,
        )


class PhotoUploadResponse(BaseModel):
    """Response model for successful photo upload."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: StrictBool = True
    photo_id: StrictStr = Field(..., description="Unique photo ID")
    url: StrictStr = Field(..., description="Public URL of the stored photo")
    file_name: StrictStr = Field(..., description="Original file name")
    size: StrictInt = Field(..., description="Photo size in bytes")
