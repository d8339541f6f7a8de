from dataclasses import dataclass
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class PhotoDownloadRequest(BaseModel):
    """Validation model for photo download request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    photo_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Photo ID to download",
    )

    @field_validator("photo_id")
    @classmethod
    def validate_photo_id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("photo_id must not be blank")
        return value


@dataclass(frozen=True)
class DownloadedPhoto:
    """Fully buffered photo ready to be returned to the client."""

    content: bytes
    content_type: str
    file_name: str

    @property
    def content_disposition(self) -> str:
        """Attachment header value with an RFC 6266 ``filename*`` for non-ASCII names."""
        fallback = self.file_name.encode("ascii", "replace").decode("ascii")
        fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
        value = f'attachment; filename="{fallback}"'

        if not self.file_name.isascii():
            value += f"; filename*=UTF-8''{quote(self.file_name, safe='')}"

        return value
