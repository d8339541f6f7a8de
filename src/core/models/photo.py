"""Shared photo metadata model."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel


class PhotoMetadata(BaseModel):
    """Photo metadata record as persisted in the metadata store.

    Stored attribute names are camelCase (``storageKey``, ``eventId``...);
    Python code uses the snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: StrictStr = Field(..., description="Unique photo identifier")
    storage_key: StrictStr = Field(..., description="Object key in the R2 bucket")
    url: StrictStr = Field(..., description="Public URL derived from the storage key")
    event_id: StrictStr = Field(..., description="Event the photo belongs to")
    file_name: StrictStr = Field(..., description="Original client file name")
    size: StrictInt = Field(..., ge=0, description="Photo size in bytes")
    content_type: StrictStr = Field(..., description="MIME type of the photo (e.g. image/jpeg)")
    uploaded_at: StrictStr = Field(..., description="ISO-8601 upload timestamp (UTC)")

    def to_item(self) -> dict[str, object]:
        """Serialize using the stored (camelCase) attribute names."""
        return self.model_dump(by_alias=True)
