"""Abstract contract for photo metadata persistence."""

from abc import ABC, abstractmethod
from typing import Any

Metadata = dict[str, Any]


class PhotoMetadataRepository(ABC):
    """Contract for storing and retrieving photo metadata documents.

    Implementations could be DynamoDB, Firestore, MongoDB, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def create_metadata(self, *, metadata: Metadata) -> None:
        """Create the metadata document for a photo.

        Args:
            metadata: Photo metadata dict keyed by stored attribute names,
                      must contain a non-empty ``id``

        Raises:
            MetadataStoreError: If creation fails or the id already exists
        """

    @abstractmethod
    def fetch_metadata(self, *, photo_id: str) -> Metadata | None:
        """Fetch the metadata document of a single photo.

        Args:
            photo_id: Unique photo identifier

        Returns:
            Metadata dict or None if not found

        Raises:
            MetadataStoreError: If fetch fails
        """
