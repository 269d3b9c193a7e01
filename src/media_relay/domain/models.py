"""Domain models for the media relay."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class StoredObject:
    """Reference to a payload stored in the object store."""

    url: str
    storage_id: str


@dataclass(frozen=True)
class ImageRecord:
    """Represents an uploaded image persisted in the database."""

    image_url: str
    storage_id: str
    created_at: datetime


@dataclass(frozen=True)
class UploadEvent:
    """Transient notification sent to connected clients after an upload."""

    image_url: str
    storage_id: str

    def to_payload(self) -> dict[str, str]:
        """Return the wire payload for the newImage event."""
        return {"imageUrl": self.image_url, "publicId": self.storage_id}


@dataclass(frozen=True)
class UserAccount:
    """Represents a registered user stored in the database."""

    id: UUID
    email: str
    password_hash: str
    full_name: str
