"""Supabase-backed image record repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from media_relay.domain.models import ImageRecord
from media_relay.services.uploads import ImageRepository

_COLUMNS = "image_url, storage_id, created_at"


@dataclass
class SupabaseImageRepository(ImageRepository):
    """Supabase implementation for image record persistence."""

    client: Client

    def create_image(self, image_url: str, storage_id: str) -> ImageRecord:
        """Insert an image row and return it."""
        response = (
            self.client.table("images")
            .insert({"image_url": image_url, "storage_id": storage_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create image record in Supabase")
        return _to_record(response.data[0])

    def get_latest_image(self) -> ImageRecord | None:
        """Return the newest image row by creation time."""
        response = (
            self.client.table("images")
            .select(_COLUMNS)
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])


def _to_record(row: dict[str, object]) -> ImageRecord:
    return ImageRecord(
        image_url=str(row["image_url"]),
        storage_id=str(row["storage_id"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
