"""Supabase Storage-backed object store."""

import mimetypes
from dataclasses import dataclass
from uuid import uuid4

from supabase import Client

from media_relay.domain.models import StoredObject
from media_relay.services.uploads import MediaStore

_DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class SupabaseMediaStore(MediaStore):
    """Uploads payloads to a public Supabase Storage bucket."""

    client: Client
    bucket: str

    def upload(self, data: bytes, content_type: str | None) -> StoredObject:
        """Upload bytes under a fresh object key and return its public URL."""
        resolved_type = content_type or _DEFAULT_CONTENT_TYPE
        storage_id = f"{uuid4().hex}{_extension_for(resolved_type)}"
        bucket = self.client.storage.from_(self.bucket)
        bucket.upload(
            storage_id,
            data,
            file_options={"content-type": resolved_type, "upsert": "false"},
        )
        return StoredObject(url=bucket.get_public_url(storage_id), storage_id=storage_id)


def _extension_for(content_type: str) -> str:
    if content_type == _DEFAULT_CONTENT_TYPE:
        return ""
    return mimetypes.guess_extension(content_type) or ""
