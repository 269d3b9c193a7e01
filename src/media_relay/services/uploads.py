"""Upload orchestration: store, persist, then notify."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from media_relay.domain.errors import (
    MediaRelayError,
    NotFound,
    UpstreamStorageError,
    UpstreamTimeout,
    ValidationError,
)
from media_relay.domain.models import ImageRecord, StoredObject, UploadEvent
from media_relay.services.upstream import call_upstream

logger = logging.getLogger(__name__)

NEW_IMAGE_EVENT = "newImage"


class MediaStore(Protocol):
    """Interface for the remote object store."""

    def upload(self, data: bytes, content_type: str | None) -> StoredObject:
        """Store the payload and return its reference."""


class ImageRepository(Protocol):
    """Persistence interface for image records."""

    def create_image(self, image_url: str, storage_id: str) -> ImageRecord:
        """Insert an image record and return it."""

    def get_latest_image(self) -> ImageRecord | None:
        """Return the most recently created image record, if any."""


class NotificationChannel(Protocol):
    """Broadcast interface for connected real-time clients."""

    async def broadcast(self, event: str, payload: dict[str, str]) -> None:
        """Send an event to every connected subscriber."""


@dataclass
class UploadService:
    """Coordinates the upload-and-notify flow."""

    media_store: MediaStore
    image_repository: ImageRepository
    notifier: NotificationChannel
    upload_timeout: float = 30.0
    database_timeout: float = 10.0
    _pending: set[asyncio.Task[None]] = field(
        default_factory=set, init=False, repr=False
    )

    async def handle_upload(
        self, data: bytes | None, content_type: str | None = None
    ) -> ImageRecord:
        """Upload the payload, persist its record and schedule the broadcast.

        The record is only written after the object store confirms the
        upload. The broadcast runs in the background and does not delay the
        caller.
        """
        if not data:
            raise ValidationError("No file uploaded")

        try:
            stored = await call_upstream(
                self.media_store.upload,
                data,
                content_type,
                timeout=self.upload_timeout,
                error_type=UpstreamStorageError,
            )
        except UpstreamTimeout:
            # The worker thread keeps running, so the object may still land.
            logger.warning(
                "Storage upload timed out after %ss; object may be written later",
                self.upload_timeout,
                extra={"size": len(data)},
            )
            raise
        logger.info(
            "Stored uploaded image",
            extra={"storage_id": stored.storage_id, "size": len(data)},
        )

        try:
            record = await call_upstream(
                self.image_repository.create_image,
                stored.url,
                stored.storage_id,
                timeout=self.database_timeout,
            )
        except MediaRelayError:
            logger.exception(
                "Failed to persist image record; orphaned storage object %s",
                stored.storage_id,
                extra={"storage_id": stored.storage_id, "image_url": stored.url},
            )
            raise

        self._schedule_broadcast(
            UploadEvent(image_url=record.image_url, storage_id=record.storage_id)
        )
        return record

    async def get_latest(self) -> ImageRecord:
        """Return the most recently persisted image record."""
        record = await call_upstream(
            self.image_repository.get_latest_image,
            timeout=self.database_timeout,
        )
        if record is None:
            raise NotFound("No images found")
        return record

    async def drain(self) -> None:
        """Wait for in-flight broadcasts to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def _schedule_broadcast(self, event: UploadEvent) -> None:
        task = asyncio.create_task(self._broadcast(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _broadcast(self, event: UploadEvent) -> None:
        try:
            await self.notifier.broadcast(NEW_IMAGE_EVENT, event.to_payload())
        except Exception:
            logger.exception(
                "Broadcast of upload event failed",
                extra={"storage_id": event.storage_id},
            )
