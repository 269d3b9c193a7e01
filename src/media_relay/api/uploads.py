"""Image upload and latest-image endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import PlainTextResponse

from media_relay.api.schemas import ImageResponse

if TYPE_CHECKING:
    from media_relay.containers import AppContainer

router = APIRouter(tags=["images"])

UPLOAD_CONFIRMATION = "Image uploaded and saved successfully!"


@router.post("/upload", response_class=PlainTextResponse)
async def upload_image(
    request: Request, image: UploadFile | None = File(default=None)
) -> PlainTextResponse:
    """Store an uploaded image and notify connected clients."""
    container: AppContainer = request.app.state.container
    data = await image.read() if image is not None else None
    content_type = image.content_type if image is not None else None
    await container.upload_service.handle_upload(data, content_type)
    return PlainTextResponse(UPLOAD_CONFIRMATION)


@router.get("/latest-image")
async def latest_image(request: Request) -> dict[str, object]:
    """Return the most recently uploaded image."""
    container: AppContainer = request.app.state.container
    record = await container.upload_service.get_latest()
    return ImageResponse.from_record(record).model_dump(by_alias=True, mode="json")
