"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from media_relay.adapters.passlib_hasher import BcryptPasswordHasher
from media_relay.adapters.supabase_image_repository import SupabaseImageRepository
from media_relay.adapters.supabase_media_store import SupabaseMediaStore
from media_relay.adapters.supabase_user_repository import SupabaseUserRepository
from media_relay.adapters.websocket_hub import WebSocketHub
from media_relay.config import Settings
from media_relay.services.uploads import UploadService
from media_relay.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notification_hub: WebSocketHub
    upload_service: UploadService
    user_service: UserService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    notification_hub = WebSocketHub(
        send_timeout=resolved_settings.notification_send_timeout_seconds
    )
    upload_service = UploadService(
        media_store=SupabaseMediaStore(
            client=supabase_client, bucket=resolved_settings.storage_bucket
        ),
        image_repository=SupabaseImageRepository(supabase_client),
        notifier=notification_hub,
        upload_timeout=resolved_settings.upload_timeout_seconds,
        database_timeout=resolved_settings.database_timeout_seconds,
    )
    user_service = UserService(
        repository=SupabaseUserRepository(supabase_client),
        hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        database_timeout=resolved_settings.database_timeout_seconds,
    )

    async def close_resources() -> None:
        await upload_service.drain()
        await notification_hub.close()

    return AppContainer(
        settings=resolved_settings,
        notification_hub=notification_hub,
        upload_service=upload_service,
        user_service=user_service,
        close_resources=close_resources,
    )
