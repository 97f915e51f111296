"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from memory_generator.adapters.in_memory_profile_repository import (
    InMemoryProfileRepository,
)
from memory_generator.adapters.json_ar_session_repository import (
    JsonArSessionRepository,
)
from memory_generator.adapters.local_photo_storage import LocalPhotoStorage
from memory_generator.adapters.openai_image_client import OpenAIImageClient
from memory_generator.config import Settings
from memory_generator.services.ar_sessions import ArSessionService
from memory_generator.services.images import ImageService
from memory_generator.services.photos import PhotoService
from memory_generator.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photo_service: PhotoService
    profile_service: ProfileService
    ar_session_service: ArSessionService
    image_service: ImageService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    photo_service = PhotoService(
        storage=LocalPhotoStorage(
            directory=resolved_settings.uploads_dir,
            url_prefix=resolved_settings.uploads_url_prefix,
        ),
        max_photo_bytes=resolved_settings.max_photo_bytes,
        max_photos_per_request=resolved_settings.max_photos_per_request,
    )
    profile_service = ProfileService(
        repository=InMemoryProfileRepository(),
        photo_service=photo_service,
    )
    ar_session_service = ArSessionService(
        repository=JsonArSessionRepository(resolved_settings.ar_sessions_file),
        limit=resolved_settings.ar_sessions_limit,
    )
    image_client = (
        OpenAIImageClient.create(resolved_settings.openai_api_key)
        if resolved_settings.openai_api_key
        else None
    )
    image_service = ImageService(
        client=image_client,
        profile_service=profile_service,
        model=resolved_settings.openai_image_model,
        size=resolved_settings.openai_image_size,
        quality=resolved_settings.openai_image_quality,
    )

    async def close_resources() -> None:
        if image_client is not None:
            await image_client.close()

    return AppContainer(
        settings=resolved_settings,
        photo_service=photo_service,
        profile_service=profile_service,
        ar_session_service=ar_session_service,
        image_service=image_service,
        close_resources=close_resources,
    )
