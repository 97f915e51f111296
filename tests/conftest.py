"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from memory_generator.adapters.in_memory_profile_repository import (
    InMemoryProfileRepository,
)
from memory_generator.adapters.json_ar_session_repository import (
    JsonArSessionRepository,
)
from memory_generator.adapters.local_photo_storage import LocalPhotoStorage
from memory_generator.config import Settings
from memory_generator.containers import AppContainer
from memory_generator.domain.profiles import PhotoUpload
from memory_generator.services.ar_sessions import ArSessionRepository, ArSessionService
from memory_generator.services.images import ImageGenerationClient, ImageService
from memory_generator.services.photos import PhotoService
from memory_generator.services.profiles import ProfileService

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-bytes"


def jpeg_upload(filename: str = "mom.jpg", content: bytes = JPEG_BYTES) -> PhotoUpload:
    return PhotoUpload(filename=filename, content_type="image/jpeg", content=content)


@dataclass
class FakeImageClient(ImageGenerationClient):
    """Fake image client that records prompts."""

    url: str = "https://images.test/memory.png"
    revised_prompt: str | None = "a revised prompt"
    error: Exception | None = None
    calls: list[dict[str, str]] = field(default_factory=list)

    async def generate(
        self, *, model: str, prompt: str, size: str, quality: str
    ) -> dict[str, str | None]:
        self.calls.append(
            {"model": model, "prompt": prompt, "size": size, "quality": quality}
        )
        if self.error is not None:
            raise self.error
        return {"url": self.url, "revised_prompt": self.revised_prompt}


@dataclass
class InMemoryArSessionRepository(ArSessionRepository):
    """In-memory AR session repository for tests."""

    sessions: list[dict[str, object]] = field(default_factory=list)
    initialized: bool = False
    save_error: Exception | None = None

    def initialize(self) -> None:
        self.initialized = True

    def load_sessions(self) -> list[dict[str, object]]:
        return list(self.sessions)

    def save_sessions(self, sessions: list[dict[str, object]]) -> None:
        if self.save_error is not None:
            raise self.save_error
        self.sessions = list(sessions)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        uploads_dir=tmp_path / "uploads",
        ar_sessions_file=tmp_path / "ar-sessions" / "sessions.json",
        public_dir=tmp_path / "public",
    )


@pytest.fixture
def image_client() -> FakeImageClient:
    return FakeImageClient()


@pytest.fixture
def photo_service(settings: Settings) -> PhotoService:
    return PhotoService(
        storage=LocalPhotoStorage(directory=settings.uploads_dir),
        max_photo_bytes=settings.max_photo_bytes,
        max_photos_per_request=settings.max_photos_per_request,
    )


@pytest.fixture
def profile_service(photo_service: PhotoService) -> ProfileService:
    return ProfileService(
        repository=InMemoryProfileRepository(), photo_service=photo_service
    )


@pytest.fixture
def container(
    settings: Settings,
    image_client: FakeImageClient,
    photo_service: PhotoService,
    profile_service: ProfileService,
) -> AppContainer:
    ar_session_service = ArSessionService(
        repository=JsonArSessionRepository(settings.ar_sessions_file),
        limit=settings.ar_sessions_limit,
    )
    image_service = ImageService(
        client=image_client,
        profile_service=profile_service,
        model=settings.openai_image_model,
        size=settings.openai_image_size,
        quality=settings.openai_image_quality,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        photo_service=photo_service,
        profile_service=profile_service,
        ar_session_service=ar_session_service,
        image_service=image_service,
        close_resources=close_resources,
    )
