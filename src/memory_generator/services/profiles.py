"""Loved-one profile lifecycle."""

import logging
from dataclasses import dataclass
from typing import Protocol

from memory_generator.domain.models import utc_timestamp
from memory_generator.domain.profiles import PhotoUpload, Profile
from memory_generator.errors import NotFoundError, ValidationError
from memory_generator.services.photos import PhotoService

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for loved-one profiles."""

    def create_profile(
        self,
        name: str,
        description: str,
        relationship: str,
        photos: list[str],
        created_at: str,
    ) -> Profile:
        """Allocate an id, store the profile and return it."""

    def get_profile(self, profile_id: str) -> Profile | None:
        """Return a profile by id, if present."""

    def list_profiles(self) -> list[Profile]:
        """Return every stored profile in insertion order."""

    def delete_profile(self, profile_id: str) -> Profile | None:
        """Remove a profile and return it, if present."""


@dataclass
class ProfileService:
    """Application service owning profiles and their photo files."""

    repository: ProfileRepository
    photo_service: PhotoService

    def create(
        self,
        name: str | None,
        description: str | None,
        relationship: str | None,
        photo_paths: list[str],
    ) -> Profile:
        """Create a profile for photos that are already stored."""
        _require_fields(name, description)
        if not photo_paths:
            raise ValidationError("At least one photo is required")
        profile = self.repository.create_profile(
            name=name,
            description=description,
            relationship=relationship or "",
            photos=list(photo_paths),
            created_at=utc_timestamp(),
        )
        _logger.info("Created loved one profile: %s (%s)", profile.name, profile.id)
        return profile

    def create_with_uploads(
        self,
        name: str | None,
        description: str | None,
        relationship: str | None,
        uploads: list[PhotoUpload],
    ) -> Profile:
        """Validate input, store the uploaded photos and create the profile."""
        self.validate_fields(name, description)
        if not uploads:
            raise ValidationError("At least one photo is required")
        photo_paths = self.photo_service.save_all(uploads)
        try:
            return self.create(name, description, relationship, photo_paths)
        except Exception:
            self.photo_service.delete_all(photo_paths)
            raise

    def validate_fields(self, name: str | None, description: str | None) -> None:
        """Raise ValidationError unless name and description have content."""
        _require_fields(name, description)

    def get(self, profile_id: str) -> Profile:
        """Return a profile or raise NotFoundError."""
        profile = self.repository.get_profile(profile_id)
        if profile is None:
            raise NotFoundError("Loved one not found")
        return profile

    def list_profiles(self) -> list[Profile]:
        """Return all profiles."""
        return self.repository.list_profiles()

    def delete(self, profile_id: str) -> None:
        """Delete a profile together with its photo files."""
        profile = self.get(profile_id)
        self.photo_service.delete_all(profile.photos)
        self.repository.delete_profile(profile_id)
        _logger.info("Deleted loved one profile: %s (%s)", profile.name, profile.id)


def _require_fields(name: str | None, description: str | None) -> None:
    """Treat blank or whitespace-only values as missing."""
    if not (name or "").strip() or not (description or "").strip():
        raise ValidationError("Name and description are required")
