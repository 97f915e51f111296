"""Domain models for loved-one profiles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Represents a loved one and the photos uploaded for them."""

    id: str
    name: str
    description: str
    relationship: str
    photos: tuple[str, ...]
    created_at: str


@dataclass(frozen=True)
class PhotoUpload:
    """Raw photo payload received from a multipart request."""

    filename: str
    content_type: str
    content: bytes
