"""Loved-one profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Form, Request, UploadFile

from memory_generator.domain.profiles import PhotoUpload, Profile

if TYPE_CHECKING:
    from memory_generator.containers import AppContainer
    from memory_generator.services.photos import PhotoService

router = APIRouter(prefix="/api/loved-ones", tags=["loved-ones"])


@router.post("")
async def create_loved_one(
    request: Request,
    name: str | None = Form(default=None),
    description: str | None = Form(default=None),
    relationship: str | None = Form(default=None),
    photos: list[UploadFile] | None = File(default=None),
) -> dict[str, object]:
    """Create a profile from a multipart form with at least one photo."""
    container: AppContainer = request.app.state.container
    container.profile_service.validate_fields(name, description)
    uploads = await read_uploads(container.photo_service, photos or [])
    profile = container.profile_service.create_with_uploads(
        name=name,
        description=description,
        relationship=relationship,
        uploads=uploads,
    )
    return {"success": True, "lovedOne": profile_payload(profile)}


@router.get("")
async def list_loved_ones(request: Request) -> dict[str, object]:
    """Return every stored profile."""
    container: AppContainer = request.app.state.container
    profiles = container.profile_service.list_profiles()
    return {
        "success": True,
        "lovedOnes": [profile_payload(profile) for profile in profiles],
    }


@router.get("/{profile_id}")
async def get_loved_one(profile_id: str, request: Request) -> dict[str, object]:
    """Return a single profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get(profile_id)
    return {"success": True, "lovedOne": profile_payload(profile)}


@router.delete("/{profile_id}")
async def delete_loved_one(profile_id: str, request: Request) -> dict[str, object]:
    """Delete a profile and its photos."""
    container: AppContainer = request.app.state.container
    container.profile_service.delete(profile_id)
    return {"success": True, "message": "Loved one profile deleted"}


async def read_uploads(
    photo_service: PhotoService, photos: list[UploadFile]
) -> list[PhotoUpload]:
    """Read multipart files, enforcing count and size limits before buffering."""
    photo_service.check_count(len(photos))
    limit = photo_service.max_photo_bytes
    uploads: list[PhotoUpload] = []
    for photo in photos:
        filename = photo.filename or ""
        photo_service.check_type(filename, photo.content_type)
        if photo.size is not None:
            photo_service.check_size(photo.size)
        content = await photo.read(limit + 1)
        photo_service.check_size(len(content))
        uploads.append(
            PhotoUpload(
                filename=filename,
                content_type=photo.content_type or "",
                content=content,
            )
        )
    return uploads


def profile_payload(profile: Profile) -> dict[str, object]:
    """Serialize a profile with the field names clients expect."""
    return {
        "id": profile.id,
        "name": profile.name,
        "description": profile.description,
        "relationship": profile.relationship,
        "photos": list(profile.photos),
        "createdAt": profile.created_at,
    }
