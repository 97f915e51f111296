"""Memory image generation endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from memory_generator.api.models import GenerateRequest, GenerateWithLovedOneRequest

if TYPE_CHECKING:
    from memory_generator.containers import AppContainer

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/generate")
async def generate(body: GenerateRequest, request: Request) -> dict[str, object]:
    """Generate a stylized image from a free-text prompt."""
    container: AppContainer = request.app.state.container
    image = await container.image_service.generate(body.prompt)
    return {
        "success": True,
        "imageUrl": image.image_url,
        "revisedPrompt": image.revised_prompt,
    }


@router.post("/generate-with-loved-one")
async def generate_with_loved_one(
    body: GenerateWithLovedOneRequest, request: Request
) -> dict[str, object]:
    """Generate a stylized image that includes a stored loved one."""
    container: AppContainer = request.app.state.container
    image = await container.image_service.generate_with_profile(
        body.prompt, body.loved_one_id
    )
    return {
        "success": True,
        "imageUrl": image.image_url,
        "revisedPrompt": image.revised_prompt,
        "lovedOneName": image.loved_one_name,
    }
