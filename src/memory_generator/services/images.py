"""Prompt building and forwarding to the image-generation API."""

import logging
from dataclasses import dataclass
from typing import Protocol

from memory_generator.domain.images import GeneratedImage
from memory_generator.domain.profiles import Profile
from memory_generator.errors import ConfigurationError, ValidationError
from memory_generator.services.profiles import ProfileService

STYLE_SUFFIX = (
    "vintage dreamlike polaroid photograph with surreal, ethereal qualities, "
    "soft focus, nostalgic muted tones, and a touch of the uncanny"
)

_logger = logging.getLogger(__name__)


class ImageGenerationClient(Protocol):
    """Interface for the external image-generation API."""

    async def generate(
        self, *, model: str, prompt: str, size: str, quality: str
    ) -> dict[str, str | None]:
        """Request one image and return its url and revised prompt."""


@dataclass
class ImageService:
    """Builds final prompts and relays them to the generation client."""

    client: ImageGenerationClient | None
    profile_service: ProfileService
    model: str = "dall-e-3"
    size: str = "1024x1024"
    quality: str = "standard"

    async def generate(self, prompt: str | None) -> GeneratedImage:
        """Generate an image for a free-text prompt."""
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt is required")
        client = self._require_client(
            "OpenAI API key not configured on server. "
            "Please set OPENAI_API_KEY environment variable."
        )
        styled_prompt = build_styled_prompt(prompt)
        _logger.info("Generating image for prompt: %s", styled_prompt)
        return await self._request(client, styled_prompt)

    async def generate_with_profile(
        self, prompt: str | None, profile_id: str | None
    ) -> GeneratedImage:
        """Generate an image whose prompt is enriched with a loved one's profile."""
        if not prompt or not prompt.strip() or not profile_id:
            raise ValidationError("Prompt and lovedOneId are required")
        profile = self.profile_service.get(profile_id)
        client = self._require_client("OpenAI API key not configured on server")
        enhanced_prompt = build_profile_prompt(prompt, profile)
        _logger.info("Generating memory with loved one: %s", profile.name)
        _logger.info("Enhanced prompt: %s", enhanced_prompt)
        image = await self._request(client, enhanced_prompt)
        return GeneratedImage(
            image_url=image.image_url,
            revised_prompt=image.revised_prompt,
            loved_one_name=profile.name,
        )

    def _require_client(self, message: str) -> ImageGenerationClient:
        if self.client is None:
            raise ConfigurationError(message)
        return self.client

    async def _request(
        self, client: ImageGenerationClient, prompt: str
    ) -> GeneratedImage:
        raw = await client.generate(
            model=self.model, prompt=prompt, size=self.size, quality=self.quality
        )
        image_url = raw.get("url")
        if not image_url:
            raise RuntimeError("Image generation returned no image URL")
        return GeneratedImage(
            image_url=image_url, revised_prompt=raw.get("revised_prompt")
        )


def build_styled_prompt(prompt: str) -> str:
    """Append the polaroid style to a free-text prompt."""
    return f"{prompt}, as a {STYLE_SUFFIX}"


def build_profile_prompt(prompt: str, profile: Profile) -> str:
    """Describe the loved one inside the scene and append the style."""
    parts = [f"{prompt}. The scene includes {profile.name}, {profile.description}."]
    if profile.relationship:
        parts.append(f"They were my {profile.relationship}.")
    parts.append(f"Create this as a {STYLE_SUFFIX}.")
    return " ".join(parts)
