"""OpenAI Images API client for memory generation."""

import logging
from dataclasses import dataclass

from openai import APIStatusError, AsyncOpenAI

from memory_generator.errors import UpstreamError
from memory_generator.services.images import ImageGenerationClient

_logger = logging.getLogger(__name__)


@dataclass
class OpenAIImageClient(ImageGenerationClient):
    """Image client backed by the OpenAI Images API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIImageClient":
        """Create an image client that issues a single attempt per request."""
        return cls(client=AsyncOpenAI(api_key=api_key, max_retries=0))

    async def generate(
        self, *, model: str, prompt: str, size: str, quality: str
    ) -> dict[str, str | None]:
        """Request one image and translate upstream failures."""
        try:
            response = await self.client.images.generate(
                model=model, prompt=prompt, n=1, size=size, quality=quality
            )
        except APIStatusError as exc:
            _logger.error("OpenAI API error (%s): %s", exc.status_code, exc.body)
            raise UpstreamError(exc.status_code, _error_message(exc)) from exc
        if not response.data:
            raise RuntimeError("OpenAI returned no image data")
        image = response.data[0]
        return {"url": image.url, "revised_prompt": image.revised_prompt}

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()


def _error_message(exc: APIStatusError) -> str:
    """Return the upstream error message, or a generic fallback."""
    body = exc.body
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return "Failed to generate image"
