"""Models for generated memory images."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedImage:
    """Result of a single image-generation request."""

    image_url: str
    revised_prompt: str | None = None
    loved_one_name: str | None = None
