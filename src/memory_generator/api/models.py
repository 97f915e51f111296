"""Pydantic models for JSON request bodies."""

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Body of a plain image-generation request."""

    prompt: str | None = None


class GenerateWithLovedOneRequest(BaseModel):
    """Body of a profile-enriched image-generation request."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    prompt: str | None = None
    loved_one_id: str | None = Field(default=None, alias="lovedOneId")
