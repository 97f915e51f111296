"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest
from openai import AsyncOpenAI

from memory_generator.adapters.openai_image_client import OpenAIImageClient
from memory_generator.errors import UpstreamError


class _FakeImages:
    def __init__(self) -> None:
        self.last_payload: dict[str, object] | None = None

    async def generate(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        image = type(
            "Image", (), {"url": "https://img.test/1.png", "revised_prompt": "rev"}
        )()
        return type("Resp", (), {"data": [image]})()


class _FakeOpenAI:
    def __init__(self) -> None:
        self.images = _FakeImages()


def _openai_client(handler) -> AsyncOpenAI:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return AsyncOpenAI(
        api_key="key",
        max_retries=0,
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_openai_image_client_requests_single_square_image() -> None:
    fake = _FakeOpenAI()
    client = OpenAIImageClient(client=fake)

    result = asyncio.run(
        client.generate(
            model="dall-e-3", prompt="a lake", size="1024x1024", quality="standard"
        )
    )

    assert result == {"url": "https://img.test/1.png", "revised_prompt": "rev"}
    assert fake.images.last_payload == {
        "model": "dall-e-3",
        "prompt": "a lake",
        "n": 1,
        "size": "1024x1024",
        "quality": "standard",
    }


def test_openai_image_client_over_http() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/images/generations")
        seen.append(json.loads(request.content.decode()))
        return httpx.Response(
            200,
            json={
                "created": 1700000000,
                "data": [{"url": "https://img.test/2.png", "revised_prompt": "r"}],
            },
        )

    client = OpenAIImageClient(client=_openai_client(handler))

    result = asyncio.run(
        client.generate(
            model="dall-e-3", prompt="a lake", size="1024x1024", quality="standard"
        )
    )

    assert result["url"] == "https://img.test/2.png"
    assert len(seen) == 1
    assert seen[0]["n"] == 1


def test_openai_image_client_passes_upstream_error_through() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(
            400,
            json={
                "error": {
                    "message": "Your request was rejected by the safety system.",
                    "type": "invalid_request_error",
                }
            },
        )

    client = OpenAIImageClient(client=_openai_client(handler))

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(
            client.generate(
                model="dall-e-3", prompt="x", size="1024x1024", quality="standard"
            )
        )

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Your request was rejected by the safety system."
    assert len(calls) == 1


def test_openai_image_client_falls_back_to_generic_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="upstream down")

    client = OpenAIImageClient(client=_openai_client(handler))

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(
            client.generate(
                model="dall-e-3", prompt="x", size="1024x1024", quality="standard"
            )
        )

    assert excinfo.value.status_code == 503
    assert excinfo.value.message == "Failed to generate image"
