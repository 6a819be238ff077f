"""Tests for the Imagen-backed image generation client."""

from __future__ import annotations

import asyncio
import base64
from importlib.metadata import version
from unittest.mock import MagicMock

import pytest
from google.genai import errors

from agents.coloring_page_agent.errors import GenerationError
from agents.coloring_page_agent.image_generation_agent import ImageGenerationAgent
from agents.coloring_page_agent.schemas import Succeeded
from agents.coloring_page_agent.services.coloring_page_controller import ColoringPageController
from tests.conftest import make_images_response


@pytest.mark.asyncio
async def test_returns_base64_payload(image_generation_agent: ImageGenerationAgent) -> None:
    result = await image_generation_agent.generate_image("a red fox")

    assert base64.b64decode(result) == b"\x89PNG"


@pytest.mark.asyncio
async def test_sends_single_png_request(
    image_generation_agent: ImageGenerationAgent, genai_client: MagicMock
) -> None:
    await image_generation_agent.generate_image("a red fox")

    genai_client.models.generate_images.assert_called_once()
    kwargs = genai_client.models.generate_images.call_args.kwargs
    assert kwargs["model"] == "imagen-test"
    assert "a red fox" in kwargs["prompt"]
    assert "coloring page" in kwargs["prompt"]
    assert kwargs["config"].number_of_images == 1
    assert kwargs["config"].output_mime_type == "image/png"


@pytest.mark.asyncio
async def test_service_rejection_carries_description(
    image_generation_agent: ImageGenerationAgent, genai_client: MagicMock
) -> None:
    genai_client.models.generate_images.side_effect = errors.ClientError(
        429, {"error": {"code": 429, "message": "quota exceeded", "status": "RESOURCE_EXHAUSTED"}}
    )

    with pytest.raises(GenerationError) as exc_info:
        await image_generation_agent.generate_image("a red fox")

    assert exc_info.value.display_message == "quota exceeded"
    assert genai_client.models.generate_images.call_count == 1


@pytest.mark.asyncio
async def test_unreachable_service_raises_generation_error(
    image_generation_agent: ImageGenerationAgent, genai_client: MagicMock
) -> None:
    genai_client.models.generate_images.side_effect = ConnectionError("network is unreachable")

    with pytest.raises(GenerationError, match="network is unreachable"):
        await image_generation_agent.generate_image("a red fox")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [make_images_response(), make_images_response(None), make_images_response(b"")],
    ids=["no-images", "missing-bytes", "empty-bytes"],
)
async def test_empty_response_raises_generation_error(
    image_generation_agent: ImageGenerationAgent, genai_client: MagicMock, response
) -> None:
    genai_client.models.generate_images.return_value = response

    with pytest.raises(GenerationError) as exc_info:
        await image_generation_agent.generate_image("a red fox")

    assert exc_info.value.description


def test_generation_error_without_description_falls_back() -> None:
    assert GenerationError().display_message == "An unexpected error occurred."


def test_generates_again_on_a_fresh_event_loop(
    image_generation_agent: ImageGenerationAgent, genai_client: MagicMock
) -> None:
    genai_client.models.generate_images.side_effect = [
        make_images_response(b"first"),
        make_images_response(b"second"),
    ]
    controller = ColoringPageController(image_generation_agent, MagicMock())
    controller.set_prompt("a red fox")

    first = asyncio.run(controller.submit())
    second = asyncio.run(controller.submit())

    assert first == Succeeded(image=base64.b64encode(b"first").decode("ascii"))
    assert second == Succeeded(image=base64.b64encode(b"second").decode("ascii"))
    genai_client.aio.models.generate_images.assert_not_called()


def test_sdk_supports_api_key_image_generation() -> None:
    major = int(version("google-genai").split(".")[0])

    assert major == 1
