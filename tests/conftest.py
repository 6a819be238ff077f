"""Shared pytest fixtures for coloring page tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from agents.coloring_page_agent.image_generation_agent import ImageGenerationAgent
from agents.coloring_page_agent.schemas import ShareData
from agents.coloring_page_agent.services.coloring_page_controller import ColoringPageController
from agents.coloring_page_agent.share_providers import ShareProvider


def make_images_response(*payloads: bytes | None) -> SimpleNamespace:
    """Build an object shaped like a google-genai GenerateImagesResponse."""
    return SimpleNamespace(
        generated_images=[
            SimpleNamespace(image=SimpleNamespace(image_bytes=payload))
            for payload in payloads
        ]
    )


class RecordingShareProvider(ShareProvider):
    """Share provider that records every payload it receives."""

    name = "recording"

    def __init__(self, available: bool = True, supports_files: bool = True, error: Exception | None = None):
        self.available = available
        self.supports_files = supports_files
        self.error = error
        self.shared: list[ShareData] = []

    async def share(self, data: ShareData) -> None:
        if self.error is not None:
            raise self.error
        self.shared.append(data)


# ============================================================================
# Generation client fixtures
# ============================================================================


@pytest.fixture
def genai_client() -> MagicMock:
    """GenAI client double exposing the blocking `models.generate_images`."""
    client = MagicMock()
    client.models.generate_images.return_value = make_images_response(b"\x89PNG")
    client.aio.models.generate_images = AsyncMock(side_effect=AssertionError("async client must not be used"))
    return client


@pytest.fixture
def image_generation_agent(genai_client: MagicMock) -> ImageGenerationAgent:
    return ImageGenerationAgent(model="imagen-test", client=genai_client)


@pytest.fixture
def stub_agent() -> MagicMock:
    """Generation client double returning the payload "AAAA"."""
    agent = MagicMock(spec=ImageGenerationAgent)
    agent.generate_image = AsyncMock(return_value="AAAA")
    return agent


# ============================================================================
# Controller fixtures
# ============================================================================


@pytest.fixture
def share_provider() -> RecordingShareProvider:
    return RecordingShareProvider()


@pytest.fixture
def controller(stub_agent: MagicMock, share_provider: RecordingShareProvider) -> ColoringPageController:
    return ColoringPageController(stub_agent, share_provider)
