"""Image Generation Agent for creating printable coloring pages using Google Imagen."""

import asyncio
import base64
from typing import Optional

from google import genai
from google.genai import errors
from google.genai.types import GenerateImagesConfig
from loguru import logger

from agents.coloring_page_agent.errors import GenerationError
from agents.coloring_page_agent.prompt_templates.v1.coloring_page_agent import build_coloring_page_prompt
from agents.coloring_page_agent.utils import PNG_MIME_TYPE
from config.settings import get_settings


class ImageGenerationAgent:
    """Agent for generating coloring page images using Google Imagen via Gemini API."""

    def __init__(self, model: Optional[str] = None, client: Optional[genai.Client] = None):
        """
        Initialize the Image Generation Agent.

        Args:
            model: Google image model (defaults to GOOGLE_IMAGE_MODEL from settings)
            client: Pre-built GenAI client (defaults to one keyed with GOOGLE_API_KEY)
        """
        self.settings = get_settings()
        self.model = model or self.settings.GOOGLE_IMAGE_MODEL
        self.aspect_ratio = self.settings.IMAGE_ASPECT_RATIO

        self.client = client or genai.Client(api_key=self.settings.GOOGLE_API_KEY)

        logger.info(f"Initialized ImageGenerationAgent with model: {self.model}")

    async def generate_image(self, prompt: str) -> str:
        """
        Generate a coloring page for a prompt.

        The caller validates the prompt; a single attempt is made. The blocking
        SDK call runs in a worker thread so the client is not bound to one event loop.

        Args:
            prompt: Trimmed, non-empty description of the page

        Returns:
            Base64-encoded PNG payload

        Raises:
            GenerationError: If the service is unreachable, rejects the prompt or returns no image
        """
        logger.info(f"Generating coloring page for prompt: {prompt!r}")

        try:
            resp = await asyncio.to_thread(
                self.client.models.generate_images,
                model=self.model,
                prompt=build_coloring_page_prompt(prompt),
                config=GenerateImagesConfig(
                    number_of_images=1,
                    aspect_ratio=self.aspect_ratio,
                    output_mime_type=PNG_MIME_TYPE
                ),
            )
        except errors.APIError as e:
            logger.error(f"Image service rejected the request ({e.code}): {e.message}")
            raise GenerationError(e.message or str(e) or None) from e
        except Exception as e:
            logger.error(f"Error generating image: {e}")
            raise GenerationError(str(e) or None) from e

        if not resp or not resp.generated_images:
            raise GenerationError("No image was generated. Try a different description.")

        image = resp.generated_images[0].image
        image_bytes = image.image_bytes if image else None
        if not image_bytes:
            raise GenerationError("The image service returned an empty image.")

        logger.info(f"Successfully generated image ({len(image_bytes)} bytes)")
        return base64.b64encode(image_bytes).decode("ascii")
