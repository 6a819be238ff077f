from typing import Annotated

from fastapi import Depends

from agents.coloring_page_agent.image_generation_agent import ImageGenerationAgent
from agents.coloring_page_agent.services.coloring_page_controller import ColoringPageController
from agents.coloring_page_agent.share_providers import ShareProvider, get_share_provider
from config.settings import get_settings


# =============================================================================
# AGENT DEPENDENCIES
# =============================================================================
def get_image_generation_agent() -> ImageGenerationAgent:
    """Provide a configured ImageGenerationAgent instance."""
    return ImageGenerationAgent()


def get_configured_share_provider() -> ShareProvider:
    """Provide the share provider selected in settings."""
    return get_share_provider(get_settings())


# =============================================================================
# CONTROLLER
# =============================================================================

def build_coloring_page_controller() -> ColoringPageController:
    """Provide a controller wired to the configured agent and share provider."""
    return ColoringPageController(get_image_generation_agent(), get_configured_share_provider())


# =============================================================================
# TYPE ALIASES FOR DEPENDENCY INJECTION
# =============================================================================

ImageGenerationAgentDependency = Annotated[ImageGenerationAgent, Depends(get_image_generation_agent)]
