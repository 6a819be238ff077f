from fastapi import APIRouter, HTTPException, status
from loguru import logger

from agents.coloring_page_agent.dependencies import ImageGenerationAgentDependency
from agents.coloring_page_agent.errors import GenerationError, PromptValidationError
from agents.coloring_page_agent.utils import build_share_filename, to_data_uri
from routes.schemas.request.coloring_page import GenerateColoringPageRequest
from routes.schemas.response.coloring_page import GenerateColoringPageResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health() -> HealthResponse:
    return HealthResponse()


@router.post("/coloring-pages", response_model=GenerateColoringPageResponse, status_code=status.HTTP_200_OK)
async def generate_coloring_page(
        request: GenerateColoringPageRequest,
        image_generation_agent: ImageGenerationAgentDependency
) -> GenerateColoringPageResponse:
    """Generate a coloring page from a text description."""
    logger.info("generate_coloring_page called")

    prompt = request.prompt.strip()
    if not prompt:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PromptValidationError().message)

    try:
        image_b64 = await image_generation_agent.generate_image(prompt)
    except GenerationError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.display_message)

    return GenerateColoringPageResponse(
        prompt=request.prompt,
        image_base64=image_b64,
        image_src=to_data_uri(image_b64),
        filename=build_share_filename(request.prompt)
    )
