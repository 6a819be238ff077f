from pydantic import BaseModel, Field


class GenerateColoringPageRequest(BaseModel):
    """Request to generate a coloring page."""
    prompt: str = Field(..., description="Description of the coloring page")
