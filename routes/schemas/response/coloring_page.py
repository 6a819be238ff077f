from pydantic import BaseModel, Field


class GenerateColoringPageResponse(BaseModel):
    """Generated coloring page."""
    prompt: str = Field(..., description="Prompt the page was generated from")
    image_base64: str = Field(..., description="Base64-encoded PNG")
    image_src: str = Field(..., description="Data URI ready for an <img> tag")
    filename: str = Field(..., description="Suggested filename for saving or sharing")


class HealthResponse(BaseModel):
    status: str = "ok"
