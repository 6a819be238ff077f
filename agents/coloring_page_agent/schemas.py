"""Schemas for Coloring Page Agent."""

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Idle(BaseModel):
    """Nothing generated yet."""
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A generation request is in flight."""
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Succeeded(BaseModel):
    """The last generation produced an image."""
    model_config = ConfigDict(frozen=True)

    status: Literal["succeeded"] = "succeeded"
    image: str = Field(..., description="Base64-encoded PNG payload")


class Failed(BaseModel):
    """The last submission failed."""
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    error_message: str


GenerationState = Annotated[Union[Idle, Loading, Succeeded, Failed], Field(discriminator="status")]


class SharedFile(BaseModel):
    """A named binary file handed to a share provider."""
    model_config = ConfigDict(frozen=True)

    filename: str
    mime_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


class ShareData(BaseModel):
    """Payload passed to a share provider."""
    title: str
    text: str
    files: List[SharedFile] = Field(default_factory=list)
