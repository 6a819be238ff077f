"""Exceptions raised by the Coloring Page Agent."""

from typing import Optional

EMPTY_PROMPT_MESSAGE = "Please enter a description for your coloring page."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
SHARE_UNSUPPORTED_MESSAGE = "Web Share API is not supported in this browser, or cannot share files."
SHARE_FAILED_MESSAGE = "Could not share the image."


class ColoringPageError(Exception):
    """Base class for coloring page errors."""


class PromptValidationError(ColoringPageError):
    """Raised when the prompt is empty or whitespace-only."""

    def __init__(self, message: str = EMPTY_PROMPT_MESSAGE):
        super().__init__(message)
        self.message = message


class GenerationError(ColoringPageError):
    """Raised when the image generation service fails to produce an image."""

    def __init__(self, description: Optional[str] = None):
        super().__init__(description or "")
        self.description = description

    @property
    def display_message(self) -> str:
        return self.description or UNEXPECTED_ERROR_MESSAGE


class ShareError(ColoringPageError):
    """Base class for share failures."""


class ShareUnsupportedError(ShareError):
    """Raised when no share capability is available for the given data."""

    def __init__(self, message: str = SHARE_UNSUPPORTED_MESSAGE):
        super().__init__(message)


class ShareCancelledError(ShareError):
    """Raised when the user dismisses the share dialog."""
