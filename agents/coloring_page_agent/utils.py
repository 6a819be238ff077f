"""Utility functions for Coloring Page Agent."""

import base64
import re

from agents.coloring_page_agent.schemas import SharedFile

PNG_MIME_TYPE = "image/png"
FILENAME_PROMPT_LENGTH = 20
FILENAME_SUFFIX = "_coloring_page.png"

_WHITESPACE_RUN = re.compile(r"\s+")


async def base64_to_file(base64_image: str, filename: str, mime_type: str) -> SharedFile:
    """
    Convert a base64 payload into a named file object.

    Args:
        base64_image: Base64-encoded image data
        filename: Name the file is shared under
        mime_type: MIME type of the file

    Returns:
        SharedFile holding the decoded bytes

    Raises:
        binascii.Error: If the payload is not valid base64
    """
    content = base64.b64decode(base64_image, validate=True)
    return SharedFile(filename=filename, mime_type=mime_type, content=content)


def build_share_filename(prompt: str) -> str:
    """
    Derive the export filename from a prompt.

    The prefix is at most 20 characters including the underscore that joins the
    suffix, and every whitespace run becomes a single underscore:
    "a castle in the clouds and more" -> "a_castle_in_the_clo_coloring_page.png".
    """
    stem = _WHITESPACE_RUN.sub("_", prompt[:FILENAME_PROMPT_LENGTH])
    return f"{stem[:FILENAME_PROMPT_LENGTH - 1]}{FILENAME_SUFFIX}"


def to_data_uri(base64_image: str, mime_type: str = PNG_MIME_TYPE) -> str:
    return f"data:{mime_type};base64,{base64_image}"
