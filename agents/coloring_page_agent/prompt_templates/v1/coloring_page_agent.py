"""
Coloring Page Agent Prompt Template V1

Wraps the user's description so Imagen returns printable line art rather than
a colored illustration.
"""

COLORING_PAGE_PROMPT = (
    "A black and white coloring page for children showing: {description}. "
    "Clean, thick black outlines on a plain white background. "
    "Simple line art with large open areas to color in. "
    "No shading, no grayscale, no color fills, no text, no watermarks."
)


def build_coloring_page_prompt(description: str) -> str:
    return COLORING_PAGE_PROMPT.format(description=description)
