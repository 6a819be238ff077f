"""Controller owning the coloring page UI state and orchestrating generation and sharing."""

from typing import Awaitable, Callable, Optional

from loguru import logger

from agents.coloring_page_agent.errors import (
    SHARE_FAILED_MESSAGE,
    SHARE_UNSUPPORTED_MESSAGE,
    GenerationError,
    PromptValidationError,
    ShareCancelledError,
    ShareUnsupportedError,
)
from agents.coloring_page_agent.image_generation_agent import ImageGenerationAgent
from agents.coloring_page_agent.schemas import (
    Failed,
    GenerationState,
    Idle,
    Loading,
    SharedFile,
    ShareData,
    Succeeded,
)
from agents.coloring_page_agent.share_providers import ShareProvider
from agents.coloring_page_agent.utils import (
    PNG_MIME_TYPE,
    base64_to_file,
    build_share_filename,
    to_data_uri,
)

SHARE_TITLE = "My Coloring Page"
SHARE_TEXT_TEMPLATE = "Check out this coloring page I made: {prompt}"

FilePackager = Callable[[str, str, str], Awaitable[SharedFile]]


class ColoringPageController:
    """
    State machine behind the single-page view.

    Idle -> Loading -> {Succeeded, Failed} -> Loading -> ...

    Only one generation request is in flight at a time: `submit` is refused
    while Loading. Share failures set `share_error` and leave the state as is.
    """

    def __init__(
            self,
            image_generation_agent: ImageGenerationAgent,
            share_provider: ShareProvider,
            file_packager: FilePackager = base64_to_file
    ):
        self.image_generation_agent = image_generation_agent
        self.share_provider = share_provider
        self.file_packager = file_packager

        self.prompt: str = ""
        self.state: GenerationState = Idle()
        self.share_error: Optional[str] = None

    # -------------------------------------------------------------------------
    # View helpers
    # -------------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.prompt)

    @property
    def image(self) -> Optional[str]:
        return self.state.image if isinstance(self.state, Succeeded) else None

    @property
    def image_src(self) -> Optional[str]:
        return to_data_uri(self.image, PNG_MIME_TYPE) if self.image else None

    @property
    def can_share(self) -> bool:
        return isinstance(self.state, Succeeded)

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.state, Failed):
            return self.state.error_message
        return self.share_error

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    async def submit(self) -> GenerationState:
        """Generate a coloring page for the current prompt and store the outcome."""
        if self.is_loading:
            logger.warning("Generation already in progress; submit ignored")
            return self.state

        try:
            prompt = self._validated_prompt()
        except PromptValidationError as e:
            self.share_error = None
            self.state = Failed(error_message=e.message)
            return self.state

        self.share_error = None
        self.state = Loading()

        try:
            image = await self.image_generation_agent.generate_image(prompt)
            self.state = Succeeded(image=image)
        except GenerationError as e:
            self.state = Failed(error_message=e.display_message)
        except Exception as e:
            logger.exception(f"Unexpected generation failure: {e}")
            self.state = Failed(error_message=GenerationError(str(e) or None).display_message)
        finally:
            if self.is_loading:
                self.state = Failed(error_message=GenerationError().display_message)

        return self.state

    async def share(self) -> None:
        """Package the current image and hand it to the share provider."""
        if not isinstance(self.state, Succeeded):
            return

        try:
            shared_file = await self.file_packager(
                self.state.image,
                build_share_filename(self.prompt),
                PNG_MIME_TYPE
            )
            data = ShareData(
                title=SHARE_TITLE,
                text=SHARE_TEXT_TEMPLATE.format(prompt=self.prompt),
                files=[shared_file]
            )

            if not (self.share_provider.available and self.share_provider.can_share(data)):
                logger.warning(f"{self.share_provider.name} provider cannot share this file")
                self.share_error = SHARE_UNSUPPORTED_MESSAGE
                return

            await self.share_provider.share(data)
            self.share_error = None
        except ShareCancelledError:
            logger.info("Share cancelled by the user")
        except ShareUnsupportedError:
            self.share_error = SHARE_UNSUPPORTED_MESSAGE
        except Exception as e:
            logger.exception(f"Error sharing via {self.share_provider.name} provider: {e}")
            self.share_error = SHARE_FAILED_MESSAGE

    def _validated_prompt(self) -> str:
        prompt = self.prompt.strip()
        if not prompt:
            raise PromptValidationError()
        return prompt
