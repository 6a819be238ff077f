"""Share providers standing in for the platform's native share capability."""

import asyncio
from pathlib import Path
from typing import Callable, List, Optional

import requests
from loguru import logger

from agents.coloring_page_agent.errors import ShareCancelledError, ShareUnsupportedError
from agents.coloring_page_agent.schemas import ShareData


class ShareProvider:
    """Base share provider. Callers check `available` and `can_share` before `share`."""

    name = "base"
    available = True
    supports_files = True

    def can_share(self, data: ShareData) -> bool:
        if not self.available:
            return False
        if data.files and not self.supports_files:
            return False
        return True

    async def share(self, data: ShareData) -> None:
        raise NotImplementedError


class UnavailableShareProvider(ShareProvider):
    """No share capability on this platform."""

    name = "none"
    available = False
    supports_files = False

    async def share(self, data: ShareData) -> None:
        raise ShareUnsupportedError()


class DirectoryShareProvider(ShareProvider):
    """Save shared files into an export directory."""

    name = "directory"

    def __init__(self, export_dir: str | Path, confirm: Optional[Callable[[ShareData], bool]] = None):
        """
        Args:
            export_dir: Directory the files are written to (created on first share)
            confirm: Optional prompt shown before saving; returning False cancels the share
        """
        self.export_dir = Path(export_dir)
        self.confirm = confirm
        self.saved_paths: List[Path] = []

    async def share(self, data: ShareData) -> None:
        if self.confirm is not None and not self.confirm(data):
            raise ShareCancelledError("Share dismissed by the user")

        self.export_dir.mkdir(parents=True, exist_ok=True)
        for shared_file in data.files:
            path = self._free_path(shared_file.filename)
            path.write_bytes(shared_file.content)
            self.saved_paths.append(path)
            logger.info(f"{self.name} provider saved {shared_file.filename} ({shared_file.size} bytes) to {path}")

    def _free_path(self, filename: str) -> Path:
        path = self.export_dir / filename
        counter = 1
        while path.exists():
            path = self.export_dir / f"{Path(filename).stem}_{counter}{Path(filename).suffix}"
            counter += 1
        return path


class WebhookShareProvider(ShareProvider):
    """Post shared content to a webhook URL.

    With ``include_files=False`` only the title and text are sent, so data
    carrying files cannot be shared.
    """

    name = "webhook"

    def __init__(self, url: str, include_files: bool = True, timeout: int = 30):
        self.url = url
        self.supports_files = include_files
        self.name = "webhook" if include_files else "webhook_text"
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return bool(self.url)

    async def share(self, data: ShareData) -> None:
        await asyncio.to_thread(self._post, data)

    def _post(self, data: ShareData) -> None:
        form = {"title": data.title, "text": data.text}
        if self.supports_files:
            files = [
                ("files", (f.filename, f.content, f.mime_type))
                for f in data.files
            ]
            r = requests.post(self.url, data=form, files=files, timeout=self.timeout)
        else:
            r = requests.post(self.url, json=form, timeout=self.timeout)
        r.raise_for_status()
        logger.info(f"Shared '{data.title}' via {self.name} provider ({r.status_code})")


def get_share_provider(settings) -> ShareProvider:
    """Build the share provider selected by SHARE_PROVIDER."""
    choice = settings.SHARE_PROVIDER.lower()

    if choice == "directory":
        provider = DirectoryShareProvider(settings.SHARE_EXPORT_DIR)
    elif choice in ("webhook", "webhook_text"):
        provider = WebhookShareProvider(settings.SHARE_WEBHOOK_URL, include_files=choice == "webhook",
                                        timeout=settings.SHARE_WEBHOOK_TIMEOUT)
    else:
        if choice != "none":
            logger.warning(f"Unknown SHARE_PROVIDER {settings.SHARE_PROVIDER!r}, sharing disabled")
        provider = UnavailableShareProvider()

    logger.info(f"Using {provider.name} share provider")
    return provider
