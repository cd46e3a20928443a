import asyncio
import logging
import time
from pathlib import Path
from uuid import uuid4

from playwright.async_api import Page

from nbvideo.browser import locators
from nbvideo.models.job import Artifact

logger = logging.getLogger(__name__)


def artifact_file_name() -> str:
    return f"notebooklm_{int(time.time() * 1000)}_{uuid4().hex[:8]}.mp4"


class ArtifactRetriever:
    def __init__(self, download_dir: str) -> None:
        self._download_dir = Path(download_dir)

    async def capture(self, page: Page) -> Artifact:
        """
        Click download while listening for the download event, save it under a
        time-derived name, load it into memory and delete the file.
        """
        self._download_dir.mkdir(parents=True, exist_ok=True)
        file_name = artifact_file_name()
        file_path = self._download_dir / file_name

        async with page.expect_download() as download_info:
            await locators.DOWNLOAD.resolve(page).click()
        download = await download_info.value

        try:
            await download.save_as(file_path)
            logger.info("[download] saved | path=%s", file_path)
            payload = await asyncio.to_thread(file_path.read_bytes)
        finally:
            file_path.unlink(missing_ok=True)

        logger.info("[download] captured | file=%s | bytes=%d", file_name, len(payload))
        return Artifact(file_name=file_name, payload=payload)
