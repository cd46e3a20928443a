import logging

from playwright.async_api import Page

from nbvideo.browser import locators
from nbvideo.models.job import GenerationRequest, SourceKind

logger = logging.getLogger(__name__)

NOTEBOOKLM_URL = "https://notebooklm.google.com"
PAGE_SETTLE_MS = 2000
AFFORDANCE_RENDER_MS = 1000
INGESTION_SETTLE_MS = 5000


class SourceIngestion:
    async def open_workspace(self, page: Page, title: str | None = None) -> None:
        """Create a fresh notebook; there is no confirmation signal beyond a settle delay."""
        await page.goto(NOTEBOOKLM_URL, wait_until="networkidle")
        await page.wait_for_timeout(PAGE_SETTLE_MS)
        await locators.NEW_NOTEBOOK.resolve(page).click()
        await page.wait_for_timeout(PAGE_SETTLE_MS)
        logger.info("[ingest] notebook created")
        if title:
            await self._set_title(page, title)

    async def _set_title(self, page: Page, title: str) -> None:
        if not await locators.is_visible(page, locators.NOTEBOOK_TITLE):
            logger.info("[ingest] title field not found, keeping default title")
            return
        field = locators.NOTEBOOK_TITLE.resolve(page)
        await field.fill(title)
        await page.keyboard.press("Enter")
        logger.info("[ingest] notebook titled | title=%s", title)

    async def add(self, page: Page, request: GenerationRequest) -> None:
        """Attach the request's source to the open notebook. Exactly one branch runs."""
        kind = request.source_kind
        if kind is SourceKind.FILE:
            await self._add_file(page, request.source_value)
        elif kind is SourceKind.URL:
            await self._add_via_field(page, locators.WEBSITE_SOURCE, locators.URL_FIELD, request.source_value)
        elif kind is SourceKind.DOC_REFERENCE:
            await self._add_via_field(page, locators.DRIVE_SOURCE, locators.DRIVE_FIELD, request.source_value)
        else:
            raise ValueError(f"unsupported source kind: {kind!r}")

        await page.wait_for_timeout(INGESTION_SETTLE_MS)
        logger.info("[ingest] source added | kind=%s", kind.value)

    async def _add_file(self, page: Page, path: str) -> None:
        await locators.FILE_INPUT.resolve(page).set_input_files(path)

    async def _add_via_field(self, page: Page, affordance, field, value: str) -> None:
        await affordance.resolve(page).click()
        await page.wait_for_timeout(AFFORDANCE_RENDER_MS)
        await field.resolve(page).fill(value)
        await page.keyboard.press("Enter")
