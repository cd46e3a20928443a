import logging

from playwright.async_api import Page

from nbvideo.browser import locators

logger = logging.getLogger(__name__)

TAB_SETTLE_MS = 2000
GENERATE_SETTLE_MS = 3000


class GenerationTrigger:
    async def start(self, page: Page) -> None:
        """Open the Video Overview panel and click generate. No acceptance signal exists."""
        await locators.VIDEO_TAB.resolve(page).click()
        await page.wait_for_timeout(TAB_SETTLE_MS)
        await locators.GENERATE.resolve(page).click()
        await page.wait_for_timeout(GENERATE_SETTLE_MS)
        logger.info("[generate] video generation started")
