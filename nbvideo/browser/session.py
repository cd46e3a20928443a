import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

logger = logging.getLogger(__name__)

LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox", "--disable-dev-shm-usage"]
VIEWPORT = {"width": 1280, "height": 900}


@dataclass
class Session:
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page


class SessionManager:
    """Launches one isolated Chromium per job and tears it down afterwards."""

    def __init__(self, headless: bool = True) -> None:
        self._headless = headless

    async def acquire(self) -> Session:
        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(headless=self._headless, args=LAUNCH_ARGS)
        except Exception:
            await playwright.stop()
            raise
        try:
            context = await browser.new_context(accept_downloads=True, viewport=VIEWPORT)
            page = await context.new_page()
        except Exception:
            await browser.close()
            await playwright.stop()
            raise
        logger.info("[session] browser launched | headless=%s", self._headless)
        return Session(playwright=playwright, browser=browser, context=context, page=page)

    async def release(self, session: Session) -> None:
        try:
            await session.browser.close()
        finally:
            await session.playwright.stop()
        logger.info("[session] browser closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[Session]:
        """Scoped session: released exactly once on every exit path."""
        session = await self.acquire()
        try:
            yield session
        finally:
            await self.release(session)
