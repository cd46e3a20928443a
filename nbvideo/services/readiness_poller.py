"""
Completion detection for the remote video job.

NotebookLM offers no status API to a browser session, so readiness is
inferred from the page on a fixed tick. Two independent signals are checked:

- H1: a download control is visible.
- H2: no progress indicator is visible and a playback control is.

Either one moves the poll to READY. Reaching the deadline without either
moves it to TIMED_OUT.
"""
import logging

from playwright.async_api import Page

from nbvideo.browser import locators
from nbvideo.models.job import PollState, PollStatus
from nbvideo.services.errors import GenerationTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 15
DEFAULT_DEADLINE_SECONDS = 10 * 60


async def download_visible(page: Page) -> bool:
    return await locators.is_visible(page, locators.DOWNLOAD)


async def player_idle(page: Page) -> bool:
    spinning = await locators.is_visible(page, locators.PROGRESS_INDICATOR)
    if spinning:
        return False
    return await locators.is_visible(page, locators.PLAYBACK)


def describe_deadline(seconds: int) -> str:
    minutes, remainder = divmod(seconds, 60)
    if minutes and not remainder:
        return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
    return f"{seconds} seconds"


class ReadinessPoller:
    def __init__(
        self,
        interval_seconds: int = DEFAULT_INTERVAL_SECONDS,
        deadline_seconds: int = DEFAULT_DEADLINE_SECONDS,
    ) -> None:
        if interval_seconds <= 0 or deadline_seconds <= 0:
            raise ValueError("poll interval and deadline must be positive")
        self._interval = interval_seconds
        self._deadline = deadline_seconds

    async def tick(self, page: Page, state: PollState) -> PollState:
        """Sleep one interval, then evaluate both heuristics once."""
        await page.wait_for_timeout(state.interval_seconds * 1000)
        state.ticks += 1
        state.elapsed_seconds += state.interval_seconds
        logger.info("[poll] waiting for video | elapsed=%ss", state.elapsed_seconds)

        if await download_visible(page) or await player_idle(page):
            state.status = PollStatus.READY
        elif state.elapsed_seconds >= state.deadline_seconds:
            state.status = PollStatus.TIMED_OUT
        return state

    async def wait_until_ready(self, page: Page) -> PollState:
        state = PollState(interval_seconds=self._interval, deadline_seconds=self._deadline)
        while not state.terminal:
            await self.tick(page, state)

        if state.status is PollStatus.TIMED_OUT:
            raise GenerationTimeoutError(f"Video was not generated within {describe_deadline(self._deadline)}")
        logger.info("[poll] video ready | elapsed=%ss | ticks=%d", state.elapsed_seconds, state.ticks)
        return state
