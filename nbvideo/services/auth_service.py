import logging

from playwright.async_api import Page

from nbvideo.browser import locators
from nbvideo.models.job import Credentials
from nbvideo.services.errors import AuthenticationError

logger = logging.getLogger(__name__)

SIGNIN_URL = "https://accounts.google.com/signin"
FAILURE_MARKERS = ("signin", "challenge")
IDENTITY_SETTLE_MS = 2000
SECRET_SETTLE_MS = 4000


class AuthenticationFlow:
    async def login(self, page: Page, credentials: Credentials) -> None:
        """
        Single-pass Google sign-in. Raises AuthenticationError if the browser is
        still on a sign-in or challenge page afterwards; 2FA is never attempted.
        """
        logger.info("[auth] signing in")
        await page.goto(SIGNIN_URL, wait_until="networkidle")
        await locators.EMAIL_INPUT.resolve(page).fill(credentials.identity)
        await locators.EMAIL_NEXT.resolve(page).click()
        await page.wait_for_timeout(IDENTITY_SETTLE_MS)
        await locators.PASSWORD_INPUT.resolve(page).fill(credentials.secret)
        await locators.PASSWORD_NEXT.resolve(page).click()
        await page.wait_for_timeout(SECRET_SETTLE_MS)

        landed_on = page.url
        if any(marker in landed_on for marker in FAILURE_MARKERS):
            logger.warning("[auth] sign-in rejected | url=%s", landed_on)
            raise AuthenticationError(
                "Login failed. Use a Google App Password; interactive 2-step challenges are not supported."
            )
        logger.info("[auth] signed in")
