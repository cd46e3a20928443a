"""
UI targets expressed as ordered lists of equivalent locator strategies.

The remote UI has no stable contract, so every control is described several
ways (label text in English and Spanish, plus a data-testid where one exists).
A target resolves to the first element matching any of its strategies.
"""
import logging
from dataclasses import dataclass

from playwright.async_api import Locator, Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ByText:
    tag: str
    text: str

    def selector(self) -> str:
        return f'{self.tag}:has-text("{self.text}")'


@dataclass(frozen=True)
class ByAttribute:
    name: str
    value: str
    tag: str = ""

    def selector(self) -> str:
        return f'{self.tag}[{self.name}="{self.value}"]'


@dataclass(frozen=True)
class ByCss:
    css: str

    def selector(self) -> str:
        return self.css


@dataclass(frozen=True)
class Target:
    name: str
    strategies: tuple

    @property
    def selector(self) -> str:
        return ", ".join(strategy.selector() for strategy in self.strategies)

    def resolve(self, page: Page) -> Locator:
        return page.locator(self.selector).first


def target(name: str, *strategies) -> Target:
    return Target(name=name, strategies=tuple(strategies))


async def is_visible(page: Page, ui_target: Target) -> bool:
    """Visibility probe that never raises; lookup faults count as not visible."""
    try:
        return await ui_target.resolve(page).is_visible()
    except Exception as exc:
        logger.debug("[ui] visibility check failed | target=%s | error=%s", ui_target.name, exc)
        return False


EMAIL_INPUT = target("email input", ByCss('input[type="email"]'))
EMAIL_NEXT = target("email next", ByCss("#identifierNext"))
PASSWORD_INPUT = target("password input", ByCss('input[type="password"]'))
PASSWORD_NEXT = target("password next", ByCss("#passwordNext"))

NEW_NOTEBOOK = target(
    "new notebook",
    ByText("button", "New notebook"),
    ByText("button", "Nuevo notebook"),
    ByAttribute("data-testid", "new-notebook-button"),
)
NOTEBOOK_TITLE = target(
    "notebook title",
    ByAttribute("data-testid", "notebook-title", tag="input"),
    ByCss('input[aria-label*="title" i]'),
)
FILE_INPUT = target("file input", ByCss('input[type="file"]'))
WEBSITE_SOURCE = target(
    "website source",
    ByText("button", "Website"),
    ByText("button", "URL"),
    ByAttribute("data-testid", "add-url-source"),
)
URL_FIELD = target(
    "url field",
    ByCss('input[placeholder*="http"]'),
    ByCss('input[type="url"]'),
)
DRIVE_SOURCE = target(
    "drive source",
    ByText("button", "Google Drive"),
    ByText("button", "Drive"),
    ByAttribute("data-testid", "add-drive-source"),
)
DRIVE_FIELD = target(
    "drive field",
    ByCss('input[placeholder*="drive"]'),
    ByCss('input[placeholder*="doc"]'),
    ByCss('input[type="url"]'),
)
VIDEO_TAB = target(
    "video overview tab",
    ByText("button", "Video"),
    ByAttribute("data-testid", "video-overview-tab"),
    ByText("a", "Video"),
)
GENERATE = target(
    "generate video",
    ByText("button", "Generate"),
    ByText("button", "Generar"),
    ByText("button", "Create video"),
    ByAttribute("data-testid", "generate-video-btn"),
)
DOWNLOAD = target(
    "download",
    ByText("button", "Download"),
    ByText("button", "Descargar"),
    ByCss("a[download]"),
)
PROGRESS_INDICATOR = target(
    "progress indicator",
    ByAttribute("role", "progressbar"),
    ByCss(".loading-spinner"),
)
PLAYBACK = target(
    "playback control",
    ByCss('button[aria-label*="play"]'),
    ByCss("video"),
)
