"""In-memory stand-in for a Playwright page, shared by unit and integration tests."""
from contextlib import asynccontextmanager
from pathlib import Path

import pytest

from nbvideo.browser.session import Session


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str) -> None:
        self._page = page
        self.selector = selector

    @property
    def first(self) -> "FakeLocator":
        return self

    async def click(self) -> None:
        self._page.record("click", self.selector)

    async def fill(self, value: str) -> None:
        self._page.record("fill", self.selector, value)

    async def set_input_files(self, files) -> None:
        self._page.record("set_input_files", self.selector, files)

    async def is_visible(self) -> bool:
        self._page.visibility_checks += 1
        return self._page.is_visible(self.selector)


class FakeKeyboard:
    def __init__(self, page: "FakePage") -> None:
        self._page = page

    async def press(self, key: str) -> None:
        self._page.record("press", key)


class FakeDownload:
    def __init__(self, payload: bytes) -> None:
        self._payload = payload
        self.saved_to: Path | None = None

    async def save_as(self, path) -> None:
        self.saved_to = Path(path)
        self.saved_to.write_bytes(self._payload)


class _DownloadInfo:
    def __init__(self, download: FakeDownload) -> None:
        self._download = download

    @property
    def value(self):
        async def _resolve():
            return self._download

        return _resolve()


class _ExpectDownload:
    def __init__(self, page: "FakePage") -> None:
        self._page = page

    async def __aenter__(self) -> _DownloadInfo:
        self._page.record("expect_download")
        return _DownloadInfo(self._page.download)

    async def __aexit__(self, *exc) -> bool:
        return False


class FakePage:
    """
    Records every interaction. ``visible`` decides visibility per selector;
    it receives the selector and the number of completed poll sleeps.
    ``url_after_login`` is what page.url reports once #passwordNext is clicked.
    """

    def __init__(
        self,
        visible=None,
        url_after_login: str = "https://myaccount.google.com/",
        download_bytes: bytes = b"\x00\x00\x00\x18ftypmp42video",
        poll_interval_ms: int = 15_000,
    ) -> None:
        self.actions: list[tuple] = []
        self.waits: list[int] = []
        self.url = "about:blank"
        self.visibility_checks = 0
        self.keyboard = FakeKeyboard(self)
        self.download = FakeDownload(download_bytes)
        self._visible = visible or (lambda selector, ticks: False)
        self._url_after_login = url_after_login
        self._poll_interval_ms = poll_interval_ms

    def record(self, *action) -> None:
        self.actions.append(action)
        if action[:2] == ("click", "#passwordNext"):
            self.url = self._url_after_login

    @property
    def poll_ticks(self) -> int:
        return sum(1 for ms in self.waits if ms == self._poll_interval_ms)

    def is_visible(self, selector: str) -> bool:
        return self._visible(selector, self.poll_ticks)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    async def goto(self, url: str, wait_until: str | None = None) -> None:
        self.record("goto", url)
        self.url = url

    async def wait_for_timeout(self, ms: int) -> None:
        self.waits.append(ms)

    def expect_download(self) -> _ExpectDownload:
        return _ExpectDownload(self)

    def actions_named(self, name: str) -> list[tuple]:
        return [a for a in self.actions if a[0] == name]


class RecordingSessionManager:
    """SessionManager double that hands out a FakePage and counts acquire/release."""

    def __init__(self, page: FakePage | None = None) -> None:
        self.page = page or FakePage()
        self.acquired = 0
        self.released = 0

    async def acquire(self) -> Session:
        self.acquired += 1
        return Session(playwright=None, browser=None, context=None, page=self.page)

    async def release(self, session: Session) -> None:
        self.released += 1

    def session(self):
        @asynccontextmanager
        async def _scope():
            session = await self.acquire()
            try:
                yield session
            finally:
                await self.release(session)

        return _scope()


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def session_manager(fake_page):
    return RecordingSessionManager(fake_page)


@pytest.fixture
def make_page():
    """Factory for FakePage instances configured per test."""
    return FakePage


@pytest.fixture
def make_sessions():
    return RecordingSessionManager
