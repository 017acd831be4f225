"""Playwright-backed page sessions."""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, ContextManager, Iterator, Pattern, Sequence

from playwright.sync_api import Browser, Error as PlaywrightError, Page, sync_playwright

from swiftcheck.suite.models import RunSettings

from .base import PageSession, SessionError

SessionFactory = Callable[[], ContextManager[PageSession]]


class PlaywrightSession(PageSession):
    """Drives a single Playwright page; every failure surfaces as ``SessionError``."""

    def __init__(self, page: Page, input_selector: str) -> None:
        self._page = page
        self._input = page.locator(input_selector)

    @property
    def page(self) -> Page:
        return self._page

    def goto(self, url: str) -> None:
        with _translate_errors("goto"):
            self._page.goto(url)

    def clear_input(self) -> None:
        with _translate_errors("clear"):
            self._input.clear()

    def fill_input(self, text: str) -> None:
        with _translate_errors("fill"):
            self._input.fill(text)

    def type_into_input(self, char: str, delay_ms: int) -> None:
        with _translate_errors("type"):
            self._input.press_sequentially(char, delay=delay_ms)

    def text_matches(self, pattern: Pattern[str]) -> Sequence[str]:
        with _translate_errors("text lookup"):
            return self._page.get_by_text(pattern).all_text_contents()

    def control_values(self, selector: str) -> Sequence[str]:
        with _translate_errors("control lookup"):
            return [control.input_value() for control in self._page.locator(selector).all()]

    def body_text(self) -> str:
        with _translate_errors("body text"):
            return self._page.locator("body").text_content() or ""

    def screenshot(self, path: Path, *, full_page: bool = False) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with _translate_errors("screenshot"):
            self._page.screenshot(path=str(path), full_page=full_page)

    def wait(self, ms: int) -> None:
        if ms <= 0:
            return
        with _translate_errors("wait"):
            self._page.wait_for_timeout(ms)

    def close(self) -> None:
        with _translate_errors("close"):
            self._page.context.close()


@contextmanager
def _translate_errors(action: str) -> Iterator[None]:
    try:
        yield
    except PlaywrightError as exc:
        raise SessionError(f"{action} failed: {exc.message}") from exc


@contextmanager
def open_browser(settings: RunSettings) -> Iterator[SessionFactory]:
    """Launch Chromium once and yield a factory of fresh per-case sessions."""

    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=settings.headless)
        try:
            yield lambda: _new_session(browser, settings)
        finally:
            browser.close()


@contextmanager
def _new_session(browser: Browser, settings: RunSettings) -> Iterator[PageSession]:
    width, height = settings.viewport
    context = browser.new_context(viewport={"width": width, "height": height})
    session = PlaywrightSession(context.new_page(), settings.input_selector)
    try:
        yield session
    finally:
        session.close()
