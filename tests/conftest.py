from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Pattern, Sequence, Tuple

import pytest

from swiftcheck.backends.base import PageSession, SessionError


class FakeSession(PageSession):
    """In-memory page: one input textarea plus an output rendered from it.

    ``render`` maps the current input value to the page output. The output
    lives in a second textarea by default (only visible to the positional
    tier); with ``output_in_textarea=False`` it is a plain element instead.
    ``chrome`` holds other element texts on the page, in document order.
    """

    def __init__(
        self,
        render: Optional[Callable[[str], str]] = None,
        *,
        chrome: Iterable[str] = (),
        output_in_textarea: bool = True,
        fail_on: Iterable[str] = (),
    ) -> None:
        self.render = render or (lambda text: "")
        self.chrome = list(chrome)
        self.output_in_textarea = output_in_textarea
        self.fail_on = set(fail_on)
        self.input_value = ""
        self.calls: List[str] = []
        self.waits: List[int] = []
        self.typed: List[Tuple[str, int]] = []
        self.visited: List[str] = []
        self.screenshots: List[Tuple[Path, bool]] = []
        self.closed = False

    @property
    def output(self) -> str:
        return self.render(self.input_value)

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise SessionError(f"{name} failed")

    def goto(self, url: str) -> None:
        self._record("goto")
        self.visited.append(url)

    def clear_input(self) -> None:
        self._record("clear")
        self.input_value = ""

    def fill_input(self, text: str) -> None:
        self._record("fill")
        self.input_value = text

    def type_into_input(self, char: str, delay_ms: int) -> None:
        self._record("type")
        self.typed.append((char, delay_ms))
        self.input_value += char

    def _elements(self) -> List[str]:
        if self.output_in_textarea:
            return list(self.chrome)
        return self.chrome + [self.output]

    def text_matches(self, pattern: Pattern[str]) -> Sequence[str]:
        self._record("text_matches")
        return [text for text in self._elements() if pattern.search(text)]

    def control_values(self, selector: str) -> Sequence[str]:
        self._record("control_values")
        if self.output_in_textarea:
            return [self.input_value, self.output]
        return [self.input_value]

    def body_text(self) -> str:
        self._record("body_text")
        return "\n".join(self._elements())

    def screenshot(self, path: Path, *, full_page: bool = False) -> None:
        self._record("screenshot")
        self.screenshots.append((path, full_page))

    def wait(self, ms: int) -> None:
        self._record("wait")
        self.waits.append(ms)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_session() -> Callable[..., FakeSession]:
    return FakeSession


@pytest.fixture
def session_factory() -> Callable[..., Tuple[Callable, List[FakeSession]]]:
    """Build a runner session factory that hands out fresh fakes and keeps them for inspection."""

    def build(render: Optional[Callable[[str], str]] = None, **kwargs):
        created: List[FakeSession] = []

        @contextmanager
        def factory() -> Iterator[FakeSession]:
            session = FakeSession(render, **kwargs)
            created.append(session)
            try:
                yield session
            finally:
                session.close()

        return factory, created

    return build
