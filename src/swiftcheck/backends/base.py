"""Page session abstractions."""
from __future__ import annotations

from pathlib import Path
from typing import Pattern, Sequence


class SessionError(RuntimeError):
    """Raised when a browser primitive cannot be completed."""


class PageSession:
    """Base interface for the browser page a case is driven through.

    The core only talks to the page through these primitives. ``input_*``
    methods act on the single text-entry control the session was opened for.
    """

    def goto(self, url: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def clear_input(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def fill_input(self, text: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def type_into_input(self, char: str, delay_ms: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def text_matches(self, pattern: Pattern[str]) -> Sequence[str]:  # pragma: no cover - interface
        """Text content of every element whose text matches ``pattern``, in document order."""
        raise NotImplementedError

    def control_values(self, selector: str) -> Sequence[str]:  # pragma: no cover - interface
        """Current values of every input-like control matching ``selector``."""
        raise NotImplementedError

    def body_text(self) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def screenshot(self, path: Path, *, full_page: bool = False) -> None:  # pragma: no cover
        raise NotImplementedError

    def wait(self, ms: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def close(self) -> None:
        return None
