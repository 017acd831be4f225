"""Drives one atomic translation through the page input control."""
from __future__ import annotations

from typing import Optional

from swiftcheck.backends.base import PageSession

from .extractor import DEFAULT_OUTPUT_SELECTOR, ExtractionResult, Found, extract, extract_result
from .settle import FixedDelay, SettleStrategy

DEFAULT_CLEAR_DELAY_MS = 500
DEFAULT_SETTLE_MS = 4000


def translate_result(
    session: PageSession,
    text: str,
    *,
    clear_delay_ms: int = DEFAULT_CLEAR_DELAY_MS,
    settle: Optional[SettleStrategy] = None,
    output_selector: str = DEFAULT_OUTPUT_SELECTOR,
) -> ExtractionResult:
    """Replace the input with ``text`` and extract the translated output.

    The clear delay keeps the fill from racing the page's own reset logic.
    The whole input is set in one fill; keystroke-level typing belongs to
    :func:`swiftcheck.core.monitor.monitor_realtime`.
    """

    settle = settle or FixedDelay(DEFAULT_SETTLE_MS)
    session.clear_input()
    session.wait(clear_delay_ms)
    session.fill_input(text)
    settle.settle(session, lambda: extract(session, output_selector=output_selector))
    return extract_result(session, output_selector=output_selector)


def translate(
    session: PageSession,
    text: str,
    *,
    clear_delay_ms: int = DEFAULT_CLEAR_DELAY_MS,
    settle: Optional[SettleStrategy] = None,
    output_selector: str = DEFAULT_OUTPUT_SELECTOR,
) -> str:
    result = translate_result(
        session,
        text,
        clear_delay_ms=clear_delay_ms,
        settle=settle,
        output_selector=output_selector,
    )
    return result.text if isinstance(result, Found) else ""
