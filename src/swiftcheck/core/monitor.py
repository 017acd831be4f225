"""Keystroke-level typing used to observe incremental page updates."""
from __future__ import annotations

from typing import List, Optional, Tuple

from swiftcheck.backends.base import PageSession

from .driver import DEFAULT_CLEAR_DELAY_MS
from .extractor import DEFAULT_OUTPUT_SELECTOR, extract
from .models import MonitorResult
from .settle import FixedDelay, SettleStrategy

DEFAULT_KEYSTROKE_DELAY_MS = 200
DEFAULT_KEYSTROKE_SETTLE_MS = 500
DEFAULT_FINAL_SETTLE_MS = 2000


def monitor_realtime(
    session: PageSession,
    text: str,
    *,
    clear_delay_ms: int = DEFAULT_CLEAR_DELAY_MS,
    keystroke_delay_ms: int = DEFAULT_KEYSTROKE_DELAY_MS,
    keystroke_settle: Optional[SettleStrategy] = None,
    final_settle: Optional[SettleStrategy] = None,
    output_selector: str = DEFAULT_OUTPUT_SELECTOR,
) -> MonitorResult:
    """Type ``text`` one character at a time and count output changes.

    An update is counted when a sample is non-empty and differs from the last
    counted sample; ``steps`` records the 1-based keystroke index and output of
    every counted update.
    """

    keystroke_settle = keystroke_settle or FixedDelay(DEFAULT_KEYSTROKE_SETTLE_MS)
    final_settle = final_settle or FixedDelay(DEFAULT_FINAL_SETTLE_MS)

    def sample() -> str:
        return extract(session, output_selector=output_selector)

    session.clear_input()
    session.wait(clear_delay_ms)

    previous = ""
    steps: List[Tuple[int, str]] = []
    for index, char in enumerate(text, start=1):
        session.type_into_input(char, keystroke_delay_ms)
        keystroke_settle.settle(session, sample)
        current = sample()
        if current and current != previous:
            previous = current
            steps.append((index, current))

    final_settle.settle(session, sample)
    return MonitorResult(update_count=len(steps), final_output=sample(), steps=tuple(steps))
