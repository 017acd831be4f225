"""Best-effort recovery of the translated text from the rendered page.

The page offers no stable automation hooks for its output area, so the text is
looked up through an ordered chain of tiers, each less precise than the one
before it:

1. ``script_range`` - every element whose text contains Sinhala script; the
   last one wins since the output renders after the input in document order.
2. ``positional`` - when at least two text controls exist, the second one is
   assumed to be the output control. Fragile, kept as a last resort.
3. ``body_regex`` - the first run of Sinhala script (whitespace allowed) in
   the whole body text. May pick up page chrome.

A tier that hits returns its text even when the trimmed text is empty.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from swiftcheck.backends.base import PageSession, SessionError

SINHALA_RANGE = "\\u0d80-\\u0dff"
SINHALA_PATTERN = re.compile(f"[{SINHALA_RANGE}]+")
SINHALA_BLOCK_PATTERN = re.compile(f"[{SINHALA_RANGE}\\s]+")

DEFAULT_OUTPUT_SELECTOR = "textarea"
OUTPUT_CONTROL_INDEX = 1


@dataclass(frozen=True)
class Found:
    text: str
    tier: str


@dataclass(frozen=True)
class NotFound:
    tier: str
    reason: str = ""


ExtractionResult = Union[Found, NotFound]
Tier = Callable[[PageSession], ExtractionResult]


def script_range_tier(session: PageSession) -> ExtractionResult:
    try:
        texts = session.text_matches(SINHALA_PATTERN)
    except SessionError as exc:
        return NotFound("script_range", str(exc))
    if not texts:
        return NotFound("script_range")
    return Found((texts[-1] or "").strip(), "script_range")


def positional_tier(session: PageSession, selector: str = DEFAULT_OUTPUT_SELECTOR) -> ExtractionResult:
    try:
        values = session.control_values(selector)
    except SessionError as exc:
        return NotFound("positional", str(exc))
    if len(values) <= OUTPUT_CONTROL_INDEX:
        return NotFound("positional", f"{len(values)} control(s) match {selector!r}")
    return Found((values[OUTPUT_CONTROL_INDEX] or "").strip(), "positional")


def body_regex_tier(session: PageSession) -> ExtractionResult:
    try:
        body = session.body_text()
    except SessionError as exc:
        return NotFound("body_regex", str(exc))
    match = SINHALA_BLOCK_PATTERN.search(body or "")
    if match is None:
        return NotFound("body_regex")
    return Found(match.group(0).strip(), "body_regex")


def default_tiers(output_selector: str = DEFAULT_OUTPUT_SELECTOR) -> Sequence[Tier]:
    return (
        script_range_tier,
        lambda session: positional_tier(session, output_selector),
        body_regex_tier,
    )


def run_tiers(session: PageSession, tiers: Sequence[Tier]) -> ExtractionResult:
    """Return the first ``Found`` produced by ``tiers``."""

    for tier in tiers:
        result = tier(session)
        if isinstance(result, Found):
            return result
    return NotFound("exhausted")


def extract_result(session: PageSession, *, output_selector: str = DEFAULT_OUTPUT_SELECTOR) -> ExtractionResult:
    return run_tiers(session, default_tiers(output_selector))


def extract(session: PageSession, *, output_selector: str = DEFAULT_OUTPUT_SELECTOR) -> str:
    """Current translated text, or an empty string when every tier misses."""

    result = extract_result(session, output_selector=output_selector)
    if isinstance(result, Found):
        return result.text
    return ""
