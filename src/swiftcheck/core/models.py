"""Core dataclasses shared across swiftcheck subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


POSITIVE = "positive"
NEGATIVE = "negative"
MODES = (POSITIVE, NEGATIVE)


@dataclass(frozen=True)
class TestCase:
    """One translation scenario to execute against the page."""

    id: str
    input: str
    expected: str
    mode: str = POSITIVE
    title: str = ""
    realtime: bool = False
    tags: Tuple[str, ...] = tuple()

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode '{self.mode}' for case {self.id}; expected one of {MODES}")
        if self.realtime and self.mode != POSITIVE:
            raise ValueError(f"Realtime case {self.id} must use positive mode")

    @property
    def is_negative(self) -> bool:
        return self.mode == NEGATIVE

    def label(self) -> str:
        if self.title:
            return f"{self.id}: {self.title}"
        return self.id


@dataclass(frozen=True)
class Verdict:
    """Pass/fail outcome plus the data it was derived from."""

    test_id: str
    actual_output: str
    matched: bool
    passed: bool
    is_negative: bool
    update_count: Optional[int] = None


@dataclass(frozen=True)
class MonitorResult:
    """Observations gathered while typing an input one character at a time."""

    update_count: int
    final_output: str
    steps: Tuple[Tuple[int, str], ...] = field(default_factory=tuple)
