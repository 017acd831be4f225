"""Result data structures produced by the test runner."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import MonitorResult, TestCase, Verdict


@dataclass
class CaseResult:
    """Outcome of executing a single test case."""

    case: TestCase
    status: str
    duration_s: float
    verdict: Optional[Verdict] = None
    monitor: Optional[MonitorResult] = None
    extraction_tier: Optional[str] = None
    error: Optional[str] = None
    screenshot: Optional[Path] = None

    @property
    def passed(self) -> bool:
        return self.status == "passed"
