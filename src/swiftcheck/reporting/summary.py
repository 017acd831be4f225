"""Run-level aggregation of case results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from swiftcheck.core.results import CaseResult


@dataclass
class RunSummary:
    """Counts and failing ids for one run.

    Built with :meth:`record` after each case and closed once with
    :meth:`finalize`; a finalized summary rejects further results.
    """

    total: int = 0
    passed: int = 0
    failed: int = 0
    errors: int = 0
    failed_ids: List[str] = field(default_factory=list)
    duration_s: float = 0.0
    finalized: bool = False

    def record(self, result: CaseResult) -> None:
        if self.finalized:
            raise RuntimeError("Cannot record results on a finalized summary")
        self.total += 1
        if result.status == "passed":
            self.passed += 1
            return
        if result.status == "error":
            self.errors += 1
        else:
            self.failed += 1
        self.failed_ids.append(result.case.id)

    def finalize(self, duration_s: float = 0.0) -> "RunSummary":
        if self.finalized:
            raise RuntimeError("Summary already finalized")
        self.duration_s = duration_s
        self.finalized = True
        return self

    def percent(self, count: int) -> float:
        if not self.total:
            return 0.0
        return count / self.total * 100

    @property
    def ok(self) -> bool:
        return self.passed == self.total

    def as_dict(self) -> Dict[str, object]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "passed_pct": round(self.percent(self.passed), 1),
            "failed_pct": round(self.percent(self.failed + self.errors), 1),
            "failed_ids": list(self.failed_ids),
            "duration_s": self.duration_s,
        }
