"""Reporter interface definitions."""
from __future__ import annotations

import time
from typing import List, Sequence

from swiftcheck.core.models import TestCase
from swiftcheck.core.results import CaseResult
from swiftcheck.suite.models import RunSettings

from .summary import RunSummary


class Reporter:
    """Interface for output renderers."""

    def on_start(self, cases: Sequence[TestCase], settings: RunSettings) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters and owns the run summary."""

    def __init__(self, reporters: Sequence[Reporter] = ()) -> None:
        self._reporters = list(reporters)
        self._summary = RunSummary()
        self._start_time = 0.0

    @property
    def summary(self) -> RunSummary:
        return self._summary

    def start(self, cases: Sequence[TestCase], settings: RunSettings) -> None:
        self._summary = RunSummary()
        self._start_time = time.perf_counter()
        for reporter in self._reporters:
            reporter.on_start(cases, settings)

    def handle_result(self, result: CaseResult, index: int, total: int) -> None:
        self._summary.record(result)
        for reporter in self._reporters:
            reporter.on_case_result(result, index, total)

    def complete(self, results: Sequence[CaseResult]) -> RunSummary:
        self._summary.finalize(time.perf_counter() - self._start_time)
        for reporter in self._reporters:
            reporter.on_complete(results, self._summary)
        return self._summary

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
