"""Sequential runner driving each case through a fresh page session."""
from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Callable, ContextManager, List, Optional, Sequence, Tuple

from swiftcheck.backends.base import PageSession
from swiftcheck.reporting.base import ReportManager
from swiftcheck.suite.models import RunSettings

from .classifier import classify, classify_realtime
from .driver import translate_result
from .extractor import Found
from .models import TestCase
from .monitor import monitor_realtime
from .results import CaseResult
from .settle import FixedDelay, SettleStrategy, build_settle_strategy

SessionFactory = Callable[[], ContextManager[PageSession]]

_UNSAFE_ID_CHARS = re.compile(r"[:/\\]")


def screenshot_name(case_id: str, suffix: str = "") -> str:
    return f"{_UNSAFE_ID_CHARS.sub('_', case_id)}{suffix}.png"


def settle_strategies(settings: RunSettings) -> Tuple[SettleStrategy, SettleStrategy]:
    """Build the translation and per-keystroke settle strategies.

    ``poll_timeout_ms`` only bounds the translation settle; the per-keystroke
    poll is bounded by ``keystroke_settle_ms``. Raises ``ValueError`` when the
    settings cannot produce a usable strategy.
    """

    def build(key: str, settle_ms: int, timeout_ms: Optional[int]) -> SettleStrategy:
        try:
            return build_settle_strategy(
                settings.settle,
                settle_ms=settle_ms,
                interval_ms=settings.poll_interval_ms,
                timeout_ms=timeout_ms,
            )
        except ValueError as exc:
            raise ValueError(f"Invalid settle settings for {key}={settle_ms}: {exc}") from exc

    return (
        build("settle_ms", settings.settle_ms, settings.poll_timeout_ms),
        build("keystroke_settle_ms", settings.keystroke_settle_ms, None),
    )


class TestRunner:
    """Executes test cases one at a time; there are no retries."""

    def __init__(self, session_factory: SessionFactory, settings: Optional[RunSettings] = None) -> None:
        self._session_factory = session_factory
        self._settings = settings or RunSettings()
        self._translation_settle, self._keystroke_settle = settle_strategies(self._settings)

    @property
    def settings(self) -> RunSettings:
        return self._settings

    def run(self, cases: Sequence[TestCase], *, reporter: Optional[ReportManager] = None) -> List[CaseResult]:
        reporter = reporter or ReportManager()
        reporter.start(cases, self._settings)
        results: List[CaseResult] = []
        total = len(cases)
        for index, case in enumerate(cases, start=1):
            result = self._execute_case(case)
            results.append(result)
            reporter.handle_result(result, index, total)
            if self._settings.fail_fast and not result.passed:
                break
        reporter.complete(results)
        return results

    def _execute_case(self, case: TestCase) -> CaseResult:
        start = time.perf_counter()
        try:
            with self._session_factory() as session:
                session.goto(self._settings.base_url)
                if case.realtime:
                    result = self._run_realtime(session, case)
                else:
                    result = self._run_translation(session, case)
                session.wait(self._settings.hold_ms)
            result.duration_s = time.perf_counter() - start
            return result
        except Exception as exc:
            return CaseResult(
                case=case,
                status="error",
                duration_s=time.perf_counter() - start,
                error=f"{type(exc).__name__}: {exc}",
            )

    def _run_translation(self, session: PageSession, case: TestCase) -> CaseResult:
        settings = self._settings
        extraction = translate_result(
            session,
            case.input,
            clear_delay_ms=settings.clear_delay_ms,
            settle=self._translation_settle,
            output_selector=settings.output_selector,
        )
        actual = extraction.text if isinstance(extraction, Found) else ""
        verdict = classify(case, actual)
        return CaseResult(
            case=case,
            status="passed" if verdict.passed else "failed",
            duration_s=0.0,
            verdict=verdict,
            extraction_tier=extraction.tier if isinstance(extraction, Found) else None,
            screenshot=self._screenshot(session, case, full_page=False),
        )

    def _run_realtime(self, session: PageSession, case: TestCase) -> CaseResult:
        settings = self._settings
        monitor = monitor_realtime(
            session,
            case.input,
            clear_delay_ms=settings.clear_delay_ms,
            keystroke_delay_ms=settings.keystroke_delay_ms,
            keystroke_settle=self._keystroke_settle,
            final_settle=FixedDelay(settings.final_settle_ms),
            output_selector=settings.output_selector,
        )
        verdict = classify_realtime(case, monitor)
        return CaseResult(
            case=case,
            status="passed" if verdict.passed else "failed",
            duration_s=0.0,
            verdict=verdict,
            monitor=monitor,
            screenshot=self._screenshot(session, case, full_page=True, suffix="_final"),
        )

    def _screenshot(self, session: PageSession, case: TestCase, *, full_page: bool, suffix: str = "") -> Optional[Path]:
        if not self._settings.screenshots:
            return None
        path = Path(self._settings.results_dir) / screenshot_name(case.id, suffix)
        session.screenshot(path, full_page=full_page)
        return path
