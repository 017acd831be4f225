"""Verdict policies for positive, negative and realtime cases."""
from __future__ import annotations

from .models import MonitorResult, TestCase, Verdict


def classify(case: TestCase, actual_output: str) -> Verdict:
    """Compare ``actual_output`` with the case expectation.

    Equality is exact; whitespace and case are part of the rendering under
    test. Negative cases pass whenever the output differs from ``expected``,
    sentinel placeholders included, so any non-matching output satisfies them.
    """

    matched = actual_output == case.expected
    passed = not matched if case.is_negative else matched
    return Verdict(
        test_id=case.id,
        actual_output=actual_output,
        matched=matched,
        passed=passed,
        is_negative=case.is_negative,
    )


def classify_realtime(case: TestCase, result: MonitorResult) -> Verdict:
    """Realtime cases need at least one incremental update and a matching end state."""

    matched = result.final_output == case.expected
    return Verdict(
        test_id=case.id,
        actual_output=result.final_output,
        matched=matched,
        passed=result.update_count > 0 and matched,
        is_negative=False,
        update_count=result.update_count,
    )
