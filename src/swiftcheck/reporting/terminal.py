"""Terminal reporter rendering per-case diagnostics and the run summary."""
from __future__ import annotations

from typing import Sequence

import click
from colorama import Fore, Style

from swiftcheck.core.models import TestCase
from swiftcheck.core.results import CaseResult
from swiftcheck.suite.models import RunSettings

from .base import Reporter
from .summary import RunSummary

PREVIEW_LIMIT = 50
RULE = "=" * 60

STATUS_LABELS = {
    "passed": ("PASS", Fore.GREEN),
    "failed": ("FAIL", Fore.RED),
    "error": ("ERROR", Fore.YELLOW),
}


def preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True, verbose: bool = False) -> None:
        self._use_color = use_color
        self._verbose = verbose

    def on_start(self, cases: Sequence[TestCase], settings: RunSettings) -> None:
        click.echo(
            self._colored(
                f"Starting run: {len(cases)} case(s) against {settings.base_url} "
                f"settle={settings.settle}:{settings.settle_ms}ms headless={settings.headless}",
                Fore.CYAN,
            )
        )

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        label, color = STATUS_LABELS.get(result.status, (result.status.upper(), ""))
        click.echo(
            f"[{index}/{total}] {result.case.label()} -> "
            f"{self._colored(label, color)} ({result.duration_s:.2f} s)"
        )
        self._print_details(result)

    def on_complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:
        click.echo("")
        click.echo(RULE)
        click.echo("TEST SUMMARY REPORT")
        click.echo(RULE)
        click.echo(f"Total Tests: {summary.total}")
        click.echo(self._colored(f"Passed: {summary.passed} ({summary.percent(summary.passed):.1f}%)", Fore.GREEN))
        click.echo(self._colored(f"Failed: {summary.failed} ({summary.percent(summary.failed):.1f}%)", Fore.RED))
        if summary.errors:
            click.echo(self._colored(f"Errors: {summary.errors} ({summary.percent(summary.errors):.1f}%)", Fore.YELLOW))
        click.echo(f"Duration: {summary.duration_s:.2f} s")
        if summary.failed_ids:
            click.echo("Failed Tests:")
            for case_id in summary.failed_ids:
                click.echo(f"  - {case_id}")
        click.echo(RULE)

    def _print_details(self, result: CaseResult, *, indent: str = "    ") -> None:
        case = result.case
        click.echo(f"{indent}Input: {preview(case.input)}")
        click.echo(f"{indent}Expected: {preview(case.expected)}")
        if result.error:
            click.echo(f"{indent}error: {result.error}")
            return
        verdict = result.verdict
        if verdict is None:
            click.echo(f"{indent}verdict unavailable")
            return
        click.echo(f"{indent}Actual: {preview(verdict.actual_output)}")
        if case.realtime:
            updates = verdict.update_count or 0
            click.echo(f"{indent}Output Updates Detected: {updates}")
            click.echo(f"{indent}Real-time Updates: {'YES' if updates > 0 else 'NO'}")
            click.echo(f"{indent}Final Match: {'YES' if verdict.matched else 'NO'}")
            if self._verbose and result.monitor:
                for keystroke, output in result.monitor.steps:
                    click.echo(f"{indent}  step {keystroke}: {output!r}")
        elif verdict.is_negative:
            click.echo(f"{indent}Negative case: output must differ from expected")
        else:
            click.echo(f"{indent}Match: {'YES' if verdict.matched else 'NO'}")
        if self._verbose and result.extraction_tier:
            click.echo(f"{indent}extracted via: {result.extraction_tier}")
        if result.screenshot:
            click.echo(f"{indent}screenshot: {result.screenshot}")

    def _colored(self, text: str, color: str) -> str:
        if not self._use_color or not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
