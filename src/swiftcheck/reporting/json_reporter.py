"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict, Optional, Sequence

import click
from jsonschema import validate

from swiftcheck.core.models import TestCase
from swiftcheck.core.results import CaseResult
from swiftcheck.suite.models import RunSettings

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION
from .summary import RunSummary


class JsonReporter(Reporter):
    """Writes results to a JSON file (or stdout) validated against the schema."""

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._records: list[Dict[str, Any]] = []
        self._settings: RunSettings | None = None

    def on_start(self, cases: Sequence[TestCase], settings: RunSettings) -> None:
        self._settings = settings
        self._records.clear()

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        self._records.append(_case_to_dict(result))

    def on_complete(self, results: Sequence[CaseResult], summary: RunSummary) -> None:
        if self._settings is None:
            return
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "base_url": self._settings.base_url,
            "summary": summary.as_dict(),
            "cases": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        text = json.dumps(payload, indent=2, ensure_ascii=False)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _case_to_dict(result: CaseResult) -> Dict[str, Any]:
    case = result.case
    record: Dict[str, Any] = {
        "id": case.id,
        "title": case.title,
        "mode": case.mode,
        "realtime": case.realtime,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
        "input": case.input,
        "expected": case.expected,
    }
    if result.verdict is not None:
        record["actual"] = result.verdict.actual_output
        record["matched"] = result.verdict.matched
        if result.verdict.update_count is not None:
            record["update_count"] = result.verdict.update_count
    if result.extraction_tier:
        record["extraction_tier"] = result.extraction_tier
    if result.screenshot:
        record["screenshot"] = str(result.screenshot)
    if result.error:
        record["error"] = result.error
    return record
