"""YAML loader and validation for scenario suites."""
from __future__ import annotations

import fnmatch
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import yaml
from jsonschema import Draft7Validator

from swiftcheck.core.models import MODES, POSITIVE, TestCase

from .models import RunSettings, Suite, SuiteOptions

DEFAULT_SUITE = "swifttranslator.yaml"


def default_suite_path() -> Path:
    return Path(str(resources.files("swiftcheck.suites").joinpath(DEFAULT_SUITE)))


def load_suite(path: Optional[str] = None) -> Suite:
    """Load and validate a suite file; the packaged suite is used when ``path`` is empty."""
    suite_path = Path(path).expanduser().resolve() if path else default_suite_path()
    raw = yaml.safe_load(suite_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Suite file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Suite schema validation failed: {messages}")
    name = str(raw.get("name") or suite_path.stem)
    description = str(raw.get("description", ""))
    settings = _parse_settings(raw.get("settings"), suite_path.parent)
    cases = _parse_cases(raw["cases"])
    _validate_cases(cases)
    return Suite(name=name, description=description, cases=cases, settings=settings, source=suite_path)


def select_cases(suite: Suite, options: SuiteOptions) -> list[TestCase]:
    """Apply id globs, tag filters and the mode filter, preserving suite order."""
    selected: list[TestCase] = []
    for case in suite.cases:
        if options.cases and not any(fnmatch.fnmatchcase(case.id, pattern) for pattern in options.cases):
            continue
        if options.tags and not set(options.tags) & set(case.tags):
            continue
        if options.skip_tags and set(options.skip_tags) & set(case.tags):
            continue
        if options.mode and case.mode != options.mode:
            continue
        selected.append(case)
    return selected


def _parse_settings(raw: Any, base: Path) -> RunSettings:
    if not raw:
        return RunSettings()
    values: Dict[str, Any] = dict(raw)
    viewport = values.get("viewport")
    if viewport is not None:
        values["viewport"] = (int(viewport["width"]), int(viewport["height"]))
    results_dir = values.get("results_dir")
    if results_dir is not None:
        path = Path(results_dir)
        values["results_dir"] = path if path.is_absolute() else base / path
    return RunSettings().merged(values)


def _parse_cases(raw: Sequence[Mapping[str, Any]]) -> tuple[TestCase, ...]:
    cases: list[TestCase] = []
    for entry in raw:
        text = str(entry.get("input", ""))
        repeat = int(entry.get("repeat", 1))
        cases.append(
            TestCase(
                id=str(entry["id"]).strip(),
                input=text * repeat,
                expected=str(entry["expected"]),
                mode=str(entry.get("mode", POSITIVE)),
                title=str(entry.get("title", "")),
                realtime=bool(entry.get("realtime", False)),
                tags=tuple(str(tag) for tag in entry.get("tags", []) or []),
            )
        )
    return tuple(cases)


def _validate_cases(cases: Sequence[TestCase]) -> None:
    seen: set[str] = set()
    for case in cases:
        if not case.id:
            raise ValueError("Case id cannot be empty")
        if case.id in seen:
            raise ValueError(f"Duplicate case id '{case.id}'")
        seen.add(case.id)


_MS = {"type": "integer", "minimum": 0}

SUITE_SCHEMA = {
    "type": "object",
    "required": ["cases"],
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "settings": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "base_url": {"type": "string", "minLength": 1},
                "input_selector": {"type": "string", "minLength": 1},
                "output_selector": {"type": "string", "minLength": 1},
                "headless": {"type": "boolean"},
                "viewport": {
                    "type": "object",
                    "required": ["width", "height"],
                    "properties": {
                        "width": {"type": "integer", "minimum": 1},
                        "height": {"type": "integer", "minimum": 1},
                    },
                },
                "clear_delay_ms": _MS,
                "settle": {"enum": ["fixed", "poll"]},
                "settle_ms": _MS,
                "poll_interval_ms": {"type": "integer", "minimum": 1},
                "poll_timeout_ms": {"type": "integer", "minimum": 1},
                "keystroke_delay_ms": _MS,
                "keystroke_settle_ms": _MS,
                "final_settle_ms": _MS,
                "hold_ms": _MS,
                "results_dir": {"type": "string"},
                "screenshots": {"type": "boolean"},
                "fail_fast": {"type": "boolean"},
            },
        },
        "cases": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["id", "expected"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "title": {"type": "string"},
                    "input": {"type": "string"},
                    "repeat": {"type": "integer", "minimum": 1},
                    "expected": {"type": "string"},
                    "mode": {"enum": list(MODES)},
                    "realtime": {"type": "boolean"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
            },
        },
    },
}
_validator = Draft7Validator(SUITE_SCHEMA)
