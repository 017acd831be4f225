from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from swiftcheck.core import NEGATIVE, POSITIVE
from swiftcheck.suite import RunSettings, SuiteOptions, load_suite, select_cases
from swiftcheck.suite.models import DEFAULT_INPUT_SELECTOR


def _write_suite(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "suite.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_packaged_suite_loads_all_scenarios() -> None:
    suite = load_suite()
    ids = [case.id for case in suite.cases]
    assert len(ids) == 35
    assert ids[0] == "Pos_Fun_0001"
    assert ids[-1] == "Pos_UI_0001"
    by_id = {case.id: case for case in suite.cases}
    assert by_id["Pos_Fun_0001"].expected == "මම ගෙදර යනවා."
    assert by_id["Pos_Fun_0021"].input == "mama gedhara yanavaa.\noyaa enavadha?"
    assert by_id["Neg_Fun_0009"].input == "mama " * 100
    assert by_id["Neg_Fun_0001"].input == ""
    assert by_id["Neg_Fun_0001"].mode == NEGATIVE
    assert by_id["Pos_UI_0001"].realtime
    assert "\u200d" in by_id["Pos_Fun_0007"].expected
    assert sum(1 for case in suite.cases if case.mode == NEGATIVE) == 10
    assert suite.settings.input_selector == DEFAULT_INPUT_SELECTOR
    assert suite.settings.viewport == (1280, 720)
    assert suite.settings.settle_ms == 4000


def test_select_cases_filters() -> None:
    suite = load_suite()
    negatives = select_cases(suite, SuiteOptions(mode=NEGATIVE))
    assert len(negatives) == 10
    assert [c.id for c in select_cases(suite, SuiteOptions(cases=("Pos_Fun_001*",)))][:2] == [
        "Pos_Fun_0010",
        "Pos_Fun_0011",
    ]
    assert [c.id for c in select_cases(suite, SuiteOptions(tags=("realtime",)))] == ["Pos_UI_0001"]
    remaining = select_cases(suite, SuiteOptions(mode=POSITIVE, skip_tags=("realtime",)))
    assert len(remaining) == 24


def test_custom_suite_settings_and_defaults(tmp_path: Path) -> None:
    path = _write_suite(
        tmp_path,
        """
        name: local
        settings:
          base_url: http://localhost:8000/
          settle: poll
          poll_interval_ms: 100
          results_dir: shots
          headless: false
        cases:
          - id: A
            input: "ab"
            repeat: 2
            expected: "x"
            tags: [smoke]
        """,
    )
    suite = load_suite(str(path))
    assert suite.name == "local"
    assert suite.source == path.resolve()
    settings = suite.settings
    assert settings.base_url == "http://localhost:8000/"
    assert settings.settle == "poll"
    assert settings.results_dir == path.resolve().parent / "shots"
    assert settings.headless is False
    assert settings.settle_ms == RunSettings().settle_ms
    case = suite.cases[0]
    assert case.input == "abab"
    assert case.mode == POSITIVE
    assert case.tags == ("smoke",)


def test_schema_errors_are_reported(tmp_path: Path) -> None:
    path = _write_suite(
        tmp_path,
        """
        settings:
          settle: eventually
          unknown_key: 1
        cases:
          - id: A
            mode: sideways
        """,
    )
    with pytest.raises(ValueError) as excinfo:
        load_suite(str(path))
    message = str(excinfo.value)
    assert message.startswith("Suite schema validation failed")
    assert "settings/settle" in message
    assert "cases/0" in message


def test_duplicate_ids_rejected(tmp_path: Path) -> None:
    path = _write_suite(
        tmp_path,
        """
        cases:
          - {id: A, expected: x}
          - {id: A, expected: y}
        """,
    )
    with pytest.raises(ValueError, match="Duplicate case id 'A'"):
        load_suite(str(path))


def test_realtime_case_must_be_positive(tmp_path: Path) -> None:
    path = _write_suite(
        tmp_path,
        """
        cases:
          - {id: A, expected: x, mode: negative, realtime: true}
        """,
    )
    with pytest.raises(ValueError, match="must use positive mode"):
        load_suite(str(path))


def test_settings_merge_rejects_unknown_keys() -> None:
    settings = RunSettings().merged({"settle_ms": 100, "hold_ms": None})
    assert settings.settle_ms == 100
    assert settings.hold_ms == 0
    with pytest.raises(ValueError, match="Unknown setting"):
        RunSettings().merged({"retries": 3})


def test_zero_poll_timeout_rejected_by_schema(tmp_path: Path) -> None:
    path = _write_suite(
        tmp_path,
        """
        settings:
          settle: poll
          poll_timeout_ms: 0
        cases:
          - id: A
            input: mama
            expected: x
        """,
    )
    with pytest.raises(ValueError, match="settings/poll_timeout_ms"):
        load_suite(str(path))
