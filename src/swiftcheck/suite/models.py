"""Data models for scenario suites and run settings."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple

from swiftcheck.core.models import TestCase

DEFAULT_BASE_URL = "https://www.swifttranslator.com/"
DEFAULT_INPUT_SELECTOR = 'textarea[placeholder="Input Your Singlish Text Here."]'


@dataclass(frozen=True)
class RunSettings:
    base_url: str = DEFAULT_BASE_URL
    input_selector: str = DEFAULT_INPUT_SELECTOR
    output_selector: str = "textarea"
    headless: bool = True
    viewport: Tuple[int, int] = (1280, 720)
    clear_delay_ms: int = 500
    settle: str = "fixed"
    settle_ms: int = 4000
    poll_interval_ms: int = 250
    poll_timeout_ms: Optional[int] = None
    keystroke_delay_ms: int = 200
    keystroke_settle_ms: int = 500
    final_settle_ms: int = 2000
    hold_ms: int = 0
    results_dir: Path = Path("test-results")
    screenshots: bool = True
    fail_fast: bool = False

    def merged(self, overrides: Mapping[str, Any]) -> "RunSettings":
        """Copy with every non-``None`` entry of ``overrides`` applied."""

        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


@dataclass(frozen=True)
class Suite:
    name: str
    description: str
    cases: Sequence[TestCase]
    settings: RunSettings = field(default_factory=RunSettings)
    source: Optional[Path] = None


@dataclass(frozen=True)
class SuiteOptions:
    cases: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    skip_tags: Sequence[str] = field(default_factory=tuple)
    mode: Optional[str] = None
