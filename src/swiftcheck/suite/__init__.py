"""Scenario suite loading and case selection."""

from .loader import default_suite_path, load_suite, select_cases
from .models import RunSettings, Suite, SuiteOptions

__all__ = [
    "RunSettings",
    "Suite",
    "SuiteOptions",
    "default_suite_path",
    "load_suite",
    "select_cases",
]
