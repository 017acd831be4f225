"""Reporting exports."""
from .base import ReportManager, Reporter
from .json_reporter import JsonReporter
from .summary import RunSummary
from .terminal import TerminalReporter

__all__ = [
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "RunSummary",
    "TerminalReporter",
]
