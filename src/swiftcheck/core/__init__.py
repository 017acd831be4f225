"""Core models and the extraction/verdict engine exposed at the package level."""
from .classifier import classify, classify_realtime
from .driver import translate
from .extractor import SINHALA_PATTERN, SINHALA_RANGE, Found, NotFound, extract
from .models import NEGATIVE, POSITIVE, MonitorResult, TestCase, Verdict
from .monitor import monitor_realtime
from .settle import FixedDelay, PollUntilStable, SettleStrategy

__all__ = [
    "NEGATIVE",
    "POSITIVE",
    "SINHALA_PATTERN",
    "SINHALA_RANGE",
    "FixedDelay",
    "Found",
    "MonitorResult",
    "NotFound",
    "PollUntilStable",
    "SettleStrategy",
    "TestCase",
    "Verdict",
    "classify",
    "classify_realtime",
    "extract",
    "monitor_realtime",
    "translate",
]
