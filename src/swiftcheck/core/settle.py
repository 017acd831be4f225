"""Strategies for waiting on the page's unsignalled translation pipeline."""
from __future__ import annotations

from typing import Callable, Optional

from swiftcheck.backends.base import PageSession

Probe = Callable[[], str]

SETTLE_STRATEGIES = ("fixed", "poll")


class SettleStrategy:
    """Interface for deciding when the page has finished updating."""

    def settle(self, session: PageSession, probe: Optional[Probe] = None) -> None:  # pragma: no cover
        raise NotImplementedError


class FixedDelay(SettleStrategy):
    """Waits a fixed duration regardless of what the page does."""

    def __init__(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("settle delay cannot be negative")
        self.ms = ms

    def settle(self, session: PageSession, probe: Optional[Probe] = None) -> None:
        session.wait(self.ms)

    def __repr__(self) -> str:
        return f"FixedDelay({self.ms})"


class PollUntilStable(SettleStrategy):
    """Samples ``probe`` until two consecutive samples agree.

    Bounded by ``timeout_ms``; the page is considered settled once the timeout
    is reached even if the samples kept changing.
    """

    def __init__(self, interval_ms: int = 250, timeout_ms: int = 4000) -> None:
        if interval_ms <= 0:
            raise ValueError("poll interval must be positive")
        if timeout_ms < interval_ms:
            raise ValueError("poll timeout must be at least one interval")
        self.interval_ms = interval_ms
        self.timeout_ms = timeout_ms

    def settle(self, session: PageSession, probe: Optional[Probe] = None) -> None:
        if probe is None:
            session.wait(self.timeout_ms)
            return
        elapsed = 0
        previous = None
        while elapsed < self.timeout_ms:
            session.wait(self.interval_ms)
            elapsed += self.interval_ms
            current = probe()
            if current == previous:
                return
            previous = current

    def __repr__(self) -> str:
        return f"PollUntilStable(interval_ms={self.interval_ms}, timeout_ms={self.timeout_ms})"


def build_settle_strategy(
    name: str,
    *,
    settle_ms: int,
    interval_ms: int = 250,
    timeout_ms: Optional[int] = None,
) -> SettleStrategy:
    if name == "fixed":
        return FixedDelay(settle_ms)
    if name == "poll":
        return PollUntilStable(interval_ms=interval_ms, timeout_ms=settle_ms if timeout_ms is None else timeout_ms)
    raise ValueError(f"Unknown settle strategy '{name}'. Supported: {', '.join(SETTLE_STRATEGIES)}")
