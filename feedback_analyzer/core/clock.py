"""Injectable time sources.

Updates:
    v0.1.0 - 2026-10-12 - Added wall clock, record id sequence and simulated latency.
"""

from __future__ import annotations

import random
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Protocol


class Clock(Protocol):
    """Protocol describing the wall-clock source used to stamp records."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""

        ...


class SystemClock:
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def isoformat_utc(moment: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string with millisecond precision.

    Args:
        moment (datetime): Aware or naive (assumed UTC) datetime.

    Returns:
        str: Timestamp such as ``2026-10-12T08:30:00.125Z``.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def epoch_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


class RecordIdSequence:
    """Derives record ids from creation time, bumping on collisions.

    Two records created within the same millisecond would otherwise share an
    id, so each issued id is at least one greater than the previous one.
    """

    def __init__(self, last_issued: int = 0) -> None:
        self._last = last_issued
        self._lock = threading.Lock()

    def next_id(self, moment: datetime) -> int:
        with self._lock:
            candidate = max(epoch_millis(moment), self._last + 1)
            self._last = candidate
            return candidate

    def observe(self, issued: int) -> None:
        """Advance the sequence past an id loaded from storage."""

        with self._lock:
            self._last = max(self._last, issued)


class SimulatedLatency:
    """Artificial wait standing in for a hypothetical analysis backend.

    The duration is drawn uniformly from ``[min_ms, max_ms)``. There is no
    cancellation and no timeout.
    """

    def __init__(
        self,
        min_ms: int = 2000,
        max_ms: int = 4000,
        *,
        enabled: bool = True,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_ms < 0 or max_ms < min_ms:
            raise ValueError(
                f"Invalid latency range: [{min_ms}, {max_ms}) milliseconds."
            )
        self.min_ms = min_ms
        self.max_ms = max_ms
        self.enabled = enabled
        self._rng = rng or random.Random()
        self._sleep = sleep

    def draw_ms(self) -> float:
        return self.min_ms + self._rng.random() * (self.max_ms - self.min_ms)

    def wait(self) -> float:
        """Block for a randomized duration.

        Returns:
            float: Milliseconds slept (0 when disabled).
        """

        if not self.enabled:
            return 0.0
        duration_ms = self.draw_ms()
        self._sleep(duration_ms / 1000)
        return duration_ms


__all__ = [
    "Clock",
    "RecordIdSequence",
    "SimulatedLatency",
    "SystemClock",
    "epoch_millis",
    "isoformat_utc",
]
