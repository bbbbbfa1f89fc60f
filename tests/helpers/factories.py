"""Deterministic clocks and record builders shared by tests."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

from feedback_analyzer.core.clock import RecordIdSequence
from feedback_analyzer.core.models import Category, FeedbackRecord, Priority
from feedback_analyzer.services.feedback_assembler import FeedbackAssembler

BASE_TIME = datetime(2026, 10, 12, 8, 30, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, moment: datetime = BASE_TIME) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


class SteppingClock:
    """Clock that advances by a fixed step on every read."""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(seconds=1)) -> None:
        self._current = start
        self._step = step

    def now(self) -> datetime:
        moment = self._current
        self._current += self._step
        return moment


class FakeTimer:
    """Monotonic timer double advanced by the fake sleeper."""

    def __init__(self) -> None:
        self.value = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.value

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.value += seconds


def make_assembler(clock=None, seed: int = 7) -> FeedbackAssembler:
    return FeedbackAssembler(
        clock=clock or SteppingClock(),
        rng=random.Random(seed),
        id_sequence=RecordIdSequence(),
    )


def make_record(
    text: str = "This product is great and I love it",
    category: Category | str = Category.PRODUCT,
    priority: Priority | str = Priority.LOW,
    *,
    assembler: FeedbackAssembler | None = None,
    elapsed_ms: int = 2500,
) -> FeedbackRecord:
    return (assembler or make_assembler()).assemble(text, category, priority, elapsed_ms)


__all__ = [
    "BASE_TIME",
    "FakeTimer",
    "FixedClock",
    "SteppingClock",
    "make_assembler",
    "make_record",
]
