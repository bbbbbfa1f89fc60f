"""Feedback submission handling.

Updates:
    v0.1.0 - 2026-10-12 - Added validation, simulated latency and history recording.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Callable

from ..core.clock import SimulatedLatency
from ..core.errors import ValidationError
from ..core.models import Category, FeedbackRecord, Priority
from ..core.preprocessor import TextPreprocessor, default_preprocessor
from .feedback_assembler import FeedbackAssembler
from .history_store import HistoryStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all fields"


@dataclass(slots=True, frozen=True)
class FeedbackSubmission:
    """Validated submission ready for analysis."""

    text: str
    category: Category
    priority: Priority


class FeedbackIntakeService:
    """Validates submissions, analyzes them and records the result."""

    def __init__(
        self,
        assembler: FeedbackAssembler,
        history: HistoryStore,
        *,
        latency: SimulatedLatency | None = None,
        preprocessor: TextPreprocessor | None = None,
        timer: Callable[[], float] = perf_counter,
    ) -> None:
        """Initialize dependencies for feedback intake.

        Args:
            assembler (FeedbackAssembler): Builds records from validated input.
            history (HistoryStore): Receives every assembled record.
            latency (SimulatedLatency | None): Artificial processing delay; none when omitted.
            preprocessor (TextPreprocessor | None): Text cleanup helper.
            timer (Callable[[], float]): Monotonic timer in seconds.
        """

        self._assembler = assembler
        self._history = history
        self._latency = latency
        self._preprocessor = preprocessor or default_preprocessor
        self._timer = timer
        existing = history.list()
        if existing:
            assembler.id_sequence.observe(max(record.id for record in existing))

    @property
    def history(self) -> HistoryStore:
        return self._history

    def validate(
        self,
        text: str | None,
        category: str | Category | None,
        priority: str | Priority | None,
    ) -> FeedbackSubmission:
        """Check the three input fields.

        Args:
            text (str | None): Raw feedback text.
            category (str | Category | None): Category value.
            priority (str | Priority | None): Priority value.

        Returns:
            FeedbackSubmission: Trimmed text and parsed enum members.

        Raises:
            ValidationError: If a field is missing, blank or not a known value.
        """

        cleaned = self._preprocessor.clean(text or "")
        if not cleaned:
            raise ValidationError(MISSING_FIELDS_MESSAGE, field="text")
        return FeedbackSubmission(
            text=cleaned,
            category=_parse_enum(Category, category, "category"),
            priority=_parse_enum(Priority, priority, "priority"),
        )

    def submit(
        self,
        text: str | None,
        category: str | Category | None,
        priority: str | Priority | None,
    ) -> FeedbackRecord:
        """Validate, analyze and store one piece of feedback.

        Nothing is stored unless the record is fully assembled.

        Returns:
            FeedbackRecord: The stored record.

        Raises:
            ValidationError: If the submission is incomplete or invalid.
        """

        submission = self.validate(text, category, priority)
        started = self._timer()
        if self._latency is not None:
            self._latency.wait()
        elapsed_ms = round((self._timer() - started) * 1000)

        record = self._assembler.assemble(
            submission.text,
            submission.category,
            submission.priority,
            elapsed_ms,
        )
        self._history.add(record)
        logger.info(
            "feedback_submitted",
            extra={"record_id": record.id, "processing_time_ms": elapsed_ms},
        )
        return record

    def word_count(self, text: str | None) -> int:
        """Count words in (trimmed) text for live input feedback."""

        return self._preprocessor.count_words(self._preprocessor.clean(text or ""))


def _parse_enum(enum_cls, value, field: str):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(MISSING_FIELDS_MESSAGE, field=field)
    try:
        return enum_cls(value.strip().lower() if isinstance(value, str) else value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"Invalid {field} '{value}'. Choose one of: {allowed}.", field=field
        ) from exc


__all__ = [
    "FeedbackIntakeService",
    "FeedbackSubmission",
    "MISSING_FIELDS_MESSAGE",
]
