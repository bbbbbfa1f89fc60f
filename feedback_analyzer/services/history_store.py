"""Bounded, durable history of analyzed feedback.

Updates:
    v0.1.0 - 2026-10-12 - Added newest-first history with capacity eviction and export.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator

from ..core.clock import Clock, SystemClock, isoformat_utc
from ..core.errors import EmptyHistory, MalformedDurableState
from ..core.models import FeedbackRecord
from ..db.storage import StorageBackend

logger = logging.getLogger(__name__)

HISTORY_KEY = "feedbackHistory"
DEFAULT_CAPACITY = 10
EXPORT_PREFIX = "feedback-analysis"


@dataclass(slots=True, frozen=True)
class ExportSnapshot:
    """Point-in-time copy of the history ready to be written as a file."""

    media_type: ClassVar[str] = "application/json"

    export_date: str
    records: tuple[FeedbackRecord, ...]
    filename: str

    @property
    def total_feedback(self) -> int:
        return len(self.records)

    @property
    def data(self) -> list[FeedbackRecord]:
        return list(self.records)

    def as_dict(self) -> dict[str, Any]:
        return {
            "exportDate": self.export_date,
            "totalFeedback": self.total_feedback,
            "data": [record.as_dict() for record in self.records],
        }

    def to_json(self) -> str:
        """Serialize the snapshot as human-readable JSON (2-space indentation)."""

        return json.dumps(self.as_dict(), indent=2, ensure_ascii=False)

    def to_bytes(self) -> bytes:
        return self.to_json().encode("utf-8")


class HistoryStore:
    """Newest-first list of feedback records persisted on every mutation.

    The store loads its contents from ``storage`` on construction. Missing
    state yields an empty history. Unparseable state yields an empty history
    and a warning unless ``strict`` is set, in which case
    :class:`MalformedDurableState` is raised.
    """

    def __init__(
        self,
        storage: StorageBackend,
        *,
        key: str = HISTORY_KEY,
        capacity: int = DEFAULT_CAPACITY,
        strict: bool = False,
        clock: Clock | None = None,
    ) -> None:
        """Load history from durable storage.

        Args:
            storage (StorageBackend): Key/value backend.
            key (str): Storage key holding the serialized history.
            capacity (int): Maximum number of records retained.
            strict (bool): Raise on malformed state instead of starting empty.
            clock (Clock | None): Source for export dates.

        Raises:
            ValueError: If ``capacity`` is not positive.
            MalformedDurableState: If ``strict`` and the stored history is corrupt.
        """

        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self._storage = storage
        self._key = key
        self._capacity = capacity
        self._strict = strict
        self._clock = clock or SystemClock()
        self._lock = threading.RLock()
        self._records: list[FeedbackRecord] = self._load()

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, record: FeedbackRecord) -> None:
        """Insert ``record`` at the front, evict beyond capacity and persist."""

        with self._lock:
            updated = [record, *self._records]
            evicted = len(updated) - self._capacity
            del updated[self._capacity :]
            self._persist(updated)
            self._records = updated
        logger.info(
            "history_record_added",
            extra={
                "record_id": record.id,
                "history_size": len(self._records),
                "evicted": max(evicted, 0),
            },
        )

    def list(self) -> list[FeedbackRecord]:
        """Return a copy of the history, newest first."""

        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        """Drop every record and remove the durable state.

        Confirmation belongs to the caller; this method never prompts.
        """

        with self._lock:
            self._storage.remove(self._key)
            self._records = []
        logger.info("history_cleared", extra={"storage_key": self._key})

    def export(self) -> ExportSnapshot:
        """Snapshot the history for download.

        Returns:
            ExportSnapshot: Export payload and suggested filename.

        Raises:
            EmptyHistory: If there is nothing to export.
        """

        with self._lock:
            if not self._records:
                raise EmptyHistory("No data to export")
            records = tuple(self._records)
        now = self._clock.now()
        export_date = isoformat_utc(now)
        return ExportSnapshot(
            export_date=export_date,
            records=records,
            filename=f"{EXPORT_PREFIX}-{export_date.split('T')[0]}.json",
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FeedbackRecord]:
        return iter(self.list())

    def _persist(self, records: list[FeedbackRecord]) -> None:
        payload = json.dumps([record.as_dict() for record in records], ensure_ascii=False)
        self._storage.set(self._key, payload)

    def _load(self) -> list[FeedbackRecord]:
        try:
            raw = self._storage.get(self._key)
            if raw is None:
                return []
            data = json.loads(raw)
            if data is None:
                return []
            if not isinstance(data, list):
                raise TypeError(f"expected a list, found {type(data).__name__}")
            records = [FeedbackRecord.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, RecursionError) as exc:
            if self._strict:
                raise MalformedDurableState(
                    f"Stored history under '{self._key}' is malformed: {exc}",
                    key=self._key,
                ) from exc
            logger.warning(
                "history_state_malformed",
                extra={"storage_key": self._key, "error": str(exc)},
            )
            return []
        return records[: self._capacity]


__all__ = [
    "DEFAULT_CAPACITY",
    "EXPORT_PREFIX",
    "ExportSnapshot",
    "HISTORY_KEY",
    "HistoryStore",
]
