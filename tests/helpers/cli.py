"""Shared test doubles and utilities for feedback_analyzer.cli tests."""

from __future__ import annotations

from typing import Any, Sequence

import feedback_analyzer.cli as cli
from feedback_analyzer.core.clock import SimulatedLatency
from feedback_analyzer.core.models import FeedbackRecord
from feedback_analyzer.core.orchestrator import Orchestrator
from feedback_analyzer.db.storage import InMemoryStorage
from feedback_analyzer.services.history_store import HistoryStore
from feedback_analyzer.services.intake_service import FeedbackIntakeService
from feedback_analyzer.services.sentiment_classifier import SentimentClassifier
from feedback_analyzer.workflows.export_history import ExportHistoryWorkflow
from feedback_analyzer.workflows.submit_feedback import SubmitFeedbackWorkflow
from tests.helpers.factories import FakeTimer, FixedClock, make_assembler


class RecordingRenderer:
    """Renderer double that keeps everything it was asked to show."""

    def __init__(self) -> None:
        self.results: list[FeedbackRecord] = []
        self.histories: list[list[FeedbackRecord]] = []

    def render_result(self, record: FeedbackRecord) -> None:
        self.results.append(record)

    def render_history(self, records: Sequence[FeedbackRecord]) -> None:
        self.histories.append(list(records))


class StubConfigService:
    """Config service stand-in exposing a fixed effective configuration."""

    config_dir = "/tmp/feedback-config"

    def as_dict(self) -> dict[str, Any]:
        return {
            "app": {"name": "Feedback Analyzer", "version": "0.1.0"},
            "history": {"capacity": 10, "storage_key": "feedbackHistory"},
        }


def mute_console(
    monkeypatch: Any,
    *,
    print_output: bool = True,
    json_output: bool = True,
) -> None:
    """Silence Rich console output during tests."""

    if print_output:
        monkeypatch.setattr(cli.console, "print", lambda *args, **kwargs: None)
        monkeypatch.setattr(cli.err_console, "print", lambda *args, **kwargs: None)
    if json_output:
        monkeypatch.setattr(cli.console, "print_json", lambda *args, **kwargs: None)


def patch_runtime(monkeypatch: Any, orchestrator: Orchestrator, state: cli.AppState) -> None:
    """Patch runtime helpers to operate on the supplied orchestrator and state."""

    monkeypatch.setattr(cli, "get_runtime", lambda: (orchestrator, state))
    monkeypatch.setattr(cli, "get_state", lambda: state)
    monkeypatch.setattr(cli, "get_orchestrator", lambda: orchestrator)
    monkeypatch.setattr(cli, "set_runtime", lambda runtime: None)


def make_cli_runtime(
    *, renderer: Any | None = None, storage: InMemoryStorage | None = None
) -> tuple[Orchestrator, cli.AppState]:
    """Build a ready-to-use CLI runtime backed by in-memory storage and no delay."""

    history = HistoryStore(storage or InMemoryStorage(), clock=FixedClock())
    latency = SimulatedLatency(enabled=False)
    classifier = SentimentClassifier()
    intake_service = FeedbackIntakeService(
        make_assembler(), history, latency=latency, timer=FakeTimer()
    )
    orchestrator = Orchestrator(
        workflows={
            "submit_feedback": SubmitFeedbackWorkflow(
                intake_service=intake_service,
                renderer=renderer if renderer is not None else cli.ConsoleRenderer(),
            ),
            "export_history": ExportHistoryWorkflow(history=history),
        }
    )
    state = cli.AppState(
        history=history,
        intake_service=intake_service,
        classifier=classifier,
        latency=latency,
        config_service=StubConfigService(),  # type: ignore[arg-type]
    )
    return orchestrator, state


__all__ = [
    "RecordingRenderer",
    "StubConfigService",
    "make_cli_runtime",
    "mute_console",
    "patch_runtime",
]
