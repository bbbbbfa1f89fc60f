from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from feedback_analyzer.core.errors import EmptyHistory, ValidationError
from feedback_analyzer.core.orchestrator import Orchestrator
from feedback_analyzer.services.history_store import HistoryStore
from feedback_analyzer.services.intake_service import FeedbackIntakeService
from feedback_analyzer.workflows.export_history import ExportHistoryWorkflow
from feedback_analyzer.workflows.submit_feedback import SubmitFeedbackWorkflow
from tests.helpers.cli import RecordingRenderer
from tests.helpers.factories import FakeTimer, make_assembler


def _orchestrator(history: HistoryStore, renderer: RecordingRenderer | None = None) -> Orchestrator:
    service = FeedbackIntakeService(make_assembler(), history, timer=FakeTimer())
    return Orchestrator(
        workflows={
            "submit_feedback": SubmitFeedbackWorkflow(intake_service=service, renderer=renderer),
            "export_history": ExportHistoryWorkflow(history=history),
        }
    )


def test_submit_workflow_renders_result_then_history(history: HistoryStore) -> None:
    renderer = RecordingRenderer()
    orchestrator = _orchestrator(history, renderer)

    result = orchestrator.execute(
        "submit_feedback",
        {"text": "terrible awful service, worst experience", "category": "service", "priority": "urgent"},
    )

    assert result["record"]["sentiment"] == {"score": 5, "label": "negative"}
    assert renderer.results[0].id == result["record"]["id"]
    assert renderer.histories == [history.list()]


def test_submit_workflow_can_skip_rendering(history: HistoryStore) -> None:
    renderer = RecordingRenderer()
    orchestrator = _orchestrator(history, renderer)

    orchestrator.execute(
        "submit_feedback",
        {"text": "fine", "category": "general", "priority": "low", "render": False},
    )

    assert renderer.results == []
    assert len(history) == 1


def test_submit_workflow_propagates_validation_errors(
    history: HistoryStore, caplog: pytest.LogCaptureFixture
) -> None:
    orchestrator = _orchestrator(history, RecordingRenderer())

    with caplog.at_level(logging.WARNING):
        with pytest.raises(ValidationError):
            orchestrator.execute(
                "submit_feedback", {"text": "", "category": "general", "priority": "low"}
            )

    assert any(record.getMessage() == "workflow_failed" for record in caplog.records)
    assert len(history) == 0


def test_export_workflow_writes_file(history: HistoryStore, tmp_path: Path) -> None:
    orchestrator = _orchestrator(history)
    orchestrator.execute(
        "submit_feedback", {"text": "great", "category": "product", "priority": "low"}
    )

    result = orchestrator.execute("export_history", {"output_dir": tmp_path / "exports"})

    path = Path(result["path"])
    assert path.name == "feedback-analysis-2026-10-12.json"
    assert result["media_type"] == "application/json"
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["totalFeedback"] == 1
    assert payload["data"][0]["originalText"] == "great"


def test_export_workflow_without_directory_returns_content_only(history: HistoryStore) -> None:
    orchestrator = _orchestrator(history)
    orchestrator.execute(
        "submit_feedback", {"text": "ok", "category": "general", "priority": "low"}
    )

    result = orchestrator.execute("export_history", {})

    assert "path" not in result
    assert json.loads(result["content"])["totalFeedback"] == 1


def test_export_workflow_on_empty_history(history: HistoryStore) -> None:
    with pytest.raises(EmptyHistory):
        _orchestrator(history).execute("export_history", {})


def test_unknown_workflow_raises_key_error(history: HistoryStore) -> None:
    with pytest.raises(KeyError):
        _orchestrator(history).execute("summarize", {})


def test_register_adds_workflow(history: HistoryStore) -> None:
    orchestrator = Orchestrator(workflows={})
    orchestrator.register(ExportHistoryWorkflow(history=history))
    assert "export_history" in orchestrator.workflows
