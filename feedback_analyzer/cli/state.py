"""CLI runtime state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from feedback_analyzer.core.clock import SimulatedLatency
    from feedback_analyzer.services.config_service import ConfigService
    from feedback_analyzer.services.history_store import HistoryStore
    from feedback_analyzer.services.intake_service import FeedbackIntakeService
    from feedback_analyzer.services.sentiment_classifier import SentimentClassifier

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass
class AppState:
    """Services shared by CLI commands for a single invocation.

    Durable data lives in the history store; nothing here is written to disk.
    """

    history: "HistoryStore"
    intake_service: Optional["FeedbackIntakeService"] = field(default=None, repr=False)
    classifier: Optional["SentimentClassifier"] = field(default=None, repr=False)
    latency: Optional["SimulatedLatency"] = field(default=None, repr=False)
    config_service: Optional["ConfigService"] = field(default=None, repr=False)
    export_directory: Path = field(default_factory=lambda: Path("."))


__all__ = ["AppState", "PROJECT_ROOT"]
