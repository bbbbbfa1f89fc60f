"""Runtime wiring for the feedback analyzer CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from feedback_analyzer.cli.renderers import ConsoleRenderer
from feedback_analyzer.cli.state import AppState
from feedback_analyzer.core.clock import SimulatedLatency
from feedback_analyzer.core.logging_setup import configure_logging
from feedback_analyzer.core.logging_setup import set_runtime_level
from feedback_analyzer.core.orchestrator import Orchestrator
from feedback_analyzer.db.storage import create_storage
from feedback_analyzer.services.config_service import ConfigService
from feedback_analyzer.services.feedback_assembler import FeedbackAssembler
from feedback_analyzer.services.history_store import HistoryStore
from feedback_analyzer.services.intake_service import FeedbackIntakeService
from feedback_analyzer.services.sentiment_classifier import SentimentClassifier
from feedback_analyzer.workflows.export_history import ExportHistoryWorkflow
from feedback_analyzer.workflows.submit_feedback import SubmitFeedbackWorkflow

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: tuple[Orchestrator, AppState] | None = None

_DEFAULT_CONFIG_SERVICE = ConfigService
_DEFAULT_STORAGE_FACTORY = create_storage
_DEFAULT_RENDERER = ConsoleRenderer


def initialize_runtime() -> tuple[Orchestrator, AppState]:
    """Initialize core services and the hydrated history for CLI usage."""

    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls()
    configure_logging(config_service.logging_config)
    logger.debug("Runtime initialization starting.")

    storage_factory = _resolve_dependency("create_storage", _DEFAULT_STORAGE_FACTORY)
    storage = storage_factory(config_service.storage_config)

    history_settings = config_service.history_settings
    history = HistoryStore(
        storage,
        key=history_settings.storage_key,
        capacity=history_settings.capacity,
        strict=history_settings.strict_load,
    )

    processing = config_service.processing_settings
    latency = SimulatedLatency(
        processing.delay_min_ms,
        processing.delay_max_ms,
        enabled=processing.simulate_delay,
    )
    classifier = SentimentClassifier()
    intake_service = FeedbackIntakeService(
        FeedbackAssembler(classifier=classifier),
        history,
        latency=latency,
    )
    renderer_cls = _resolve_dependency("ConsoleRenderer", _DEFAULT_RENDERER)

    orchestrator = Orchestrator(
        workflows={
            "submit_feedback": SubmitFeedbackWorkflow(
                intake_service=intake_service, renderer=renderer_cls()
            ),
            "export_history": ExportHistoryWorkflow(history=history),
        }
    )
    state = AppState(
        history=history,
        intake_service=intake_service,
        classifier=classifier,
        latency=latency,
        config_service=config_service,
        export_directory=Path(config_service.export_config.get("directory") or "."),
    )
    logger.debug("Runtime initialized (history size=%s).", len(history))
    return orchestrator, state


def get_runtime() -> tuple[Orchestrator, AppState]:
    """Return the lazily-initialized orchestrator and CLI state."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: tuple[Orchestrator, AppState] | None) -> None:
    """Replace the cached runtime tuple."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    orchestrator, _ = get_runtime()
    return orchestrator


def get_state() -> AppState:
    _, state = get_runtime()
    return state


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("feedback_analyzer.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "get_orchestrator",
    "get_runtime",
    "get_state",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
