"""Configuration service for the feedback analyzer.

Updates:
    v0.1.0 - 2026-10-12 - Exposed history, processing, storage and export settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core.config_loader import ConfigLoader


@dataclass(slots=True, frozen=True)
class HistorySettings:
    """History retention parameters."""

    capacity: int = 10
    storage_key: str = "feedbackHistory"
    strict_load: bool = False


@dataclass(slots=True, frozen=True)
class ProcessingSettings:
    """Simulated processing delay parameters."""

    simulate_delay: bool = True
    delay_min_ms: int = 2000
    delay_max_ms: int = 4000


class ConfigService:
    """Loads and exposes configuration for feedback analyzer components."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration caches.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")
        self._storage = self._loader.load("storage")

    @property
    def config_dir(self) -> Path:
        return self._loader.base_path

    @property
    def app_metadata(self) -> dict[str, Any]:
        """Return general application metadata."""
        return self._section(self._settings, "app")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        return self._section(self._settings, "logging")

    @property
    def storage_config(self) -> dict[str, Any]:
        """Return storage backend settings with environment variables expanded."""
        return self._expand_env_values(self._section(self._storage, "storage"))

    @property
    def export_config(self) -> dict[str, Any]:
        return self._expand_env_values(self._section(self._settings, "export"))

    @property
    def history_settings(self) -> HistorySettings:
        """Return validated history settings.

        Raises:
            ValueError: If the capacity is not a positive integer or the key is blank.
        """

        data = self._section(self._settings, "history")
        defaults = HistorySettings()
        capacity = data.get("capacity", defaults.capacity)
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise ValueError("history.capacity must be a positive integer.")
        key = data.get("storage_key", defaults.storage_key)
        if not isinstance(key, str) or not key.strip():
            raise ValueError("history.storage_key requires a non-empty value.")
        return HistorySettings(
            capacity=capacity,
            storage_key=key.strip(),
            strict_load=bool(data.get("strict_load", defaults.strict_load)),
        )

    @property
    def processing_settings(self) -> ProcessingSettings:
        """Return validated simulated-delay settings.

        Raises:
            ValueError: If the delay bounds are negative or inverted.
        """

        data = self._section(self._settings, "processing")
        defaults = ProcessingSettings()
        delay_min = int(data.get("delay_min_ms", defaults.delay_min_ms))
        delay_max = int(data.get("delay_max_ms", defaults.delay_max_ms))
        if delay_min < 0 or delay_max < delay_min:
            raise ValueError(
                "processing.delay_min_ms and delay_max_ms must satisfy 0 <= min <= max."
            )
        return ProcessingSettings(
            simulate_delay=bool(data.get("simulate_delay", defaults.simulate_delay)),
            delay_min_ms=delay_min,
            delay_max_ms=delay_max,
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the effective configuration for display."""

        history = self.history_settings
        processing = self.processing_settings
        return {
            "app": self.app_metadata,
            "logging": self.logging_config,
            "history": {
                "capacity": history.capacity,
                "storage_key": history.storage_key,
                "strict_load": history.strict_load,
            },
            "processing": {
                "simulate_delay": processing.simulate_delay,
                "delay_min_ms": processing.delay_min_ms,
                "delay_max_ms": processing.delay_max_ms,
            },
            "storage": self.storage_config,
            "export": self.export_config,
        }

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    @staticmethod
    def _section(document: dict[str, Any], name: str) -> dict[str, Any]:
        section = document.get(name, {})
        return dict(section) if isinstance(section, dict) else {}

    @staticmethod
    def _expand_env_values(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: ConfigService._expand_env_values(entry)
                for key, entry in value.items()
            }
        if isinstance(value, list):
            return [ConfigService._expand_env_values(item) for item in value]
        if isinstance(value, str):
            return os.path.expandvars(value)
        return value
