from pathlib import Path

import pytest

from feedback_analyzer.services.config_service import (
    ConfigService,
    HistorySettings,
    ProcessingSettings,
)


def _write_config(config_dir: Path, settings: str, storage: str = "storage: {backend: memory}\n") -> Path:
    config_dir.mkdir(exist_ok=True)
    (config_dir / "settings.yaml").write_text(settings, encoding="utf-8")
    (config_dir / "storage.yaml").write_text(storage, encoding="utf-8")
    return config_dir


def test_config_service_loads(tmp_path: Path) -> None:
    config_dir = _write_config(
        tmp_path / "config",
        "app: {name: test, version: '0.0.1'}\n"
        "history: {capacity: 3, storage_key: teamHistory, strict_load: true}\n"
        "processing: {simulate_delay: false, delay_min_ms: 10, delay_max_ms: 20}\n",
    )

    service = ConfigService(config_path=config_dir)

    assert service.app_metadata["name"] == "test"
    assert service.config_dir == config_dir.resolve()
    assert service.history_settings == HistorySettings(
        capacity=3, storage_key="teamHistory", strict_load=True
    )
    assert service.processing_settings == ProcessingSettings(
        simulate_delay=False, delay_min_ms=10, delay_max_ms=20
    )
    assert service.storage_config == {"backend": "memory"}


def test_config_service_defaults_for_missing_sections(tmp_path: Path) -> None:
    config_dir = _write_config(tmp_path / "config", "app: {name: bare}\n")

    service = ConfigService(config_path=config_dir)

    assert service.history_settings == HistorySettings()
    assert service.processing_settings == ProcessingSettings()
    assert service.logging_config == {}
    assert service.export_config == {}


def test_config_service_expands_storage_env_vars(tmp_path: Path, monkeypatch) -> None:
    config_dir = _write_config(
        tmp_path / "config",
        "export: {directory: '${EXPORT_ROOT}/out'}\n",
        'storage:\n  backend: json\n  path: "${DATA_ROOT}/state"\n',
    )
    monkeypatch.setenv("DATA_ROOT", "/var/lib/feedback")
    monkeypatch.setenv("EXPORT_ROOT", "/srv")

    service = ConfigService(config_path=config_dir)

    assert service.storage_config["path"] == "/var/lib/feedback/state"
    assert service.export_config["directory"] == "/srv/out"


def test_config_path_from_environment(tmp_path: Path, monkeypatch) -> None:
    config_dir = _write_config(tmp_path / "env-config", "app: {name: from-env}\n")
    monkeypatch.setenv("FA_CONFIG_PATH", str(config_dir))

    assert ConfigService().app_metadata["name"] == "from-env"


@pytest.mark.parametrize(
    "history",
    ["{capacity: 0}", "{capacity: -2}", "{capacity: ten}", "{storage_key: '  '}"],
)
def test_invalid_history_settings(tmp_path: Path, history: str) -> None:
    config_dir = _write_config(tmp_path / "config", f"history: {history}\n")
    with pytest.raises(ValueError):
        ConfigService(config_path=config_dir).history_settings


@pytest.mark.parametrize(
    "processing",
    ["{delay_min_ms: -1}", "{delay_min_ms: 500, delay_max_ms: 100}"],
)
def test_invalid_processing_settings(tmp_path: Path, processing: str) -> None:
    config_dir = _write_config(tmp_path / "config", f"processing: {processing}\n")
    with pytest.raises(ValueError):
        ConfigService(config_path=config_dir).processing_settings


def test_missing_config_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ConfigService(config_path=tmp_path / "absent")


def test_settings_must_be_a_mapping(tmp_path: Path) -> None:
    config_dir = _write_config(tmp_path / "config", "- just\n- a list\n")
    with pytest.raises(ValueError):
        ConfigService(config_path=config_dir)


def test_bundled_configuration_is_valid() -> None:
    service = ConfigService(config_path=Path(__file__).resolve().parents[1] / "config")

    assert service.history_settings.capacity == 10
    assert service.history_settings.storage_key == "feedbackHistory"
    assert service.processing_settings.delay_min_ms == 2000
    assert service.processing_settings.delay_max_ms == 4000
    effective = service.as_dict()
    assert effective["storage"]["backend"] == "json"
    assert effective["app"]["name"] == "Feedback Analyzer"
