"""Unit tests for environment configuration."""

from pathlib import Path

from trainyard import config


class TestConfig:
    """Tests for config accessors."""

    def test_defaults(self, monkeypatch) -> None:
        for name in (
            "TRAINYARD_WORLDS_DIR",
            "TRAINYARD_WORLD",
            "TRAINYARD_LOG_LEVEL",
            "TRAINYARD_SESSION_LOGS",
            "TRAINYARD_LOGS_DIR",
        ):
            monkeypatch.delenv(name, raising=False)

        assert config.get_worlds_dir() == config.PROJECT_ROOT / "worlds"
        assert config.get_world_id() == "classic-village"
        assert config.get_log_level() == "INFO"
        assert config.session_logs_enabled() is False
        assert config.get_logs_dir() == config.PROJECT_ROOT / "logs"

    def test_overrides(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("TRAINYARD_WORLDS_DIR", str(tmp_path))
        monkeypatch.setenv("TRAINYARD_WORLD", "other")
        monkeypatch.setenv("TRAINYARD_LOG_LEVEL", "debug")
        monkeypatch.setenv("TRAINYARD_SESSION_LOGS", "true")

        assert config.get_worlds_dir() == Path(tmp_path)
        assert config.get_world_id() == "other"
        assert config.get_log_level() == "DEBUG"
        assert config.session_logs_enabled() is True
