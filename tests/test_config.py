"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from sdlcexplorer.config import (
    DEFAULT_ARRANGE_TIME_LIMIT_MS,
    DEFAULT_CONTENT_DIR,
    DEFAULT_TICK_PERIOD_MS,
    ENV_FIELDS,
    ENV_PREFIX,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for suffix in ENV_FIELDS:
        monkeypatch.delenv(ENV_PREFIX + suffix, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings(use_env=False)
        assert settings.tick_period_ms == DEFAULT_TICK_PERIOD_MS == 3000
        assert settings.content_dir == DEFAULT_CONTENT_DIR
        assert settings.default_topic == "planning"
        assert settings.log_level == "INFO"
        assert settings.arrange_time_limit_ms == DEFAULT_ARRANGE_TIME_LIMIT_MS == 120_000

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("tick_period_ms: 1500\ndefault_topic: analysis\n", encoding="utf-8")
        settings = load_settings(path, use_env=False)
        assert settings.tick_period_ms == 1500
        assert settings.default_topic == "analysis"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml", use_env=False)

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("tick_period_ms: 1500\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SDLC_EXPLORER_TICK_MS", "500")
        monkeypatch.setenv("SDLC_EXPLORER_CONTENT_DIR", str(tmp_path))

        settings = load_settings(path)
        assert settings.tick_period_ms == 500
        assert settings.content_dir == tmp_path

    def test_non_positive_tick_rejected(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SDLC_EXPLORER_TICK_MS", "0")
        with pytest.raises(ValidationError):
            load_settings()

    def test_arrange_time_limit_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SDLC_EXPLORER_ARRANGE_TIME_MS", "60000")
        settings = load_settings()
        assert settings.arrange_time_limit_ms == 60000

    def test_non_positive_time_limit_rejected(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SDLC_EXPLORER_ARRANGE_TIME_MS", "0")
        with pytest.raises(ValidationError):
            load_settings()
