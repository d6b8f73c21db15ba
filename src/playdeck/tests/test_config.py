"""Tests for playdeck.core.config."""

import pytest
from pathlib import Path
from pydantic import ValidationError

from playdeck.core.config import PlayerSettings


class TestPlayerSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PLAYDECK_PROJECTS_DIR", "PLAYDECK_MAX_CHAIN",
                     "PLAYDECK_HISTORY_LIMIT", "PLAYDECK_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = PlayerSettings.from_env()
        assert settings.projects_dir == Path("./projects")
        assert settings.max_chain == 1000
        assert settings.history_limit == 50
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PLAYDECK_PROJECTS_DIR", str(tmp_path))
        monkeypatch.setenv("PLAYDECK_MAX_CHAIN", "25")
        monkeypatch.setenv("PLAYDECK_HISTORY_LIMIT", "5")
        monkeypatch.setenv("PLAYDECK_LOG_LEVEL", "debug")
        settings = PlayerSettings.from_env()
        assert settings.projects_dir == tmp_path
        assert settings.max_chain == 25
        assert settings.history_limit == 5
        assert settings.log_level == "DEBUG"

    def test_max_chain_must_be_positive(self):
        with pytest.raises(ValidationError):
            PlayerSettings(max_chain=0)

    def test_bad_number_in_env(self, monkeypatch):
        monkeypatch.setenv("PLAYDECK_MAX_CHAIN", "lots")
        with pytest.raises(ValueError):
            PlayerSettings.from_env()
