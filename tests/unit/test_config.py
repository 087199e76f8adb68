"""
Unit tests for settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mushaf import config
from mushaf.config import DEFAULT_DATA_PATH, MushafSettings, configure, get_settings
from mushaf.constants import DEFAULT_SOURCE


class TestMushafSettings:
    """Test settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("DATA_PATH", "RANDOM_STRATEGY", "RANDOM_SEED", "LOG_LEVEL", "VALIDATE_ON_LOAD"):
            monkeypatch.delenv(f"MUSHAF_{name}", raising=False)

        settings = MushafSettings(_env_file=None)

        assert settings.data_path == DEFAULT_DATA_PATH
        assert settings.data_path.name == "quran.json"
        assert settings.validate_on_load is True
        assert settings.default_source == DEFAULT_SOURCE
        assert settings.random_strategy == "chapter_weighted"
        assert settings.random_seed is None
        assert settings.normalize_arabic_names is False
        assert settings.log_level == "WARNING"

    def test_string_path_converted(self):
        settings = MushafSettings(data_path="/srv/corpus/quran.json")
        assert settings.data_path == Path("/srv/corpus/quran.json")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MUSHAF_RANDOM_STRATEGY", "uniform")
        monkeypatch.setenv("MUSHAF_RANDOM_SEED", "7")
        monkeypatch.setenv("MUSHAF_VALIDATE_ON_LOAD", "false")

        settings = MushafSettings()

        assert settings.random_strategy == "uniform"
        assert settings.random_seed == 7
        assert settings.validate_on_load is False

    def test_log_level_case_insensitive(self):
        assert MushafSettings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("field,value", [
        ("random_strategy", "weighted"),
        ("log_level", "TRACE"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            MushafSettings(**{field: value})


class TestGlobalSettings:
    """Test the process-wide settings."""

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_configure_replaces_settings(self, tmp_path):
        settings = configure(data_path=tmp_path / "quran.json", random_seed=3)

        assert get_settings() is settings
        assert config._default_settings is settings
        assert settings.random_seed == 3
