"""Tests for pydantic validation of the merged config."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hanvitt.core.config import Config
from hanvitt.core.config_schema import HanvittConfig, LedgerConfig, LoggingConfig, PathsConfig
from hanvitt.core.exceptions import ConfigurationError


class TestValidated:
    def test_defaults_validate(self, tmp_dir):
        cfg = Config(data_dir=tmp_dir).validated()
        assert isinstance(cfg, HanvittConfig)
        assert cfg.paths.data_dir == Path(tmp_dir)
        assert cfg.smtp.port == 465
        assert cfg.ledger.trend_months == 6

    def test_env_strings_are_coerced(self, tmp_dir, monkeypatch):
        monkeypatch.setenv("HANVITT_SMTP__PORT", "587")
        monkeypatch.setenv("HANVITT_SMTP__USE_SSL", "false")
        cfg = Config(data_dir=tmp_dir).validated()
        assert cfg.smtp.port == 587
        assert cfg.smtp.use_ssl is False

    def test_invalid_port(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("smtp.port", "not-a-port")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            config.validated()

    def test_extra_sections_allowed(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"analytics": {"enabled": True}})
        cfg = config.validated()
        assert cfg.model_extra["analytics"] == {"enabled": True}


class TestSectionModels:
    def test_paths_expand_user(self):
        paths = PathsConfig(data_dir="~/somewhere")
        assert "~" not in str(paths.data_dir)

    def test_log_level_uppercased(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="chatty")

    def test_trend_months_positive(self):
        with pytest.raises(ValidationError):
            LedgerConfig(trend_months=0)
