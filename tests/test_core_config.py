"""
Unit tests for core configuration.

Tests configuration loading, validation, and defaults.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from glyph.core.config import GlyphConfig, load_config_from_yaml
from glyph.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)


class TestGlyphConfig:
    """Test GlyphConfig validation."""

    def test_defaults(self, monkeypatch):
        """Test configuration defaults."""
        for key in ("GLYPH_FONT_ROOT", "GLYPH_MAX_UPLOAD_MB", "GLYPH_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

        config = GlyphConfig(_env_file=None)

        assert config.font_root == Path("data/fonts")
        assert config.create_font_root is True
        assert config.max_upload_mb == 50.0
        assert config.max_cache_memory_mb == 0.0
        assert config.preload_fonts is False
        assert config.log_level == "INFO"
        assert config.max_upload_bytes == 50 * 1024 * 1024

    def test_env_vars(self, monkeypatch, tmp_path):
        """Test loading from GLYPH_ environment variables."""
        monkeypatch.setenv("GLYPH_FONT_ROOT", str(tmp_path))
        monkeypatch.setenv("GLYPH_MAX_CACHE_MEMORY_MB", "64")
        monkeypatch.setenv("GLYPH_PRELOAD_FONTS", "true")

        config = GlyphConfig(_env_file=None)

        assert config.font_root == tmp_path
        assert config.max_cache_memory_mb == 64.0
        assert config.preload_fonts is True

    def test_font_root_expands_user(self):
        config = GlyphConfig(_env_file=None, font_root="~/fonts")

        assert config.font_root == Path.home() / "fonts"

    def test_log_level_normalized(self):
        assert GlyphConfig(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            GlyphConfig(_env_file=None, log_level="chatty")

    def test_upload_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            GlyphConfig(_env_file=None, max_upload_mb=0)

    def test_cache_budget_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            GlyphConfig(_env_file=None, max_cache_memory_mb=-1)


class TestYamlLoading:
    """Test YAML configuration loading."""

    def test_from_yaml(self, tmp_path):
        config_path = tmp_path / "glyph.yaml"
        config_path.write_text(
            yaml.dump({"font_root": str(tmp_path / "fonts"), "max_upload_mb": 5})
        )

        config = GlyphConfig.from_yaml(config_path)

        assert isinstance(config, GlyphConfig)
        assert config.font_root == tmp_path / "fonts"
        assert config.max_upload_mb == 5.0

    def test_from_env_and_yaml_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GLYPH_FONT_ROOT", str(tmp_path))

        config = GlyphConfig.from_env_and_yaml(yaml_path=tmp_path / "missing.yaml")

        assert config.font_root == tmp_path

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileNotFoundError):
            load_config_from_yaml(tmp_path / "missing.yaml", GlyphConfig)

    def test_empty_file(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        with pytest.raises(EmptyConfigFileError):
            load_config_from_yaml(config_path, GlyphConfig)

    def test_invalid_yaml(self, tmp_path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("font_root: [unclosed")

        with pytest.raises(InvalidYamlError):
            load_config_from_yaml(config_path, GlyphConfig)

    def test_invalid_values(self, tmp_path):
        config_path = tmp_path / "invalid.yaml"
        config_path.write_text(yaml.dump({"max_upload_mb": -5}))

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config_from_yaml(config_path, GlyphConfig)

        assert isinstance(exc_info.value, ConfigurationError)
