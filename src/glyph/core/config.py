"""Configuration management for the glyph font asset service."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidLogLevelError,
    InvalidYamlError,
)


class GlyphConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GLYPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font storage and cache configuration."""

    # Storage
    font_root: Path = Field(Path("data/fonts"), description="Directory holding font files")
    create_font_root: bool = Field(True, description="Create the font directory if missing")

    # Upload limits
    max_upload_mb: float = Field(50.0, gt=0.0, description="Maximum decoded upload size in MB")

    # Cache
    max_cache_memory_mb: float = Field(
        0.0, ge=0.0, description="Memory budget for cached fonts in MB (0 = unlimited)"
    )
    preload_fonts: bool = Field(False, description="Load every font into memory at startup")

    # Logging
    log_level: str = Field("INFO", description="Logging level name")

    @field_validator("font_root")
    @classmethod
    def expand_font_root(cls, v: Path) -> Path:
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidLogLevelError(v)
        return level

    @property
    def max_upload_bytes(self) -> int:
        return int(self.max_upload_mb * 1024 * 1024)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "GlyphConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "GlyphConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        # Load from environment variables/.env file
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with config_path.open() as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e

    if config_data is None:
        raise EmptyConfigFileError(str(config_path))

    # YAML-based configs do not read the .env file
    class TempConfig(config_class):
        model_config = SettingsConfigDict(
            env_prefix=config_class.model_config.get("env_prefix", ""),
            env_file=None,
            case_sensitive=False,
            extra="ignore",
        )

    try:
        return TempConfig(**config_data)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigLoadError(str(e)) from e
