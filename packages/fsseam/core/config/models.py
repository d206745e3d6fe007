"""Configuration models for fsseam."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ConfigBase(BaseModel):
    """Base class for all fsseam configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit one JSON object per log line")


class ImportConfig(BaseModel):
    """Dealership import behavior."""

    encoding: str = Field(default="utf-8", description="Text encoding of import files")
    skip_blank_lines: bool = Field(default=True, description="Ignore whitespace-only lines")
    suffix: str = Field(default=".csv", description="File suffix picked up from directories")


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = LoggingConfig()
    importer: ImportConfig = ImportConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("fsseam.yaml")
