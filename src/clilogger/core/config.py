"""clilogger configuration: Pydantic model and loader."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from clilogger.core.constants import (
    AUDIT_FILENAME,
    CLILOGGER_DIR_NAME,
    CONFIG_FILENAME,
    DEFAULT_PAUSE_SECONDS,
    LOG_FILENAME,
    MAX_PAUSE_SECONDS,
)
from clilogger.core.exceptions import ConfigError


def clilogger_dir() -> Path:
    """Return the default clilogger data directory (~/.clilogger)."""
    return Path.home() / CLILOGGER_DIR_NAME


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class StorageConfig(BaseModel):
    directory: str = ""  # empty → use default
    log_filename: str = LOG_FILENAME
    audit_filename: str = AUDIT_FILENAME

    @field_validator("log_filename", "audit_filename")
    @classmethod
    def reject_blank_filename(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("File names must not be blank")
        return v


class InteractiveConfig(BaseModel):
    pause_seconds: float = Field(default=DEFAULT_PAUSE_SECONDS, ge=0.0, le=MAX_PAUSE_SECONDS)


class LoggingConfig(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class LoggerConfig(BaseModel):
    """Root clilogger configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    interactive: InteractiveConfig = Field(default_factory=InteractiveConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def data_dir(self) -> Path:
        if self.storage.directory:
            return Path(self.storage.directory).expanduser()
        return clilogger_dir()

    @property
    def log_path(self) -> Path:
        return self.data_dir / self.storage.log_filename

    @property
    def audit_path(self) -> Path:
        return self.data_dir / self.storage.audit_filename


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------


def _config_file_path() -> Path:
    if env_path := os.environ.get("CLILOGGER_CONFIG"):
        return Path(env_path)
    return clilogger_dir() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> LoggerConfig:
    """
    Load LoggerConfig from an optional TOML file, overlaid with environment variables.

    Priority (highest to lowest):
      1. Environment variables (CLILOGGER_*)
      2. Config file (~/.clilogger/config.toml)
      3. Built-in defaults

    A missing config file is not an error; clilogger runs on defaults.
    """
    import tomllib

    cfg_path = path or _config_file_path()

    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc

    _apply_env_overrides(data)

    try:
        return LoggerConfig.model_validate(data)
    except Exception as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay CLILOGGER_* environment variables onto the parsed TOML data."""
    if home := os.environ.get("CLILOGGER_HOME"):
        data.setdefault("storage", {})["directory"] = home
    if log_file := os.environ.get("CLILOGGER_LOG_FILE"):
        data.setdefault("storage", {})["log_filename"] = log_file
    if audit_file := os.environ.get("CLILOGGER_AUDIT_FILE"):
        data.setdefault("storage", {})["audit_filename"] = audit_file
    if level := os.environ.get("CLILOGGER_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level
    if pause := os.environ.get("CLILOGGER_PAUSE_SECONDS"):
        data.setdefault("interactive", {})["pause_seconds"] = pause
