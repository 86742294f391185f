"""Configuration management for Quill.

Loads configuration from:
1. quill.yaml in current directory
2. ~/.config/quill/quill.yaml
3. Environment variables (QUILL_* prefix)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DefaultsConfig(BaseModel):
    """Default values."""

    scope: str = "global"


class IOConfig(BaseModel):
    """Document reading and writing."""

    encoding: str = "utf-8"
    fallback_encodings: list[str] = Field(
        default_factory=lambda: ["latin-1", "cp1252", "iso-8859-1"]
    )
    # Write output with the newline style detected in the input
    preserve_newlines: bool = True


class LintConfig(BaseModel):
    """Marker lint settings."""

    fail_on_issues: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(message)s"


class Config(BaseSettings):
    """Main configuration for Quill."""

    model_config = SettingsConfigDict(
        env_prefix="QUILL_",
        env_nested_delimiter="__",
    )

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    io: IOConfig = Field(default_factory=IOConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def find_config_file() -> Path | None:
    """Find the configuration file.

    Searches in order:
    1. ./quill.yaml
    2. ~/.config/quill/quill.yaml
    """
    locations = [
        Path.cwd() / "quill.yaml",
        Path.home() / ".config" / "quill" / "quill.yaml",
    ]

    for path in locations:
        if path.exists():
            return path

    return None


def load_config() -> Config:
    """Load configuration from file and environment.

    Returns:
        Config: The loaded configuration.
    """
    config_data: dict[str, Any] = {}

    config_file = find_config_file()
    if config_file:
        with open(config_file) as f:
            config_data = yaml.safe_load(f) or {}

    env_overrides = {
        "QUILL_DEFAULT_SCOPE": ("defaults", "scope"),
        "QUILL_ENCODING": ("io", "encoding"),
    }

    for env_var, path in env_overrides.items():
        value = os.environ.get(env_var)
        if value:
            section, key = path
            if section not in config_data:
                config_data[section] = {}
            config_data[section][key] = value

    return Config(**config_data)


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
