# settings/config_models.py
# -*- coding: utf-8 -*-
"""
Pydantic models for the bootstrap configuration.

The defaults below are what an unconfigured run uses. Any field can be
overridden through a ``CLJS_GO_``-prefixed environment variable or the
YAML file read by ``settings.config_loader``.
"""

import logging
from typing import Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Default Static Values (can be overridden by config file/env) ---
GO_COMMAND_DEFAULT: str = "go"
LOG_LEVEL_DEFAULT: str = "WARNING"
LOG_PREFIX_DEFAULT: str = "[CLJS-GO]"

SYMBOLS_DEFAULT: Dict[str, str] = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "package": "📦",
    "debug": "🐛",
    "gear": "⚙️",
    "rocket": "🚀",
}


class BootstrapSettings(BaseSettings):
    """Settings for the bootstrap run."""
    model_config = SettingsConfigDict(env_prefix="CLJS_GO_", extra="ignore")

    go_command: str = Field(
        default=GO_COMMAND_DEFAULT,
        description="Name or path of the go executable used to fetch dependencies.",
    )
    log_level: str = Field(
        default=LOG_LEVEL_DEFAULT,
        description="Level for bootstrap log records written to stderr.",
    )
    log_prefix: str = Field(
        default=LOG_PREFIX_DEFAULT,
        description="Prefix for bootstrap log records.",
    )
    symbols: Dict[str, str] = Field(default_factory=lambda: dict(SYMBOLS_DEFAULT))

    @field_validator("go_command")
    @classmethod
    def _go_command_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("go_command must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
