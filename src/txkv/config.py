"""
Configuration for the txkv command-line interpreter.

Values are resolved in this order, later sources winning:
1. Default values
2. Environment variables (prefixed with TXKV_)
3. Command-line arguments
"""

from enum import Enum
from typing import Any
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .commands import PROMPT


class LogLevel(str, Enum):
    """Log levels for internal log records."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LOG_LEVELS = tuple(level.value for level in LogLevel)


class Config(BaseSettings):
    """Settings for one interpreter session."""

    model_config = SettingsConfigDict(env_prefix="TXKV_", case_sensitive=False)

    prompt: str = PROMPT
    log_level: LogLevel = LogLevel.WARNING
    banner: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            upper = v.strip().upper()
            if upper not in LOG_LEVELS:
                raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(LOG_LEVELS)}")
            return upper
        return v

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.value)

    def update_from_args(self, args: Any) -> "Config":
        """Return a new config with any command-line values that were given applied."""
        prompt = getattr(args, "prompt", None)
        log_level = getattr(args, "log_level", None)
        banner = getattr(args, "banner", None)
        return Config(
            prompt=self.prompt if prompt is None else prompt,
            log_level=self.log_level if log_level is None else log_level,
            banner=self.banner if banner is None else banner,
        )
