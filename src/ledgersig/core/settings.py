"""
Central configuration for ledgersig.

This module provides a single, typed configuration object that reads from
environment variables (12-factor style) using pydantic-settings.

Usage:

    from ledgersig.core.settings import get_settings

    settings = get_settings()
    mode = settings.codec.default_mode

Environment variables:

    LEDGERSIG_CODEC_VALIDATION_ENABLED   default: true
    LEDGERSIG_LOG_LEVEL                  default: INFO
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..protocol.enums import DeSerializationMode


class CodecSettings(BaseSettings):
    """
    Defaults for signature decoding when the caller does not pass a mode.
    """

    model_config = SettingsConfigDict(env_prefix="LEDGERSIG_CODEC_")

    validation_enabled: bool = Field(
        default=True,
        description="Run length and type byte checks when decoding signatures.",
    )

    @property
    def default_mode(self) -> DeSerializationMode:
        return DeSerializationMode.coerce(self.validation_enabled)


class RuntimeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LEDGERSIG_")

    log_level: str = Field(
        default="INFO",
        description="Log level for the ledgersig logger (DEBUG/INFO/WARNING/ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = (v or "INFO").upper()
        if v == "WARN":
            v = "WARNING"
        if not isinstance(logging.getLevelName(v), int):
            return "INFO"
        return v


class LedgersigSettings(BaseSettings):
    """
    Root configuration object for ledgersig.

    Aggregates:
      - Codec
      - Runtime
    """

    codec: CodecSettings = Field(default_factory=CodecSettings)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)


@lru_cache(maxsize=1)
def get_settings() -> LedgersigSettings:
    """
    Cached accessor for LedgersigSettings.

    Call get_settings.cache_clear() after changing the environment.
    """
    return LedgersigSettings()
