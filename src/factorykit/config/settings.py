"""Configuration settings using Pydantic Settings.

Usage:
    from factorykit.config import DemoSettings

    # Load from environment variables (FACTORYKIT_*)
    settings = DemoSettings()

    # Or override with explicit values
    settings = DemoSettings(spark_power=15, log_level="DEBUG")
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the demo script.

    Attributes:
        genesis_power: Power of the Genesis the demo builds.
        spark_power: Power of the Spark the demo builds.
        runs: How many times each vehicle runs.
        log_level: Standard logging level name, case-insensitive.

    Environment Variables:
        FACTORYKIT_GENESIS_POWER
        FACTORYKIT_SPARK_POWER
        FACTORYKIT_RUNS
        FACTORYKIT_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="FACTORYKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    genesis_power: int | float = 20
    spark_power: int | float = 13
    runs: int = Field(default=2, ge=0)
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
