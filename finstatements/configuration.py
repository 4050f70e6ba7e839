"""Mini README: Centralised configuration for the Finstatements visualizer.

Structure:
    * FinstatementsSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read the server binding, the flash dwell time
    and the currency rendering options. Values come from ``FINSTATEMENTS_*``
    environment variables or a local ``.env`` file and are validated once
    per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class FinstatementsSettings(BaseSettings):
    """Runtime configuration for the visualizer."""

    environment: str = Field(
        "development",
        description="Environment label controlling reload and logging defaults.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the visualizer to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the visualizer exposes.",
        ge=1,
        le=65535,
    )
    flash_duration_ms: int = Field(
        2000,
        description="How long a changed value keeps its delta highlight.",
        ge=0,
    )
    poll_interval_ms: int = Field(
        250,
        description="How often the dashboard refreshes values from the server.",
        ge=50,
    )
    currency_symbol: str = Field("$", description="Symbol prefixed to amounts.")
    thousands_separator: str = Field(
        ",", description="Digit group separator used when rendering amounts."
    )
    log_level: str = Field("INFO", description="Root logging level name.")

    class Config:
        env_prefix = "FINSTATEMENTS_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def check_log_level(cls, value: str) -> str:
        """Accept only level names understood by the logging module."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised

    @property
    def flash_duration_seconds(self) -> float:
        """Dwell time expressed in seconds for event-loop scheduling."""

        return self.flash_duration_ms / 1000.0


@lru_cache()
def get_settings() -> FinstatementsSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinstatementsSettings()
