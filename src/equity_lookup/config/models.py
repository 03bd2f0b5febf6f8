"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator, model_validator

from equity_lookup.domain.entities import MARKET_CAP_UNIT_LABELS

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GlobalConfig(BaseModel):
    """Global configuration settings."""

    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


class IngestConfig(BaseModel):
    """Configuration for reading equity lines."""

    encoding: str = Field(default="utf-8")
    log_inserted: bool = True


class QueryConfig(BaseModel):
    """Default query parameters."""

    default_pe_min: float = Field(default=6.0)
    default_pe_max: float = Field(default=15.0)

    @model_validator(mode="after")
    def _ordered_range(self) -> "QueryConfig":
        if self.default_pe_min > self.default_pe_max:
            raise ValueError(
                f"default_pe_min={self.default_pe_min} > "
                f"default_pe_max={self.default_pe_max}"
            )
        return self


class DisplayConfig(BaseModel):
    """Configuration for printing records."""

    precision: int = Field(default=3, ge=0, le=12)
    market_cap_unit: int = Field(default=1_000_000)

    @field_validator("market_cap_unit")
    @classmethod
    def _known_unit(cls, value: int) -> int:
        if value not in MARKET_CAP_UNIT_LABELS:
            units = ", ".join(str(u) for u in MARKET_CAP_UNIT_LABELS)
            raise ValueError(f"market_cap_unit must be one of {units}")
        return value


class LookupConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    global_settings: GlobalConfig = Field(
        default_factory=GlobalConfig,
        alias="global",
    )
    ingest: IngestConfig = Field(default_factory=IngestConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    model_config = {"populate_by_name": True}
