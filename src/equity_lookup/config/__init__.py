"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of Equity Lookup:
    - Pydantic models for type-safe configuration
    - YAML loader with validation and overrides

Configuration Structure:
    - LookupConfig: Root configuration object
    - GlobalConfig: Global settings (log level)
    - IngestConfig: Input reading settings
    - QueryConfig: Default query parameters
    - DisplayConfig: Output formatting

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
"""

from equity_lookup.config.loader import ConfigLoader, load_config
from equity_lookup.config.models import (
    DisplayConfig,
    GlobalConfig,
    IngestConfig,
    LookupConfig,
    QueryConfig,
)

__all__ = [
    "ConfigLoader",
    "DisplayConfig",
    "GlobalConfig",
    "IngestConfig",
    "LookupConfig",
    "QueryConfig",
    "load_config",
]
