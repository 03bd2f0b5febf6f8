"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files and validates using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from equity_lookup.config.models import LookupConfig


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        overrides: Optional[Dict[str, Any]] = None,
    ) -> LookupConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            overrides: Optional values deep-merged over the file contents

        Returns:
            Validated LookupConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if overrides:
            config_dict = self._merge_configs(config_dict, overrides)

        return LookupConfig.model_validate(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> LookupConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated LookupConfig object
        """
        return LookupConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    overrides: Optional[Dict[str, Any]] = None,
    base_path: Optional[Path] = None,
) -> LookupConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        overrides: Optional values deep-merged over the file contents
        base_path: Base path for resolving relative paths

    Returns:
        Validated LookupConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, overrides)
