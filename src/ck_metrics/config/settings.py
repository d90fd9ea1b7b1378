"""Run configuration for the metrics engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ..core.exceptions import ConfigError
from .defaults import ENV_INCLUDE_PLATFORM, ENV_WORKERS

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class MetricsConfig:
    """Configuration for a metrics run.

    Attributes:
        include_platform: Count platform (JDK) classes in coupling, DIT
            and response calculations
        max_workers: Worker threads for concurrent analysis (None = executor default)
    """

    include_platform: bool = False
    max_workers: int | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> MetricsConfig:
        """Load configuration from a YAML file and apply environment overrides.

        A missing file yields the defaults.

        Args:
            path: Path to YAML configuration file

        Returns:
            MetricsConfig instance
        """
        data: dict[str, Any] = {}
        if path is not None and path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(
                    f"Invalid YAML in {path}: {e}", context={"path": str(path)}
                ) from e
            if not isinstance(data, dict):
                raise ConfigError(
                    f"Configuration in {path} must be a mapping",
                    context={"path": str(path)},
                )

        config = cls.from_dict(data)
        config.apply_env()
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetricsConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            MetricsConfig instance
        """
        unknown = set(data) - {"include_platform", "max_workers"}
        if unknown:
            raise ConfigError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                context={"keys": sorted(unknown)},
            )

        include_platform = data.get("include_platform", False)
        if not isinstance(include_platform, bool):
            raise ConfigError("include_platform must be a boolean")

        return cls(
            include_platform=include_platform,
            max_workers=_parse_workers(data.get("max_workers")),
        )

    def apply_env(self) -> None:
        """Override settings from environment variables.

        Environment Variables:
            CK_METRICS_INCLUDE_PLATFORM: "1"/"true" to count platform classes
            CK_METRICS_WORKERS: Worker thread count
        """
        include = os.environ.get(ENV_INCLUDE_PLATFORM)
        if include is not None:
            value = include.strip().lower()
            if value in _TRUE_VALUES:
                self.include_platform = True
            elif value in _FALSE_VALUES:
                self.include_platform = False
            else:
                raise ConfigError(
                    f"{ENV_INCLUDE_PLATFORM} must be a boolean, got {include!r}"
                )
            logger.debug(f"include_platform={self.include_platform} from environment")

        workers = os.environ.get(ENV_WORKERS)
        if workers:
            self.max_workers = _parse_workers(workers)
            logger.debug(f"max_workers={self.max_workers} from environment")


def _parse_workers(value: Any) -> int | None:
    if value is None:
        return None
    try:
        workers = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"max_workers must be an integer, got {value!r}") from e
    if workers < 1:
        raise ConfigError(f"max_workers must be at least 1, got {workers}")
    return workers
