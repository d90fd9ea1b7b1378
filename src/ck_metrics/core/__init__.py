"""Core error types."""

from .exceptions import (
    CKMetricsError,
    ConfigError,
    DuplicateClassError,
    FactsError,
    RegistryError,
    UnvisitedRecordError,
)

__all__ = [
    "CKMetricsError",
    "ConfigError",
    "DuplicateClassError",
    "FactsError",
    "RegistryError",
    "UnvisitedRecordError",
]
