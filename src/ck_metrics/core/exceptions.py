"""Typed exception hierarchy for ck-metrics.

Hierarchy
---------
CKMetricsError (base)
├── RegistryError          – class registry / record lifecycle errors
│   ├── DuplicateClassError   – a class was analyzed twice in one run
│   └── UnvisitedRecordError  – metrics read from a referenced-only class
├── FactsError             – malformed class facts handed to the analyzer
└── ConfigError            – configuration / validation errors

A class that is referenced but never analyzed is not an error: the registry
hands out an ``UNVISITED`` record for it. Only reading measured metrics from
such a record raises ``UnvisitedRecordError``.
"""

from typing import Any


class CKMetricsError(Exception):
    """Base exception for ck-metrics."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Registry layer ──────────────────────────────────────────────────────


class RegistryError(CKMetricsError):
    """Class registry errors."""

    pass


class DuplicateClassError(RegistryError):
    """A record was asked to transition to ANALYZED a second time."""

    pass


class UnvisitedRecordError(RegistryError):
    """Measured metrics were requested from a record never analyzed."""

    pass


# ── Input layer ─────────────────────────────────────────────────────────


class FactsError(CKMetricsError):
    """Class facts could not be loaded or are structurally invalid."""

    pass


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(CKMetricsError):
    """Configuration / validation errors."""

    pass
