"""Configuration for ck-metrics."""

from .settings import MetricsConfig

__all__ = ["MetricsConfig"]
