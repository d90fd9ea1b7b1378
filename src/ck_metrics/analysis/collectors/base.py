"""Base interface for per-class metric collectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ClassCollector(ABC):
    """Accumulates one family of working sets while a class is analyzed.

    A collector lives for exactly one class analysis. The analyzer feeds it
    facts member by member and then asks for its contribution to the
    class's measurements.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return collector identifier."""

    @abstractmethod
    def get_class_metrics(self) -> dict[str, Any]:
        """Return this collector's fields of ``ClassMeasurements``."""
