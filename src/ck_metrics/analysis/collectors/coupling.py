"""Coupling collector: efferent couplings of one class (CBO and DICBO)."""

from __future__ import annotations

from typing import Any

from ..filters import (
    MetricsFilter,
    class_name_of_type,
    is_descriptor_artifact,
    is_di_framework_class,
    is_lambda_dispatcher,
)
from .base import ClassCollector


class CouplingCollector(ClassCollector):
    """Collects the classes a class depends on.

    Every candidate name passes through ``register`` which drops names that
    are not genuine source-level couplings. Dependency-injection framework
    classes are kept apart from ordinary couplings.

    Example:
        collector = CouplingCollector("com.example.OrderService", MetricsFilter())
        collector.register_type("com.example.Order[]")   # counted
        collector.register_type("java.util.List")        # platform, ignored
        collector.register("Lorg/springframework/stereotype/Service;")  # DICBO
        # cbo == 1, dicbo == 1
    """

    def __init__(self, class_name: str, metrics_filter: MetricsFilter) -> None:
        """Initialize coupling collector.

        Args:
            class_name: Fully-qualified name of the class being analyzed
            metrics_filter: Platform inclusion policy
        """
        self._class_name = class_name
        self._filter = metrics_filter
        self.efferent: set[str] = set()
        self.framework: set[str] = set()

    @property
    def name(self) -> str:
        return "coupling"

    def register(self, class_name: str) -> bool:
        """Add a class to the classes we are coupled to.

        Args:
            class_name: Coupled class name, dotted or in descriptor form

        Returns:
            True if the name landed in the ordinary efferent set
        """
        if is_descriptor_artifact(class_name):
            return False

        if is_di_framework_class(class_name):
            self.framework.add(class_name)
            return False

        if is_lambda_dispatcher(class_name):
            return False

        if self._filter.excludes(class_name):
            return False

        if class_name == self._class_name:
            return False

        self.efferent.add(class_name)
        return True

    def register_type(self, type_name: str) -> bool:
        """Register the class behind a type name; primitives are ignored."""
        class_name = class_name_of_type(type_name)
        if class_name is None:
            return False
        return self.register(class_name)

    def get_class_metrics(self) -> dict[str, Any]:
        return {"cbo": len(self.efferent), "dicbo": len(self.framework)}
