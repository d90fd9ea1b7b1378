"""Response set collector (RFC split into same/different package)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ...config.defaults import CONSTRUCTOR_NAME
from ..filters import (
    MetricsFilter,
    is_lambda_dispatcher,
    is_platform_class,
    package_of,
)
from .base import ClassCollector


def method_signature(owner: str, method_name: str, arg_types: Sequence[str]) -> str:
    """Format a response-set entry.

    Examples:
        >>> method_signature("com.example.Order", "total", ["int", "java.lang.String"])
        'com.example.Order.total(int, java.lang.String)'
    """
    return f"{owner}.{method_name}({', '.join(arg_types)})"


class ResponseSetCollector(ClassCollector):
    """Collects the methods that can run in response to a message to the class.

    The set holds the class's own methods plus every method they invoke,
    split by whether the invoked method's class shares this class's package.
    """

    def __init__(
        self, class_name: str, package: str, metrics_filter: MetricsFilter
    ) -> None:
        """Initialize response set collector.

        Args:
            class_name: Fully-qualified name of the class being analyzed
            package: The class's package as reported by the reader
            metrics_filter: Platform inclusion policy
        """
        self._class_name = class_name
        self._package = package
        self._filter = metrics_filter
        self.same_package: set[str] = set()
        self.different_package: set[str] = set()

    @property
    def name(self) -> str:
        return "response_set"

    def add(self, owner: str, method_name: str, arg_types: Sequence[str]) -> bool:
        """Add a method to the response set.

        Platform constructors and lambda-dispatcher owners never count;
        other platform methods count only when the policy includes them.

        Returns:
            True if the signature was counted
        """
        if is_platform_class(owner) and method_name == CONSTRUCTOR_NAME:
            return False
        if is_lambda_dispatcher(owner):
            return False
        if self._filter.excludes(owner):
            return False

        signature = method_signature(owner, method_name, arg_types)
        if package_of(owner) == self._package:
            self.same_package.add(signature)
        else:
            self.different_package.add(signature)
        return True

    def add_own_method(self, method_name: str, parameter_types: Sequence[str]) -> bool:
        """A class's own methods are part of its response set."""
        return self.add(self._class_name, method_name, parameter_types)

    def get_class_metrics(self) -> dict[str, Any]:
        return {
            "srfc": len(self.same_package),
            "drfc": len(self.different_package),
        }
