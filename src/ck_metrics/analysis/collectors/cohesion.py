"""Cohesion collector: lack of cohesion in methods (LCOM).

LCOM is computed from the sets of the class's own fields each method
touches. Over all unordered pairs of methods, P counts pairs whose sets are
disjoint and Q counts pairs that share a field; LCOM = max(P - Q, 0).
"""

from __future__ import annotations

from collections.abc import Sequence, Set
from itertools import combinations
from typing import Any

from .base import ClassCollector


def compute_lcom(fields_touched: Sequence[Set[str]]) -> int:
    """Compute LCOM from per-method field usage.

    Examples:
        >>> compute_lcom([{"a"}, {"b"}])
        1

        >>> compute_lcom([{"a", "b"}, {"b"}])
        0
    """
    lcom = 0
    for first, second in combinations(fields_touched, 2):
        if first.isdisjoint(second):
            lcom += 1
        else:
            lcom -= 1
    return max(lcom, 0)


class CohesionCollector(ClassCollector):
    """Collects which of its own fields each method of a class touches."""

    def __init__(self, class_name: str) -> None:
        self._class_name = class_name
        self.fields_touched: list[set[str]] = []

    @property
    def name(self) -> str:
        return "cohesion"

    def start_method(self) -> None:
        """Open a fresh field set for the next method, even if it stays empty."""
        self.fields_touched.append(set())

    def record_field_access(self, owner: str, field_name: str) -> None:
        """Count an access to one of the class's own fields in the current method."""
        if owner != self._class_name:
            return
        if not self.fields_touched:
            raise RuntimeError("record_field_access() called before start_method()")
        self.fields_touched[-1].add(field_name)

    def get_class_metrics(self) -> dict[str, Any]:
        return {"lcom": compute_lcom(self.fields_touched)}
