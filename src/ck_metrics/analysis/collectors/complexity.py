"""Method size collector for WMC samples and the public method count."""

from __future__ import annotations

from typing import Any

from .base import ClassCollector


class MethodSizeCollector(ClassCollector):
    """Collects per-method lines of code and counts public methods.

    The running minimum starts at 1 and the running maximum at 0; methods
    without line-number information (LOC 0) contribute no sample.
    """

    def __init__(self) -> None:
        self.samples: list[int] = []
        self.min_loc = 1
        self.max_loc = 0
        self.npm = 0

    @property
    def name(self) -> str:
        return "method_size"

    def add_method(self, loc: int, is_public: bool) -> None:
        if loc > 0:
            self.samples.append(loc)
            self.min_loc = min(self.min_loc, loc)
            self.max_loc = max(self.max_loc, loc)
        if is_public:
            self.npm += 1

    def get_class_metrics(self) -> dict[str, Any]:
        return {
            "wmc_samples": tuple(self.samples),
            "min_loc": self.min_loc,
            "max_loc": self.max_loc,
            "npm": self.npm,
        }
