"""Run the analyzer over a set of classes on a thread pool."""

from __future__ import annotations

import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from loguru import logger

from ..core.exceptions import DuplicateClassError
from .analyzer import ClassAnalyzer
from .filters import MetricsFilter
from .models import ParsedClass
from .registry import ClassRegistry


def analyze_classes(
    classes: Iterable[ParsedClass],
    registry: ClassRegistry | None = None,
    metrics_filter: MetricsFilter | None = None,
    max_workers: int | None = None,
) -> ClassRegistry:
    """Analyze every class and collect the results in one registry.

    Classes are independent units of work. A class that appears twice is
    measured once; the repeat is logged and skipped.

    Args:
        classes: Facts for the classes to measure
        registry: Registry to fill (a new one by default)
        metrics_filter: Platform inclusion policy
        max_workers: Worker threads (None = executor default, 1 = sequential)

    Returns:
        The registry holding every analyzed and referenced class
    """
    registry = registry if registry is not None else ClassRegistry()
    analyzer = ClassAnalyzer(registry, metrics_filter)
    classes = list(classes)
    start_time = time.perf_counter()

    def analyze_one(parsed: ParsedClass) -> bool:
        try:
            analyzer.run(parsed)
        except DuplicateClassError as e:
            logger.warning(f"Skipping duplicate class: {e}")
            return False
        return True

    if max_workers == 1:
        outcomes = [analyze_one(parsed) for parsed in classes]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(analyze_one, classes))

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Analyzed {sum(outcomes)} classes "
        f"({len(registry)} referenced) in {elapsed:.2f}s"
    )
    return registry
