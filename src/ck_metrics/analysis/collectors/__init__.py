"""Per-class metric collectors.

Each collector owns one family of working sets for a single class analysis
and reports its share of ``ClassMeasurements`` at the end.

Example:
    from ck_metrics.analysis.collectors import CouplingCollector

    coupling = CouplingCollector("com.example.Order", MetricsFilter())
    coupling.register_type("com.example.Customer")
    coupling.get_class_metrics()  # {"cbo": 1, "dicbo": 0}
"""

from .base import ClassCollector
from .cohesion import CohesionCollector, compute_lcom
from .complexity import MethodSizeCollector
from .coupling import CouplingCollector
from .response import ResponseSetCollector, method_signature

__all__ = [
    "ClassCollector",
    "CohesionCollector",
    "CouplingCollector",
    "MethodSizeCollector",
    "ResponseSetCollector",
    "compute_lcom",
    "method_signature",
]
