"""Chidamber-Kemerer metrics engine.

Key Components:
    - ClassRegistry: Per-run map from class name to MetricsRecord
    - MetricsRecord: One class's record (UNVISITED until analyzed)
    - ClassAnalyzer: Analyzes one class's facts and commits the result
    - MetricsFilter: Platform-class inclusion policy
    - analyze_classes: Concurrent driver over many classes

Example:
    registry = analyze_classes(load_facts(Path("facts.json")))
    for record in registry.analyzed():
        print(record.name, record.summary().to_text())
"""

from .analyzer import ClassAnalysisResult, ClassAnalyzer
from .filters import MetricsFilter, is_platform_class
from .loader import load_facts, parse_facts
from .metrics import (
    ClassMeasurements,
    ClassMetricsSummary,
    MetricsRecord,
    RecordState,
    compute_wmc,
)
from .models import (
    FieldAccess,
    FieldDecl,
    MethodDecl,
    MethodInvocation,
    ParsedClass,
    Visibility,
)
from .registry import ClassRegistry
from .runner import analyze_classes

__all__ = [
    "ClassAnalysisResult",
    "ClassAnalyzer",
    "ClassMeasurements",
    "ClassMetricsSummary",
    "ClassRegistry",
    "FieldAccess",
    "FieldDecl",
    "MethodDecl",
    "MethodInvocation",
    "MetricsFilter",
    "MetricsRecord",
    "ParsedClass",
    "RecordState",
    "Visibility",
    "analyze_classes",
    "compute_wmc",
    "is_platform_class",
    "load_facts",
    "parse_facts",
]
