"""Per-class Chidamber-Kemerer analysis.

``ClassAnalyzer.analyze`` turns one class's facts into a
``ClassAnalysisResult`` without touching the registry. ``commit`` is the one
step with side effects: it attaches the measurements to the class's own
record, counts the class as a child of its superclass, and adds the class
to the afferent set of every class it is coupled to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from .collectors import (
    CohesionCollector,
    CouplingCollector,
    MethodSizeCollector,
    ResponseSetCollector,
)
from .filters import MetricsFilter
from .metrics import ClassMeasurements, MetricsRecord
from .models import FieldAccess, MethodDecl, MethodInvocation, ParsedClass
from .registry import ClassRegistry


@dataclass(frozen=True)
class ClassAnalysisResult:
    """Outcome of analyzing one class, ready to be committed to a registry.

    Attributes:
        class_name: Fully-qualified name of the analyzed class
        superclass: Record that gains a child on commit (None for the root)
        measurements: The class's own metrics
        efferent_coupled: Classes this class depends on (CBO)
        framework_coupled: Dependency-injection framework classes (DICBO)
        same_package_responses: Response set entries in the same package
        different_package_responses: Response set entries in other packages
        fields_touched: Own fields used by each method, in declaration order
    """

    class_name: str
    superclass: str | None
    measurements: ClassMeasurements
    efferent_coupled: frozenset[str] = frozenset()
    framework_coupled: frozenset[str] = frozenset()
    same_package_responses: frozenset[str] = frozenset()
    different_package_responses: frozenset[str] = frozenset()
    fields_touched: tuple[frozenset[str], ...] = field(default_factory=tuple)


class ClassAnalyzer:
    """Computes a class's metrics against a shared registry.

    The analyzer itself is stateless between classes; one instance can be
    shared by concurrent workers.

    Example:
        registry = ClassRegistry()
        analyzer = ClassAnalyzer(registry, MetricsFilter(include_platform=False))
        record = analyzer.run(parsed_class)
        print(record.summary().to_text())
    """

    def __init__(
        self, registry: ClassRegistry, metrics_filter: MetricsFilter | None = None
    ) -> None:
        """Initialize analyzer.

        Args:
            registry: Registry shared by every class of the run
            metrics_filter: Platform inclusion policy (default: exclude platform)
        """
        self.registry = registry
        self.metrics_filter = metrics_filter or MetricsFilter()

    def run(self, parsed: ParsedClass) -> MetricsRecord:
        """Analyze a class and commit the result.

        Returns:
            The class's record, now ANALYZED
        """
        return self.commit(self.analyze(parsed))

    def analyze(self, parsed: ParsedClass) -> ClassAnalysisResult:
        """Compute a class's metrics without touching the registry.

        Args:
            parsed: Facts about the class

        Returns:
            Measurements and working sets for ``commit``
        """
        coupling = CouplingCollector(parsed.name, self.metrics_filter)
        responses = ResponseSetCollector(
            parsed.name, parsed.package, self.metrics_filter
        )
        cohesion = CohesionCollector(parsed.name)
        sizes = MethodSizeCollector()

        for annotation in parsed.annotations:
            coupling.register(annotation)
        if parsed.superclass is not None:
            coupling.register(parsed.superclass)
        for interface in parsed.interfaces:
            coupling.register(interface)

        for field_decl in parsed.fields:
            for annotation in field_decl.annotations:
                coupling.register(annotation)
            coupling.register_type(field_decl.type_name)

        for method in parsed.methods:
            self._visit_method(method, coupling, responses, cohesion, sizes)

        collected: dict[str, Any] = {"dit": self._depth_of_inheritance(parsed)}
        for collector in (coupling, responses, cohesion, sizes):
            contribution = collector.get_class_metrics()
            logger.debug(f"({collector.name}) {parsed.name} {contribution}")
            collected.update(contribution)
        measurements = ClassMeasurements(is_public=parsed.is_public, **collected)

        result = ClassAnalysisResult(
            class_name=parsed.name,
            superclass=parsed.superclass,
            measurements=measurements,
            efferent_coupled=frozenset(coupling.efferent),
            framework_coupled=frozenset(coupling.framework),
            same_package_responses=frozenset(responses.same_package),
            different_package_responses=frozenset(responses.different_package),
            fields_touched=tuple(frozenset(s) for s in cohesion.fields_touched),
        )
        _trace_result(result)
        return result

    def commit(self, result: ClassAnalysisResult) -> MetricsRecord:
        """Write an analysis result into the registry.

        The class's own record is transitioned first, so a class analyzed
        twice is rejected before it can touch any other record.

        Raises:
            DuplicateClassError: The class was already committed in this run
        """
        self.registry.mark_analyzed(result.class_name, result.measurements)

        if result.superclass is not None:
            self.registry.increment_children(result.superclass)

        for target in result.efferent_coupled:
            self.registry.add_afferent_coupling(target, result.class_name)

        return self.registry.get_or_create(result.class_name)

    def _depth_of_inheritance(self, parsed: ParsedClass) -> int:
        if parsed.unresolved_ancestor is not None:
            logger.warning(
                f"Error obtaining all superclasses of {parsed.name}: "
                f"{parsed.unresolved_ancestor} not found; "
                f"DIT counts only {len(parsed.ancestors)} resolved ancestor(s)"
            )
        depth = 0
        for ancestor in parsed.ancestors:
            if self.metrics_filter.excludes(ancestor):
                continue
            logger.debug(f"(DIT) {parsed.name} superclass {ancestor}")
            depth += 1
        return depth

    def _visit_method(
        self,
        method: MethodDecl,
        coupling: CouplingCollector,
        responses: ResponseSetCollector,
        cohesion: CohesionCollector,
        sizes: MethodSizeCollector,
    ) -> None:
        for annotation in method.annotations:
            coupling.register(annotation)
        coupling.register_type(method.return_type)
        for parameter_type in method.parameter_types:
            coupling.register_type(parameter_type)
        for exception_type in method.exception_types:
            coupling.register(exception_type)

        responses.add_own_method(method.name, method.parameter_types)

        # Lambda bodies are left out of WMC and NPM
        if not method.is_lambda_body:
            sizes.add_method(method.loc, method.is_public)

        cohesion.start_method()
        for event in method.events:
            if isinstance(event, FieldAccess):
                coupling.register_type(event.owner)
                cohesion.record_field_access(event.owner, event.field_name)
            elif isinstance(event, MethodInvocation):
                coupling.register_type(event.owner)
                responses.add(event.owner, event.method_name, event.arg_types)


def _trace_result(result: ClassAnalysisResult) -> None:
    m = result.measurements
    name = result.class_name
    logger.debug(f"(WMC) {name} LOC samples {list(m.wmc_samples)}")
    logger.debug(f"(NPM) {name} public methods {m.npm}")
    logger.debug(f"(CBO) {name} coupled classes {sorted(result.efferent_coupled)}")
    logger.debug(f"(DICBO) {name} coupled classes {sorted(result.framework_coupled)}")
    logger.debug(
        f"(SRFC) {name} same package responses "
        f"{sorted(result.same_package_responses)}"
    )
    logger.debug(
        f"(DRFC) {name} different package responses "
        f"{sorted(result.different_package_responses)}"
    )
