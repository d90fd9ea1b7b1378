"""Unit tests for running the analyzer over many classes."""

import pytest

from ck_metrics.analysis import (
    ClassRegistry,
    FieldDecl,
    MetricsFilter,
    ParsedClass,
    analyze_classes,
    load_facts,
)


def _project(size: int) -> list[ParsedClass]:
    """Classes that all extend one base and reference their neighbour."""
    classes = [ParsedClass(name="com.example.gen.Base", package="com.example.gen")]
    for i in range(size):
        classes.append(
            ParsedClass(
                name=f"com.example.gen.C{i}",
                package="com.example.gen",
                superclass="com.example.gen.Base",
                ancestors=("com.example.gen.Base",),
                fields=(FieldDecl("next", f"com.example.gen.C{(i + 1) % size}"),),
            )
        )
    return classes


def _summaries(registry: ClassRegistry) -> dict:
    return {record.name: record.summary() for record in registry.analyzed()}


class TestAnalyzeClasses:
    """Test the concurrent driver."""

    def test_sample_project(self, facts_file):
        registry = analyze_classes(load_facts(facts_file))

        service = registry.get("com.example.shop.OrderService").summary()
        assert service.wmc == pytest.approx(10 / 3)
        assert tuple(service)[1:] == (1, 0, 3, 1, 5, 3, 0, 2, 5, 0)

        base = registry.get("com.example.shop.BaseService").summary()
        assert tuple(base) == (1.0, 0, 1, 0, 0, 1, 0, 1, 0, 1, 0)

        assert [r.name for r in registry.analyzed()] == [
            "com.example.shop.BaseService",
            "com.example.shop.OrderService",
        ]
        assert len(registry) == 5

    def test_concurrent_matches_sequential(self):
        sequential = analyze_classes(_project(60), max_workers=1)
        concurrent = analyze_classes(_project(60), max_workers=8)

        assert _summaries(concurrent) == _summaries(sequential)
        base = concurrent.get("com.example.gen.Base").summary()
        assert base.noc == 60
        assert base.ca == 60

    def test_fills_given_registry(self):
        registry = ClassRegistry()
        result = analyze_classes(_project(3), registry=registry)
        assert result is registry
        assert len(registry.analyzed()) == 4

    def test_platform_filter_is_applied(self, facts_file):
        registry = analyze_classes(
            load_facts(facts_file), metrics_filter=MetricsFilter(include_platform=True)
        )
        service = registry.get("com.example.shop.OrderService").summary()
        # java.lang.String parameter and invocation
        assert service.cbo == 4
        assert service.drfc == 1

    def test_duplicate_classes_are_skipped(self, log_messages):
        classes = _project(2)
        classes.append(classes[1])

        registry = analyze_classes(classes, max_workers=1)

        assert len(registry.analyzed()) == 3
        assert registry.get("com.example.gen.Base").noc == 2
        assert any("Skipping duplicate class" in m for m in log_messages)
