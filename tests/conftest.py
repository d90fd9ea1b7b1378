"""Shared fixtures for ck-metrics tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from ck_metrics.analysis import (
    ClassAnalyzer,
    ClassRegistry,
    MethodDecl,
    MetricsFilter,
    ParsedClass,
    Visibility,
)


@pytest.fixture
def registry() -> ClassRegistry:
    """Fresh registry for one simulated run."""
    return ClassRegistry()


@pytest.fixture
def analyzer(registry: ClassRegistry) -> ClassAnalyzer:
    """Analyzer that ignores platform classes."""
    return ClassAnalyzer(registry, MetricsFilter(include_platform=False))


@pytest.fixture
def make_class() -> Callable[..., ParsedClass]:
    """Build ParsedClass facts with the package derived from the name."""

    def _make(name: str, **kwargs: Any) -> ParsedClass:
        kwargs.setdefault("package", name.rpartition(".")[0])
        return ParsedClass(name=name, **kwargs)

    return _make


@pytest.fixture
def make_method() -> Callable[..., MethodDecl]:
    """Build a public void method unless told otherwise."""

    def _make(name: str, **kwargs: Any) -> MethodDecl:
        kwargs.setdefault("visibility", Visibility.PUBLIC)
        return MethodDecl(name=name, **kwargs)

    return _make


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages at DEBUG and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG")
    yield messages
    logger.remove(handler_id)


SAMPLE_FACTS: dict[str, Any] = {
    "classes": [
        {
            "name": "com.example.shop.OrderService",
            "is_public": True,
            "superclass": "com.example.shop.BaseService",
            "ancestors": ["com.example.shop.BaseService"],
            "annotations": ["Lorg/springframework/stereotype/Service;"],
            "fields": [
                {"name": "repository", "type": "com.example.shop.OrderRepository"},
                {"name": "count", "type": "int"},
            ],
            "methods": [
                {
                    "name": "<init>",
                    "visibility": "public",
                    "loc": 3,
                    "events": [
                        {
                            "kind": "invoke",
                            "owner": "com.example.shop.BaseService",
                            "method": "<init>",
                            "arg_types": [],
                        }
                    ],
                },
                {
                    "name": "place",
                    "visibility": "public",
                    "return_type": "com.example.model.Order",
                    "parameter_types": ["java.lang.String"],
                    "loc": 7,
                    "events": [
                        {
                            "kind": "field",
                            "owner": "com.example.shop.OrderService",
                            "field": "repository",
                        },
                        {
                            "kind": "invoke",
                            "owner": "com.example.shop.OrderRepository",
                            "method": "save",
                            "arg_types": ["com.example.model.Order"],
                        },
                        {
                            "kind": "invoke",
                            "owner": "java.lang.String",
                            "method": "trim",
                            "arg_types": [],
                        },
                    ],
                },
                {
                    "name": "lambda$place$0",
                    "visibility": "private",
                    "loc": 2,
                },
            ],
        },
        {
            "name": "com.example.shop.BaseService",
            "is_public": False,
            "methods": [{"name": "<init>", "visibility": "protected", "loc": 1}],
        },
    ]
}


@pytest.fixture
def facts_file(tmp_path: Path) -> Path:
    """Facts JSON for a two-class project."""
    path = tmp_path / "facts.json"
    path.write_text(json.dumps(SAMPLE_FACTS))
    return path
