"""Load class facts from a JSON dump produced by a class-file reader.

Expected layout (a bare list of class objects is accepted too)::

    {
      "classes": [
        {
          "name": "com.example.OrderService",
          "is_public": true,
          "superclass": "com.example.BaseService",
          "ancestors": ["com.example.BaseService"],
          "interfaces": ["com.example.Service"],
          "annotations": ["Lorg/springframework/stereotype/Service;"],
          "fields": [{"name": "repo", "type": "com.example.OrderRepository"}],
          "methods": [
            {
              "name": "total",
              "visibility": "public",
              "return_type": "int",
              "parameter_types": ["com.example.Order"],
              "loc": 4,
              "events": [
                {"kind": "field", "owner": "com.example.OrderService", "field": "repo"},
                {"kind": "invoke", "owner": "com.example.Order", "method": "lines",
                 "arg_types": []}
              ]
            }
          ]
        }
      ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from ..core.exceptions import FactsError
from .filters import package_of
from .models import (
    BodyEvent,
    FieldAccess,
    FieldDecl,
    MethodDecl,
    MethodInvocation,
    ParsedClass,
    Visibility,
)


def load_facts(path: Path) -> list[ParsedClass]:
    """Read class facts from a JSON file.

    Args:
        path: JSON file with class facts

    Returns:
        Parsed classes in file order

    Raises:
        FactsError: File is unreadable or not valid facts JSON
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FactsError(f"Cannot read facts file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FactsError(
            f"Invalid JSON in facts file {path}: {e}", context={"path": str(path)}
        ) from e

    classes = parse_facts(data)
    logger.info(f"Loaded facts for {len(classes)} classes from {path}")
    return classes


def parse_facts(data: Any) -> list[ParsedClass]:
    """Convert decoded JSON into ``ParsedClass`` objects."""
    if isinstance(data, dict):
        data = data.get("classes")
    if not isinstance(data, list):
        raise FactsError("Facts must be a list of classes or {'classes': [...]}")
    return [_parse_class(entry) for entry in data]


def _parse_class(entry: Any) -> ParsedClass:
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise FactsError(f"Class entry without a name: {entry!r}")
    name = entry["name"]
    try:
        return ParsedClass(
            name=name,
            package=entry.get("package", package_of(name)),
            is_public=_boolean(entry, "is_public", True),
            superclass=entry.get("superclass", "java.lang.Object"),
            ancestors=_strings(entry, "ancestors"),
            unresolved_ancestor=entry.get("unresolved_ancestor"),
            interfaces=_strings(entry, "interfaces"),
            annotations=_strings(entry, "annotations"),
            fields=tuple(_parse_field(f) for f in entry.get("fields", [])),
            methods=tuple(_parse_method(m) for m in entry.get("methods", [])),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise FactsError(
            f"Malformed facts for class {name}: {e}", context={"class_name": name}
        ) from e


def _parse_field(entry: dict[str, Any]) -> FieldDecl:
    return FieldDecl(
        name=entry["name"],
        type_name=entry["type"],
        annotations=_strings(entry, "annotations"),
    )


def _parse_method(entry: dict[str, Any]) -> MethodDecl:
    return MethodDecl(
        name=entry["name"],
        visibility=Visibility(entry.get("visibility", "package")),
        return_type=entry.get("return_type", "void"),
        parameter_types=_strings(entry, "parameter_types"),
        exception_types=_strings(entry, "exception_types"),
        annotations=_strings(entry, "annotations"),
        loc=int(entry.get("loc", 0)),
        events=tuple(_parse_event(e) for e in entry.get("events", [])),
    )


def _parse_event(entry: dict[str, Any]) -> BodyEvent:
    kind = entry.get("kind")
    if kind == "field":
        return FieldAccess(owner=entry["owner"], field_name=entry["field"])
    if kind == "invoke":
        return MethodInvocation(
            owner=entry["owner"],
            method_name=entry["method"],
            arg_types=_strings(entry, "arg_types"),
        )
    raise ValueError(f"unknown event kind {kind!r}")


def _strings(entry: dict[str, Any], key: str) -> tuple[str, ...]:
    values = entry.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise TypeError(f"{key} must be a list of strings")
    return tuple(values)


def _boolean(entry: dict[str, Any], key: str, default: bool) -> bool:
    value = entry.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {value!r}")
    return value
