"""Measurement policy and class-name classification helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ..config.defaults import (
    DESCRIPTOR_ARTIFACT_PREFIXES,
    DI_FRAMEWORK_MARKER,
    DI_FRAMEWORK_ROOTS,
    LAMBDA_DISPATCHER_NAMES,
    PLATFORM_PREFIXES,
    PRIMITIVE_TYPES,
)
from ..config.settings import MetricsConfig


def is_platform_class(class_name: str) -> bool:
    """Check if a class belongs to the Java platform (standard library).

    Examples:
        >>> is_platform_class("java.util.List")
        True

        >>> is_platform_class("org.w3c.dom.Node")
        True

        >>> is_platform_class("com.example.Order")
        False
    """
    return class_name.startswith(PLATFORM_PREFIXES)


def is_descriptor_artifact(class_name: str) -> bool:
    """Check if a name is a platform type still in class-file descriptor form.

    Annotation types arrive as descriptors such as ``Ljava/lang/Override;``.

    Examples:
        >>> is_descriptor_artifact("Ljava/lang/Override;")
        True

        >>> is_descriptor_artifact("java.lang.Override")
        False
    """
    return class_name.startswith(DESCRIPTOR_ARTIFACT_PREFIXES)


def is_di_framework_class(class_name: str) -> bool:
    """Check if a class belongs to the dependency-injection framework.

    Examples:
        >>> is_di_framework_class("Lorg/springframework/stereotype/Service;")
        True

        >>> is_di_framework_class("org.springframework.context.ApplicationContext")
        True

        >>> is_di_framework_class("org.example.springframework.Fake")
        True

        >>> is_di_framework_class("com.springframework.Other")
        False
    """
    return DI_FRAMEWORK_MARKER in class_name and class_name.startswith(
        DI_FRAMEWORK_ROOTS
    )


def is_lambda_dispatcher(name: str) -> bool:
    """Check if a name is a lambda-dispatcher placeholder, not a real class."""
    return name in LAMBDA_DISPATCHER_NAMES


def class_name_of_type(type_name: str) -> str | None:
    """Return the class a type name refers to, or None for primitives.

    Array dimensions are stripped so that ``Foo[][]`` couples to ``Foo``.

    Examples:
        >>> class_name_of_type("com.example.Order[]")
        'com.example.Order'

        >>> class_name_of_type("int[]") is None
        True
    """
    base = type_name.strip()
    while base.endswith("[]"):
        base = base[:-2].rstrip()
    if not base or base in PRIMITIVE_TYPES:
        return None
    return base


def package_of(class_name: str) -> str:
    """Return the package part of a dotted class name ("" for the default package).

    Examples:
        >>> package_of("com.example.Order")
        'com.example'

        >>> package_of("Order")
        ''
    """
    package, _, _ = class_name.rpartition(".")
    return package


@dataclass(frozen=True)
class MetricsFilter:
    """Policy switch consulted by every coupling, DIT and response decision.

    Attributes:
        include_platform: Count platform classes instead of ignoring them
    """

    include_platform: bool = False

    @classmethod
    def from_config(cls, config: MetricsConfig) -> MetricsFilter:
        return cls(include_platform=config.include_platform)

    def excludes(self, class_name: str) -> bool:
        """True if ``class_name`` is a platform class the policy ignores."""
        return not self.include_platform and is_platform_class(class_name)
