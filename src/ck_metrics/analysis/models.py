"""Structured facts about one compiled class, as produced by a class reader."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..config.defaults import LAMBDA_METHOD_PREFIX


class Visibility(str, Enum):
    """Access modifier of a method."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"
    PRIVATE = "private"


@dataclass(frozen=True)
class FieldAccess:
    """A field read or write inside a method body."""

    owner: str
    field_name: str


@dataclass(frozen=True)
class MethodInvocation:
    """A method call inside a method body."""

    owner: str
    method_name: str
    arg_types: tuple[str, ...] = ()


BodyEvent = FieldAccess | MethodInvocation


@dataclass(frozen=True)
class FieldDecl:
    """A declared field: its type and annotation types."""

    name: str
    type_name: str
    annotations: tuple[str, ...] = ()


@dataclass(frozen=True)
class MethodDecl:
    """A declared method and the ordered events of its body.

    Attributes:
        name: Method name (``<init>`` for constructors)
        visibility: Access modifier
        return_type: Return type name (``void`` when none)
        parameter_types: Parameter type names in declaration order
        exception_types: Declared thrown exception class names
        annotations: Annotation type names
        loc: Lines of code from the line-number table (0 without debug info)
        events: Field accesses and invocations in instruction order
    """

    name: str
    visibility: Visibility = Visibility.PACKAGE
    return_type: str = "void"
    parameter_types: tuple[str, ...] = ()
    exception_types: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()
    loc: int = 0
    events: tuple[BodyEvent, ...] = ()

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @property
    def is_lambda_body(self) -> bool:
        """True for compiler-synthesized lambda bodies (``lambda$name$N``)."""
        return self.name.startswith(LAMBDA_METHOD_PREFIX)


@dataclass(frozen=True)
class ParsedClass:
    """Everything the analyzer needs to know about one class.

    Attributes:
        name: Fully-qualified dotted class name
        package: Package name ("" for the default package)
        is_public: Class carries the public modifier
        superclass: Immediate superclass name (None only for the root class)
        ancestors: Resolved superclass chain, nearest first, without the
            universal root
        unresolved_ancestor: Ancestor the reader could not load; the chain
            in ``ancestors`` stops before it
        interfaces: Directly implemented interface names
        annotations: Class-level annotation type names
        fields: Field declarations
        methods: Method declarations in declaration order
    """

    name: str
    package: str = ""
    is_public: bool = True
    superclass: str | None = "java.lang.Object"
    ancestors: tuple[str, ...] = ()
    unresolved_ancestor: str | None = None
    interfaces: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()
    fields: tuple[FieldDecl, ...] = field(default_factory=tuple)
    methods: tuple[MethodDecl, ...] = field(default_factory=tuple)
