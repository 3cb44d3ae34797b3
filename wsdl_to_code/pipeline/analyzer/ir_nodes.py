"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed and resolved tree, ready for code
generation. All names are validated and all types are mapped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ...runtime import ARRAY, check_signature


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # integer, float, string
    CLASS = "class"  # A generated (or unknown) class


@dataclass(frozen=True)
class SemanticType:
    """A mapped type."""

    kind: TypeKind = TypeKind.PRIMITIVE
    name: str = ""  # Primitive category or validated class name
    array_depth: int = 0  # Number of array levels around the base type

    @property
    def is_array(self) -> bool:
        return self.array_depth > 0

    @property
    def token(self) -> str:
        """Signature token: nested arrays collapse to a single ``array`` category."""
        return ARRAY if self.is_array else self.name

    def __str__(self) -> str:
        return self.name + "[]" * self.array_depth


@dataclass(frozen=True)
class PropertyDescriptor:
    """A property of a message class."""

    raw_name: str = ""
    name: str = ""
    type: SemanticType = field(default_factory=SemanticType)

    @property
    def is_aliased(self) -> bool:
        """Whether the wire name needs an alias entry to stay accessible."""
        return self.raw_name != self.name


@dataclass(frozen=True)
class ClassDescriptor:
    """A message class definition."""

    raw_name: str = ""
    name: str = ""
    base_name: str | None = None
    properties: tuple[PropertyDescriptor, ...] = ()

    @property
    def aliases(self) -> dict[str, str]:
        """Wire name -> validated name for every property whose names differ."""
        return {prop.raw_name: prop.name for prop in self.properties if prop.is_aliased}


@dataclass(frozen=True)
class ParameterDescriptor:
    """A parameter of a remote operation."""

    raw_name: str = ""
    name: str = ""
    type: SemanticType = field(default_factory=SemanticType)


@dataclass(frozen=True)
class OperationDescriptor:
    """One variant of a remote operation."""

    raw_name: str = ""
    name: str = ""
    parameters: tuple[ParameterDescriptor, ...] = ()
    return_type: SemanticType | None = None


@dataclass
class OverloadSet:
    """All variants of an operation sharing one validated name."""

    name: str = ""
    variants: list[OperationDescriptor] = field(default_factory=list)

    @property
    def raw_name(self) -> str:
        """Wire name of the operation (taken from the first variant)."""
        return self.variants[0].raw_name if self.variants else self.name

    @property
    def return_types(self) -> list[SemanticType]:
        """Union of the observed return types, in first-seen order."""
        result: list[SemanticType] = []
        for variant in self.variants:
            if variant.return_type is not None and variant.return_type not in result:
                result.append(variant.return_type)
        return result


@dataclass(frozen=True)
class SignatureSet:
    """Valid call signatures of an overload set, one per variant."""

    entries: tuple[str, ...] = ()

    def matches(self, signature: str) -> bool:
        """Exact-match policy: no coercion, no partial matches."""
        return signature in self.entries

    def check(self, arguments: list[Any]) -> bool:
        """Run the dispatch check against runtime values.

        Raises:
            InvalidArgumentShape: the actual signature matches no entry
        """
        return check_signature(arguments, self.entries)


@dataclass(frozen=True)
class ServiceDescriptor:
    """A service and its grouped operations."""

    raw_name: str = ""
    name: str = ""
    location: str = ""
    operations: dict[str, OverloadSet] = field(default_factory=dict)
