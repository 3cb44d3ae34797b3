"""
Class resolver.

Validates every message class of a run, records the wire-name to class-name
map and orders the classes so that every base class precedes its subclasses.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ...utils import to_identifier
from ..errors import DuplicateSymbol, InvalidSymbol, UnresolvedDependency
from ..node_tree.nodes import ClassNode
from .ir_nodes import ClassDescriptor, PropertyDescriptor
from .type_mapper import map_type

logger = logging.getLogger(__name__)

# Identifiers the generated modules define or import themselves
RESERVED_NAMES = frozenset(
    {
        "annotations",
        "dataclass",
        "ServiceClient",
        "InvalidArgumentShape",
        "argument_signature",
        "types",
        "__init__",
    }
)


class SymbolTable:
    """Identifiers defined during one generation run.

    Message classes and services share the table: they end up side by side
    in the generated package, so one identifier can only be used once.
    """

    def __init__(self, reserved: Iterable[str] = RESERVED_NAMES):
        # identifier -> raw name it was defined from (None for reserved names)
        self._symbols: dict[str, str | None] = dict.fromkeys(reserved)

    def define(self, raw_name: str, kind: str = "class") -> str:
        """
        Validate a raw name and claim its identifier.

        Args:
            raw_name: The name as written in the schema
            kind: What is being defined (used in error messages)

        Returns:
            The validated identifier

        Raises:
            InvalidSymbol: the name normalizes to nothing
            DuplicateSymbol: the identifier is already taken
        """
        name = to_identifier(raw_name)
        if not name:
            raise InvalidSymbol(raw_name, kind)
        if name in self._symbols:
            raise DuplicateSymbol(name, raw_name, self._symbols[name])
        self._symbols[name] = raw_name
        return name

    def __contains__(self, name: str) -> bool:
        return name in self._symbols


@dataclass(frozen=True)
class ResolvedClasses:
    """Classes in dependency order and the frozen class map."""

    classes: tuple[ClassDescriptor, ...] = ()
    class_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


class ClassResolver:
    """Validates class nodes and orders them by inheritance."""

    def __init__(self, symbols: SymbolTable | None = None):
        self.symbols = symbols if symbols is not None else SymbolTable()

    def resolve(self, class_nodes: Iterable[ClassNode]) -> ResolvedClasses:
        """
        Resolve the classes of a run.

        Args:
            class_nodes: Class nodes in input order

        Returns:
            ResolvedClasses with base classes before subclasses

        Raises:
            InvalidSymbol: a class, base or property name normalizes to nothing
            DuplicateSymbol: two classes share an identifier
            UnresolvedDependency: some base class is missing or inheritance is cyclic
        """
        class_map: dict[str, str] = {}
        arena = [self._describe(node, class_map) for node in class_nodes]
        order = self._order(arena)
        return ResolvedClasses(
            classes=tuple(arena[i] for i in order),
            class_map=MappingProxyType(class_map),
        )

    def _describe(self, node: ClassNode, class_map: dict[str, str]) -> ClassDescriptor:
        """Validate one class node."""
        name = self.symbols.define(node.name, "class")
        class_map[node.name] = name

        base_name = None
        if node.extends:
            base_name = to_identifier(node.extends)
            if not base_name:
                raise InvalidSymbol(node.extends, "base class")

        properties = []
        for entry in node.properties:
            prop_name = to_identifier(entry.name)
            if not prop_name:
                raise InvalidSymbol(entry.name, "property")
            properties.append(PropertyDescriptor(raw_name=entry.name, name=prop_name, type=map_type(entry.type)))

        return ClassDescriptor(raw_name=node.name, name=name, base_name=base_name, properties=tuple(properties))

    def _order(self, arena: list[ClassDescriptor]) -> list[int]:
        """Topologically order the arena; returns indices."""
        pending = list(range(len(arena)))
        resolved: set[str] = set()
        order: list[int] = []

        # Every pass resolves at least one class or fails, so len(arena) passes suffice
        for pass_number in range(len(arena)):
            if not pending:
                break
            still_pending = []
            for index in pending:
                descriptor = arena[index]
                if descriptor.base_name is None or descriptor.base_name in resolved:
                    order.append(index)
                    resolved.add(descriptor.name)
                else:
                    still_pending.append(index)

            if len(still_pending) == len(pending):
                raise UnresolvedDependency([arena[i].name for i in still_pending])

            logger.debug(
                "Resolver pass %d: %d resolved, %d pending",
                pass_number + 1,
                len(pending) - len(still_pending),
                len(still_pending),
            )
            pending = still_pending

        return order
