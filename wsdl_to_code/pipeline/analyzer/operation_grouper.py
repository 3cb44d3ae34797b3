"""
Operation grouper.

Remote operations may be declared several times under one name with
different parameter lists. They are collected into overload sets keyed by
their validated name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ...utils import to_identifier
from ..errors import InvalidSymbol
from ..node_tree.nodes import FunctionNode
from .ir_nodes import OperationDescriptor, OverloadSet, ParameterDescriptor
from .type_mapper import map_type

logger = logging.getLogger(__name__)

# Attributes of the generated service classes that operations must not shadow
RESERVED_METHOD_NAMES = frozenset(
    {
        "classmap",
        "resolve_class",
        "transport",
        "wsdl",
        "_bind_arguments",
        "_call",
        "_check_arguments",
        "__init__",
    }
)

# Names the generated methods bind themselves
RESERVED_PARAMETER_NAMES = frozenset({"self"})


def escape(name: str, taken: Iterable[str] = (), reserved: Iterable[str] = ()) -> str:
    """Append underscores to a reserved name until it is neither reserved nor taken."""
    taken = set(taken)
    reserved = set(reserved)
    if name not in reserved and name not in taken:
        return name
    escaped = f"{name}_"
    while escaped in reserved or escaped in taken:
        escaped += "_"
    return escaped


class OperationGrouper:
    """Groups operations of a service into overload sets."""

    def group(self, operation_nodes: Iterable[FunctionNode]) -> dict[str, OverloadSet]:
        """
        Group operations by validated name.

        Sets and variants keep first-seen order. Identical variants are kept.
        Escaped reserved names never land on another operation's name.

        Raises:
            InvalidSymbol: an operation or parameter name normalizes to nothing
        """
        operation_nodes = list(operation_nodes)
        natural_names = {to_identifier(node.name) for node in operation_nodes} - RESERVED_METHOD_NAMES

        overload_sets: dict[str, OverloadSet] = {}
        for node in operation_nodes:
            operation = self.describe(node, natural_names)
            overload_set = overload_sets.get(operation.name)
            if overload_set is None:
                overload_set = overload_sets[operation.name] = OverloadSet(name=operation.name)
            overload_set.variants.append(operation)

        for overload_set in overload_sets.values():
            if len(overload_set.variants) > 1:
                logger.debug("Operation %s has %d variants", overload_set.name, len(overload_set.variants))
        return overload_sets

    def describe(self, node: FunctionNode, taken_names: Iterable[str] = ()) -> OperationDescriptor:
        """
        Normalize the name, parameters and return type of one operation.

        Args:
            node: The operation
            taken_names: Names of the other operations of the service; a reserved
                name is escaped past them
        """
        name = to_identifier(node.name)
        if not name:
            raise InvalidSymbol(node.name, "operation")
        if name in RESERVED_METHOD_NAMES:
            name = escape(name, taken_names, RESERVED_METHOD_NAMES)

        parameters = []
        used: set[str] = set()
        for entry in node.parameters:
            param_name = to_identifier(entry.name)
            if not param_name:
                raise InvalidSymbol(entry.name, "parameter")
            # two wire names of one variant may normalize identically
            param_name = escape(param_name, used, RESERVED_PARAMETER_NAMES)
            used.add(param_name)
            parameters.append(ParameterDescriptor(raw_name=entry.name, name=param_name, type=map_type(entry.type)))

        return_type = map_type(node.returns[0].type) if node.returns else None
        return OperationDescriptor(
            raw_name=node.name,
            name=name,
            parameters=tuple(parameters),
            return_type=return_type,
        )
