"""Runtime support for generated service clients.

Generated service modules import this module (the import path can be changed
with the ``runtime_module`` configuration option). It carries the base class
the generated services derive from and the argument categories shared by the
generator and the generated dispatch checks.

Example:
    def transport(client, operation, args):
        ...  # send the call over the wire, use client.resolve_class() for responses

    service = UserService(transport=transport)
    service.getUser("alice")
"""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, ClassVar

logger = logging.getLogger(__name__)

# Argument categories. Schema types map to the first four, runtime values to all of them.
INTEGER = "integer"
FLOAT = "float"
STRING = "string"
ARRAY = "array"
BOOLEAN = "boolean"
NULL = "NULL"

Transport = Callable[["ServiceClient", str, list[Any]], Any]


class InvalidArgumentShape(TypeError):
    """Raised by generated service calls when no overload matches the arguments."""

    def __init__(self, signature: str):
        self.signature = signature
        super().__init__("Invalid parameter types: " + signature.replace(")(", ", "))


class InvalidArgumentNames(InvalidArgumentShape):
    """Raised by generated keyword calls when the bound parameters match no overload."""

    def __init__(self, names: Iterable[str]):
        self.names = tuple(names)
        self.signature = ""
        TypeError.__init__(self, "Invalid parameter names: (" + ", ".join(self.names) + ")")


class TransportError(RuntimeError):
    """Raised when a remote call cannot be delegated."""


def argument_category(value: Any) -> str:
    """Return the signature token of a runtime value.

    Structured values are identified by their own class name, without the
    module they were defined in.
    """
    if value is None:
        return NULL
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, int):
        return INTEGER
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    if isinstance(value, (list, tuple, dict)):
        return ARRAY
    return type(value).__name__


def argument_signature(arguments: Iterable[Any]) -> str:
    """Return the actual signature of an argument list, e.g. ``"(integer)(string)"``."""
    return "".join(f"({argument_category(arg)})" for arg in arguments)


def check_signature(arguments: Iterable[Any], valid_parameters: Sequence[str]) -> bool:
    """Check an argument list against the valid signatures of an operation.

    Raises:
        InvalidArgumentShape: no valid signature is exactly equal to the actual one
    """
    signature = argument_signature(arguments)
    if signature not in valid_parameters:
        raise InvalidArgumentShape(signature)
    return True


class ServiceClient:
    """Base class for generated service classes.

    Generated subclasses define:
        classmap: ClassVar[dict[str, str]]  # wire class name -> generated class name

    Entries passed in ``classmap`` take precedence over the generated ones.
    """

    classmap: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        wsdl: str = "",
        transport: Transport | None = None,
        classmap: Mapping[str, str] | None = None,
    ) -> None:
        self.wsdl = wsdl
        self.transport = transport
        self.classmap = {**type(self).classmap, **(classmap or {})}

    def resolve_class(self, wire_name: str) -> type:
        """Return the generated class a wire-level class name deserializes to.

        Dotted targets are imported, bare names are looked up in the module
        that defines the service class.

        Raises:
            KeyError: the wire name is not in the classmap
        """
        target = self.classmap[wire_name]
        module_name, _, class_name = target.rpartition(".")
        if module_name:
            module = importlib.import_module(module_name)
        else:
            module = sys.modules[type(self).__module__]
        return getattr(module, class_name)

    def _bind_arguments(self, arguments: Mapping[str, Any], orderings: Sequence[Sequence[str]]) -> list[Any]:
        """Order keyword arguments the way the matching overload declares them.

        Arguments left to None are unbound. The first ordering whose names
        are exactly the bound ones wins.

        Raises:
            InvalidArgumentNames: no overload declares exactly the bound names
        """
        bound = [name for name, value in arguments.items() if value is not None]
        for ordering in orderings:
            if set(ordering) == set(bound) and len(ordering) == len(bound):
                return [arguments[name] for name in ordering]
        raise InvalidArgumentNames(bound)

    def _call(self, operation: str, args: Sequence[Any]) -> Any:
        """Delegate a remote call to the transport."""
        if self.transport is None:
            raise TransportError(f"No transport configured for {type(self).__name__}.{operation}")
        logger.debug("Calling %s with %d argument(s)", operation, len(args))
        return self.transport(self, operation, list(args))
