"""
Node definitions for the flattened service-description tree.

These nodes mirror the tree produced by the upstream WSDL flattening
transform: raw schema names and raw type names, nothing validated yet.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EntryNode:
    """A named, typed entry (class property, operation parameter or return value)."""

    name: str = ""
    type: str = ""

    # Original source location in the document (for error messages)
    source_path: str = ""


@dataclass
class ClassNode:
    """A message type."""

    name: str = ""
    extends: str | None = None  # Raw name of the base class
    properties: list[EntryNode] = field(default_factory=list)
    source_path: str = ""


@dataclass
class FunctionNode:
    """A remote operation. Several functions of a service may share a name."""

    name: str = ""
    parameters: list[EntryNode] = field(default_factory=list)
    returns: list[EntryNode] = field(default_factory=list)  # Only the first entry is used
    source_path: str = ""


@dataclass
class ServiceNode:
    """A service with its operations."""

    name: str = ""
    functions: list[FunctionNode] = field(default_factory=list)
    source_path: str = ""


@dataclass
class NodeTree:
    """Root of the flattened tree."""

    name: str = ""
    location: str = ""  # WSDL location used as default by the generated services
    classes: list[ClassNode] = field(default_factory=list)
    services: list[ServiceNode] = field(default_factory=list)
