"""
Node tree module.

Contains the node definitions and parser for the flattened service tree.
"""

from __future__ import annotations

from .nodes import ClassNode, EntryNode, FunctionNode, NodeTree, ServiceNode
from .parser import TreeParser, load_tree

__all__ = [
    "ClassNode",
    "EntryNode",
    "FunctionNode",
    "NodeTree",
    "ServiceNode",
    "TreeParser",
    "load_tree",
]
