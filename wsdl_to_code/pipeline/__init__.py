"""
Pipeline - node tree to Python service client generator.

This module turns a flattened service-description tree into Python code in
separate phases:

1. Phase 1 (Node tree): Parse the flattened JSON or XML tree into nodes
2. Phase 2 (Analyzer): Validate names, order classes, group operations
3. Phase 3 (Backends): Render classes and services with Jinja2 templates
4. Phase 4 (Writers): Lay out the modules and write them atomically
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, OutputConfig, OutputLayout, OutputMode
from .errors import (
    CodeValidationError,
    DuplicateSymbol,
    EmptyOutput,
    GeneratorError,
    InvalidSymbol,
    OutputExistsError,
    TreeParseError,
    UnresolvedDependency,
)
from .generator import PipelineGenerator
from .node_tree import NodeTree, load_tree
from .writers import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputLayout",
    "OutputMode",
    "AtomicWriter",
    "NodeTree",
    "load_tree",
    "GeneratorError",
    "CodeValidationError",
    "DuplicateSymbol",
    "EmptyOutput",
    "InvalidSymbol",
    "OutputExistsError",
    "TreeParseError",
    "UnresolvedDependency",
]
