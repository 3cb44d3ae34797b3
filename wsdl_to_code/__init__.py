"""WSDL to Code Generator

A Python package for generating typed message classes and service clients
from a flattened WSDL service tree. Classes are ordered by inheritance,
overloaded operations share one method with a runtime argument-shape check,
and the output can be laid out as a package, a flat directory or one module.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    GeneratorError,
    OutputConfig,
    OutputLayout,
    OutputMode,
    PipelineGenerator,
    load_tree,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputLayout",
    "OutputMode",
    "AtomicWriter",
    "GeneratorError",
    "load_tree",
]
