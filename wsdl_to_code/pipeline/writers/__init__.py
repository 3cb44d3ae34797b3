"""
Writers module.

Lays out the rendered classes and services as Python modules and writes
them atomically.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .base import GeneratedClass, GeneratedService, GeneratedSources, OutputLayoutStrategy
from .layouts import FlatLayout, PackageLayout, SingleFileLayout, get_layout

__all__ = [
    "AtomicWriter",
    "FlatLayout",
    "GeneratedClass",
    "GeneratedService",
    "GeneratedSources",
    "OutputLayoutStrategy",
    "PackageLayout",
    "SingleFileLayout",
    "get_layout",
]
