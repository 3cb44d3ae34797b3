"""
Analyzer module.

Contains name and type normalization, class ordering, operation grouping
and signature synthesis.
"""

from __future__ import annotations

from .class_resolver import ClassResolver, ResolvedClasses, SymbolTable
from .ir_nodes import (
    ClassDescriptor,
    OperationDescriptor,
    OverloadSet,
    ParameterDescriptor,
    PropertyDescriptor,
    SemanticType,
    ServiceDescriptor,
    SignatureSet,
    TypeKind,
)
from .operation_grouper import OperationGrouper
from .signatures import SignatureSynthesizer
from .type_mapper import map_type, python_annotation

__all__ = [
    "ClassDescriptor",
    "ClassResolver",
    "OperationDescriptor",
    "OperationGrouper",
    "OverloadSet",
    "ParameterDescriptor",
    "PropertyDescriptor",
    "ResolvedClasses",
    "SemanticType",
    "ServiceDescriptor",
    "SignatureSet",
    "SignatureSynthesizer",
    "SymbolTable",
    "TypeKind",
    "map_type",
    "python_annotation",
]
