"""
Type mapper for schema primitive types.

Maps schema type names (with an optional array suffix) to the semantic
categories used for annotations and call signatures.
"""

from __future__ import annotations

from ...runtime import FLOAT, INTEGER, STRING
from ...utils import to_identifier
from ..errors import InvalidSymbol
from .ir_nodes import SemanticType, TypeKind

ARRAY_SUFFIX = "[]"

# Lookup is case-insensitive; the integer table is consulted before the float table,
# so "long" resolves to integer.
PRIMITIVE_TYPE_TABLES: list[tuple[str, frozenset[str]]] = [
    (
        INTEGER,
        frozenset(
            {
                "int",
                "integer",
                "long",
                "byte",
                "short",
                "negativeinteger",
                "nonnegativeinteger",
                "nonpositiveinteger",
                "positiveinteger",
                "unsignedbyte",
                "unsignedint",
                "unsignedlong",
                "unsignedshort",
            }
        ),
    ),
    (FLOAT, frozenset({"float", "long", "double", "decimal"})),
    (STRING, frozenset({"string", "token", "normalizedstring", "hexbinary"})),
]


def map_type(raw_type: str) -> SemanticType:
    """
    Map a schema type name to a semantic type.

    Args:
        raw_type: The schema type, e.g. "int", "string[]", "tns:Address"

    Returns:
        SemanticType; unknown names become class references

    Raises:
        InvalidSymbol: an unknown type name normalizes to nothing
    """
    base = raw_type
    array_depth = 0
    while base.endswith(ARRAY_SUFFIX):
        base = base[: -len(ARRAY_SUFFIX)]
        array_depth += 1

    lowered = base.lower()
    for category, names in PRIMITIVE_TYPE_TABLES:
        if lowered in names:
            return SemanticType(TypeKind.PRIMITIVE, category, array_depth)

    name = to_identifier(base)
    if not name:
        raise InvalidSymbol(raw_type, "type")
    return SemanticType(TypeKind.CLASS, name, array_depth)


# Python annotation of each primitive category
PYTHON_TYPE_MAP = {
    INTEGER: "int",
    FLOAT: "float",
    STRING: "str",
}


def python_annotation(semantic_type: SemanticType) -> str:
    """Render a semantic type as a Python annotation, e.g. ``list[list[int]]``."""
    if semantic_type.kind == TypeKind.PRIMITIVE:
        annotation = PYTHON_TYPE_MAP[semantic_type.name]
    else:
        annotation = semantic_type.name
    for _ in range(semantic_type.array_depth):
        annotation = f"list[{annotation}]"
    return annotation
