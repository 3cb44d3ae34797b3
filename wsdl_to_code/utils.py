"""
Utility functions for the WSDL to code generator.
"""

import keyword
import re

# Characters that cannot start an identifier: digits and anything that is not a word character
_LEADING_INVALID = re.compile(r"^[\W\d]+")

# Characters that cannot appear anywhere in an identifier
_INVALID = re.compile(r"\W+")


def normalize_name(name: str) -> str:
    """Strip every character that is illegal in an identifier.

    Leading characters that cannot begin an identifier are removed first,
    then every remaining non-word character. The function never fails: a
    name made only of invalid characters normalizes to the empty string.

    Examples:
        "MY-VALUE" -> "MYVALUE"
        "Foo-Bar" -> "FooBar"
        "1st_item" -> "st_item"
        "tns:User" -> "tnsUser"
        "--" -> ""

    Args:
        name: The raw schema name

    Returns:
        The normalized name
    """
    return _INVALID.sub("", _LEADING_INVALID.sub("", name))


def escape_keyword(name: str) -> str:
    """Escape a Python reserved keyword with a trailing underscore."""
    if keyword.iskeyword(name) or name == "__debug__":
        return f"{name}_"
    return name


def to_identifier(name: str) -> str:
    """Convert a raw schema name to the identifier used in generated code.

    Returns the empty string when nothing valid is left of the name; callers
    decide whether that is an error.
    """
    normalized = normalize_name(name)
    if not normalized:
        return ""
    return escape_keyword(normalized)
