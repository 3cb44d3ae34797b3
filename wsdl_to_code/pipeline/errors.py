"""
Errors raised by the generator pipeline.

All of them are fatal for the run: downstream consumers expect a fully
consistent, fully ordered output set, so there is no partial success.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generation failures."""

    pass


class InvalidSymbol(GeneratorError):
    """Raised when a schema name leaves nothing usable after normalization."""

    def __init__(self, raw_name: str, kind: str = "symbol"):
        self.raw_name = raw_name
        self.kind = kind
        super().__init__(f"Invalid {kind} name {raw_name!r}: no identifier characters left after normalization")


class DuplicateSymbol(GeneratorError):
    """Raised when two schema names normalize to the same identifier.

    Also raised when a schema name collides with an identifier the generated
    modules define or import themselves.
    """

    def __init__(self, name: str, raw_name: str, existing: str | None = None):
        self.name = name
        self.raw_name = raw_name
        self.existing = existing
        if existing is None:
            message = f"Class {name} already defined. {raw_name!r} collides with a name reserved by the generated code."
        else:
            message = f"Class {name} already defined. Cannot redefine {name} from {raw_name!r} (first defined by {existing!r})."
        super().__init__(message)


class UnresolvedDependency(GeneratorError):
    """Raised when inheritance cannot be resolved (cycle or missing base)."""

    def __init__(self, names: list[str]):
        self.names = list(names)
        super().__init__("Error loading classes: " + ", ".join(self.names))


class EmptyOutput(GeneratorError):
    """Raised when there is nothing to write or nothing was written."""

    pass


class TreeParseError(GeneratorError):
    """Raised when the input node tree document is malformed."""

    pass


class OutputExistsError(GeneratorError, FileExistsError):
    """Raised when an output file exists and the output mode forbids overwriting it."""

    pass


class CodeValidationError(GeneratorError):
    """Raised when generated code fails validation before being written."""

    pass
