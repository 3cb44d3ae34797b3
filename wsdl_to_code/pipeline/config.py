"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


def normalize_namespace(namespace: str | None) -> str | None:
    """Strip surrounding dots; an empty namespace disables namespacing."""
    if not namespace:
        return None
    return namespace.strip(".") or None


class OutputLayout(str, Enum):
    """Directory and file layout of the generated sources."""

    FLAT = "flat"  # Every class and service module in the output directory
    PACKAGE = "package"  # Classes in a types/ sub-package, services at the top level
    SINGLE_FILE = "single_file"  # Classes and services concatenated into one module


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Package the generated modules live in (None disables namespacing: relative imports)
    namespace: str | None = None

    # Indentation used in generated code
    indent: str = "    "

    # Declare explicit operation parameters instead of *args
    expand_method_arguments: bool = False

    # Skip the generated argument-shape check (only when callers guarantee correct arguments)
    skip_argument_check: bool = False

    # Output layout
    layout: OutputLayout = OutputLayout.PACKAGE

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # Module the generated services import their runtime support from
    runtime_module: str = "wsdl_to_code.runtime"

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        self.namespace = normalize_namespace(self.namespace)
        self.layout = OutputLayout(self.layout)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k == "layout":
                config.layout = OutputLayout(v)
            elif k == "namespace":
                config.namespace = normalize_namespace(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "indent": self.indent,
            "expand_method_arguments": self.expand_method_arguments,
            "skip_argument_check": self.skip_argument_check,
            "layout": self.layout.value,
            "add_generation_comment": self.add_generation_comment,
            "runtime_module": self.runtime_module,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
