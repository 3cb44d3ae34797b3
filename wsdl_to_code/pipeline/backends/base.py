"""
Base class for code emitters.

Emitters render frozen descriptors into Python source blocks through Jinja2
templates. All validation happens before rendering, so emitting never fails.
"""

from __future__ import annotations

import json
from abc import ABC
from pathlib import Path

import jinja2

from ..analyzer.type_mapper import python_annotation
from ..config import CodeGeneratorConfig

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "python"


def python_string(value: str) -> str:
    """Render a string as a double-quoted Python literal."""
    return json.dumps(value)


class CodeEmitter(ABC):
    """Abstract base class for emitters."""

    # Template rendered by the emitter
    TEMPLATE_NAME: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the emitter.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        # Add custom filters
        self.jinja_env.filters["annotation"] = python_annotation
        self.jinja_env.filters["pystr"] = python_string

        self.template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def render(self, **context) -> str:
        """Render the template; the indent string is always available as ``i``."""
        rendered = self.template.render(i=self.config.indent, **context)
        return rendered.rstrip() + "\n"
