"""
Class emitter.

Renders message class descriptors as dataclasses.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import ClassDescriptor
from .base import CodeEmitter


class ClassEmitter(CodeEmitter):
    """Renders one message class per call."""

    TEMPLATE_NAME = "class.py.jinja2"

    def emit(self, descriptor: ClassDescriptor) -> str:
        """
        Render a class descriptor.

        Only the class's own properties become fields; inherited ones come
        from the base class. Properties whose wire name is not a valid
        identifier get an entry in ``_parameter_map`` so they stay reachable
        under the wire name.

        Args:
            descriptor: The validated class

        Returns:
            Python source of the class
        """
        return self.render(**self._prepare_class_context(descriptor))

    def _prepare_class_context(self, descriptor: ClassDescriptor) -> dict[str, Any]:
        return {
            "CLASS_NAME": descriptor.name,
            "EXTENDS": descriptor.base_name,
            "properties": descriptor.properties,
            "PARAMETER_MAP": descriptor.aliases,
        }
