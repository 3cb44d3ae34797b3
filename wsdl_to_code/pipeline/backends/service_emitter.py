"""
Service emitter.

Renders service descriptors as ``ServiceClient`` subclasses with one method
per overload set.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from ..analyzer.ir_nodes import OperationDescriptor, OverloadSet, SemanticType, ServiceDescriptor, TypeKind
from ..analyzer.signatures import SignatureSynthesizer
from ..analyzer.type_mapper import python_annotation
from ..config import CodeGeneratorConfig
from .base import CodeEmitter


def _tuple(items: Iterable[str]) -> str:
    """Render a tuple literal from rendered items."""
    items = list(items)
    if len(items) == 1:
        return f"({items[0]},)"
    return "(" + ", ".join(items) + ")"


class ServiceEmitter(CodeEmitter):
    """Renders one service class per call."""

    TEMPLATE_NAME = "service.py.jinja2"

    def __init__(self, config: CodeGeneratorConfig):
        super().__init__(config)
        self.synthesizer = SignatureSynthesizer()

    def emit(self, service: ServiceDescriptor, class_map: Mapping[str, str]) -> str:
        """
        Render a service descriptor.

        Args:
            service: The service with its grouped operations
            class_map: Wire class name -> generated class name, for the whole run

        Returns:
            Python source of the service class
        """
        known_classes = set(class_map.values())
        methods = [self._prepare_method_context(overload_set, known_classes) for overload_set in service.operations.values()]
        return self.render(
            SERVICE_NAME=service.name,
            location=service.location,
            classmap=dict(class_map),
            check_arguments=not self.config.skip_argument_check,
            methods=methods,
        )

    def _prepare_method_context(self, overload_set: OverloadSet, known_classes: set[str]) -> dict[str, Any]:
        """
        Prepare the template context for one operation.

        Args:
            overload_set: All variants of the operation
            known_classes: Names of the generated classes

        Returns:
            Dictionary of template variables
        """
        signatures = self.synthesizer.synthesize(overload_set)
        context = {
            "name": overload_set.name,
            "raw_name": overload_set.raw_name,
            "options": [self._format_option(variant) for variant in overload_set.variants],
            "returns": " | ".join(python_annotation(t) for t in overload_set.return_types),
            "valid_parameters": signatures.entries,
            "parameters": ["*args"],
            "args": None,
        }
        if self.config.expand_method_arguments:
            context["parameters"], context["args"] = self._expand_arguments(overload_set, known_classes)
        return context

    def _expand_arguments(self, overload_set: OverloadSet, known_classes: set[str]) -> tuple[list[str], str]:
        """Explicit parameters: the union of all variants' parameter names, in first-seen order.

        A single variant takes its parameters positionally. Overloaded
        operations take them as keywords; the bound ones are ordered like the
        variant declaring exactly those names.

        Returns the parameter declarations and the expression collecting the call arguments.
        """
        # parameter name -> annotations seen for it (None once an unknown class shows up)
        seen: dict[str, list[str] | None] = {}
        orderings: list[tuple[str, ...]] = []
        for variant in overload_set.variants:
            ordering = tuple(param.name for param in variant.parameters)
            if ordering not in orderings:
                orderings.append(ordering)
            for param in variant.parameters:
                annotations = seen.setdefault(param.name, [])
                if annotations is None:
                    continue
                annotation = self._annotation(param.type, known_classes)
                if annotation is None:
                    seen[param.name] = None
                elif annotation not in annotations:
                    annotations.append(annotation)

        overloaded = len(overload_set.variants) > 1 and bool(seen)
        parameters = ["*"] if overloaded else []
        for name, annotations in seen.items():
            if annotations:
                declaration = f"{name}: {' | '.join(annotations)}"
                if overloaded:
                    declaration += " | None = None"
            else:
                declaration = f"{name}=None" if overloaded else name
            parameters.append(declaration)

        if not overloaded:
            return parameters, f"[{', '.join(seen)}]"

        arguments = "{" + ", ".join(f"{json.dumps(name)}: {name}" for name in seen) + "}"
        names = _tuple(_tuple(json.dumps(name) for name in ordering) for ordering in orderings)
        return parameters, f"self._bind_arguments({arguments}, {names})"

    @staticmethod
    def _annotation(semantic_type: SemanticType, known_classes: set[str]) -> str | None:
        """Annotation of a parameter; references to classes outside the run get none."""
        if semantic_type.kind == TypeKind.CLASS and semantic_type.name not in known_classes:
            return None
        return python_annotation(semantic_type)

    @staticmethod
    def _format_option(variant: OperationDescriptor) -> str:
        """Docstring line describing one valid parameter combination."""
        if not variant.parameters:
            return "(no arguments)"
        return "(" + ", ".join(f"{param.name}: {python_annotation(param.type)}" for param in variant.parameters) + ")"
