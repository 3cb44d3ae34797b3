"""
Pipeline generator.

Runs the phases of the generator on a node tree:

1. Resolve and order the message classes (shared ClassMap)
2. Render the classes
3. Group each service's operations into overload sets
4. Render the services, with their dispatch signatures
5. Lay out and write the modules
"""

from __future__ import annotations

import logging
from pathlib import Path

from .analyzer.class_resolver import ClassResolver, SymbolTable
from .analyzer.ir_nodes import ServiceDescriptor
from .analyzer.operation_grouper import OperationGrouper
from .backends.class_emitter import ClassEmitter
from .backends.service_emitter import ServiceEmitter
from .config import CodeGeneratorConfig
from .errors import EmptyOutput
from .node_tree.nodes import NodeTree
from .writers.base import GeneratedClass, GeneratedService, GeneratedSources
from .writers.layouts import get_layout

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates message classes and service clients from a node tree."""

    def __init__(self, tree: NodeTree, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            tree: The flattened service tree
            config: Code generation configuration
        """
        self.tree = tree
        self.config = config or CodeGeneratorConfig()

    def generate(self) -> GeneratedSources:
        """
        Validate the tree and render every class and service.

        Each call is an independent run with its own symbol table.

        Returns:
            GeneratedSources with classes in dependency order

        Raises:
            GeneratorError: on the first invalid or conflicting name, or unresolvable inheritance
        """
        symbols = SymbolTable()
        resolved = ClassResolver(symbols).resolve(self.tree.classes)
        logger.info("Resolved %d classes", len(resolved.classes))

        class_emitter = ClassEmitter(self.config)
        classes = [
            GeneratedClass(name=descriptor.name, base_name=descriptor.base_name, source=class_emitter.emit(descriptor))
            for descriptor in resolved.classes
        ]

        service_emitter = ServiceEmitter(self.config)
        services = []
        for service in self.describe_services(symbols):
            services.append(GeneratedService(name=service.name, source=service_emitter.emit(service, resolved.class_map)))
            logger.info("Generated service %s with %d operations", service.name, len(service.operations))

        return GeneratedSources(
            name=self.tree.name,
            location=self.tree.location,
            classes=classes,
            services=services,
            class_map=resolved.class_map,
        )

    def describe_services(self, symbols: SymbolTable) -> list[ServiceDescriptor]:
        """Validate service names and group their operations."""
        grouper = OperationGrouper()
        services = []
        for node in self.tree.services:
            services.append(
                ServiceDescriptor(
                    raw_name=node.name,
                    name=symbols.define(node.name, "service"),
                    location=self.tree.location,
                    operations=grouper.group(node.functions),
                )
            )
        return services

    def save(self, output_dir: str | Path, generation_comment: str = "") -> list[Path]:
        """
        Generate and write the modules with the configured layout.

        Args:
            output_dir: Directory the modules are written to
            generation_comment: Comment placed at the top of each module

        Returns:
            Paths of the written files

        Raises:
            EmptyOutput: the tree has no services, or nothing was written
        """
        if not self.tree.services:
            raise EmptyOutput("No services loaded")
        sources = self.generate()
        return get_layout(self.config).save(sources, output_dir, generation_comment)
