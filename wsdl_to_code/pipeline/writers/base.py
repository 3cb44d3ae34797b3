"""
Base class for output layouts.

A layout decides which module each rendered block goes to, adds the module
prefix (generation comment and imports) and writes the modules to disk.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ..backends.module_emitter import ModuleEmitter
from ..config import CodeGeneratorConfig
from ..errors import EmptyOutput
from .atomic_writer import AtomicWriter

logger = logging.getLogger(__name__)


@dataclass
class GeneratedClass:
    """Rendered source of one message class."""

    name: str = ""
    base_name: str | None = None
    source: str = ""


@dataclass
class GeneratedService:
    """Rendered source of one service class."""

    name: str = ""
    source: str = ""


@dataclass
class GeneratedSources:
    """Everything a run renders, before layout."""

    name: str = ""  # Tree name
    location: str = ""  # WSDL location
    classes: list[GeneratedClass] = field(default_factory=list)  # Base classes first
    services: list[GeneratedService] = field(default_factory=list)
    class_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


class OutputLayoutStrategy(ABC):
    """Abstract base class for output layouts."""

    def __init__(self, config: CodeGeneratorConfig):
        self.config = config
        self.module_emitter = ModuleEmitter(config)
        self.writer = AtomicWriter(config.output)

    def save(self, sources: GeneratedSources, output_dir: str | Path, generation_comment: str = "") -> list[Path]:
        """
        Write the generated modules.

        Args:
            sources: Rendered classes and services
            output_dir: Directory the modules are written to
            generation_comment: Comment placed at the top of each module

        Returns:
            Paths of the written files

        Raises:
            EmptyOutput: No file was written
            OutputExistsError: A file exists and the output mode forbids overwriting it
        """
        output_dir = Path(output_dir)
        written = []
        for relative_path, content in self.modules(sources, generation_comment):
            path = output_dir / relative_path
            self.writer.write(path, content)
            written.append(path)

        if not written:
            raise EmptyOutput(f"No files written to {output_dir}")
        logger.info("Wrote %d files to %s", len(written), output_dir)
        return written

    @abstractmethod
    def modules(self, sources: GeneratedSources, generation_comment: str) -> list[tuple[Path, str]]:
        """
        Lay out the generated sources.

        Returns:
            (path relative to the output directory, module content) pairs
        """

    def render_module(self, imports: set[tuple[str, str]], blocks: list[str], generation_comment: str) -> str:
        """Module prefix followed by the blocks, two blank lines apart."""
        prefix = self.module_emitter.emit(imports, generation_comment)
        if not blocks:
            return prefix
        return prefix + "\n\n" + "\n\n".join(blocks)

    def package_module(self, *parts: str) -> str:
        """Module path of a generated module: absolute under the namespace, relative otherwise."""
        if self.config.namespace:
            return ".".join((self.config.namespace, *parts))
        return "." + ".".join(parts)

    def runtime_imports(self) -> set[tuple[str, str]]:
        """Runtime names a service module needs."""
        runtime = self.config.runtime_module
        imports = {(runtime, "ServiceClient")}
        if not self.config.skip_argument_check:
            imports.add((runtime, "InvalidArgumentShape"))
            imports.add((runtime, "argument_signature"))
        return imports
