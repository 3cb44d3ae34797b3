"""
Output layouts.

- FlatLayout: every class and service module in the output directory
- PackageLayout: classes in a ``types`` sub-package, services at the top level
- SingleFileLayout: one module holding all classes, then all services
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

from ...utils import to_identifier
from ..config import CodeGeneratorConfig, OutputLayout
from .base import GeneratedSources, OutputLayoutStrategy

DATACLASS_IMPORT = ("dataclasses", "dataclass")

DEFAULT_MODULE_NAME = "services"


class FlatLayout(OutputLayoutStrategy):
    """``<out>/<Class>.py``, ``<out>/<Service>.py`` and ``<out>/__init__.py``."""

    def modules(self, sources: GeneratedSources, generation_comment: str) -> list[tuple[Path, str]]:
        result = []
        for generated in sources.classes:
            imports = {DATACLASS_IMPORT}
            if generated.base_name:
                imports.add((self.package_module(generated.base_name), generated.base_name))
            content = self.render_module(imports, [generated.source], generation_comment)
            result.append((Path(f"{generated.name}.py"), content))

        class_imports = {(self.package_module(name), name) for name in sources.class_map.values()}
        for service in sources.services:
            imports = self.runtime_imports() | class_imports
            content = self.render_module(imports, [service.source], generation_comment)
            result.append((Path(f"{service.name}.py"), content))

        if result:
            exported = [generated.name for generated in sources.classes] + [service.name for service in sources.services]
            imports = {(self.package_module(name), name) for name in exported}
            content = self.render_module(imports, [self.module_emitter.emit_exports(exported)], generation_comment)
            result.append((Path("__init__.py"), content))
        return result


class PackageLayout(OutputLayoutStrategy):
    """``<out>/types/<Class>.py`` with ``<out>/types/__init__.py``, ``<out>/<Service>.py`` and ``<out>/__init__.py``."""

    TYPES_PACKAGE = "types"

    def modules(self, sources: GeneratedSources, generation_comment: str) -> list[tuple[Path, str]]:
        result = []
        types_dir = Path(self.TYPES_PACKAGE)
        for generated in sources.classes:
            imports = {DATACLASS_IMPORT}
            if generated.base_name:
                imports.add((self._types_module(generated.base_name), generated.base_name))
            content = self.render_module(imports, [generated.source], generation_comment)
            result.append((types_dir / f"{generated.name}.py", content))

        if sources.classes:
            exported = [generated.name for generated in sources.classes]
            imports = {(self._types_module(name), name) for name in exported}
            content = self.render_module(imports, [self.module_emitter.emit_exports(exported)], generation_comment)
            result.append((types_dir / "__init__.py", content))

        class_imports = {(self.package_module(self.TYPES_PACKAGE, name), name) for name in sources.class_map.values()}
        for service in sources.services:
            imports = self.runtime_imports() | class_imports
            content = self.render_module(imports, [service.source], generation_comment)
            result.append((Path(f"{service.name}.py"), content))

        if result:
            exported = [service.name for service in sources.services]
            imports = {(self.package_module(name), name) for name in exported}
            blocks = [self.module_emitter.emit_exports(exported)] if exported else []
            content = self.render_module(imports, blocks, generation_comment)
            result.append((Path("__init__.py"), content))
        return result

    def _types_module(self, class_name: str) -> str:
        """Module of a class, as imported from inside the types package."""
        if self.config.namespace:
            return self.package_module(self.TYPES_PACKAGE, class_name)
        return f".{class_name}"


class SingleFileLayout(OutputLayoutStrategy):
    """``<out>/<module>.py`` with every class in dependency order, then every service."""

    def modules(self, sources: GeneratedSources, generation_comment: str) -> list[tuple[Path, str]]:
        if not sources.classes and not sources.services:
            return []

        imports = set()
        if sources.classes:
            imports.add(DATACLASS_IMPORT)
        if sources.services:
            imports |= self.runtime_imports()

        blocks = [generated.source for generated in sources.classes] + [service.source for service in sources.services]
        content = self.render_module(imports, blocks, generation_comment)
        return [(Path(f"{self.module_name(sources)}.py"), content)]

    @staticmethod
    def module_name(sources: GeneratedSources) -> str:
        """Module name from the location's host name, then the tree name."""
        if sources.location:
            host = urlparse(sources.location).hostname
            if host:
                name = to_identifier(host)
                if name:
                    return name
        return to_identifier(sources.name) or DEFAULT_MODULE_NAME


LAYOUTS: dict[OutputLayout, type[OutputLayoutStrategy]] = {
    OutputLayout.FLAT: FlatLayout,
    OutputLayout.PACKAGE: PackageLayout,
    OutputLayout.SINGLE_FILE: SingleFileLayout,
}


def get_layout(config: CodeGeneratorConfig) -> OutputLayoutStrategy:
    """Create the layout strategy selected in the configuration."""
    return LAYOUTS[config.layout](config)
