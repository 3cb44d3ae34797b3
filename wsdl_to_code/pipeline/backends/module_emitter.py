"""
Module emitter.

Renders the prefix of a generated module: the generation comment and the
import block.
"""

from __future__ import annotations

import collections

from .base import CodeEmitter

# Standard library modules the generated code imports from
STDLIB_MODULES = {"dataclasses"}


class ModuleEmitter(CodeEmitter):
    """Renders module prefixes."""

    TEMPLATE_NAME = "prefix.py.jinja2"

    def _setup_templates(self) -> None:
        super()._setup_templates()
        self.exports_template = self.jinja_env.get_template("exports.py.jinja2")

    def emit(self, imports: set[tuple[str, str]], generation_comment: str = "") -> str:
        """
        Render a module prefix.

        Args:
            imports: (module, name) pairs to import
            generation_comment: Comment placed on the first line (if enabled in the config)

        Returns:
            The module prefix
        """
        if not self.config.add_generation_comment:
            generation_comment = ""
        return self.render(
            generation_comment=generation_comment,
            required_imports=self.assemble_imports(imports),
        )

    def assemble_imports(self, imports: set[tuple[str, str]]) -> list[str]:
        """Assemble import statements: __future__, standard library, runtime, generated modules."""
        import_groups: dict[str, set[str]] = collections.defaultdict(set)
        for module, name in imports:
            import_groups[module].add(name)

        stdlib_modules = sorted(m for m in import_groups if m in STDLIB_MODULES)
        local_modules = sorted(m for m in import_groups if self._is_local(m))
        other_modules = sorted(
            m for m in import_groups if m not in STDLIB_MODULES and m != "__future__" and not self._is_local(m)
        )

        assembled = ["from __future__ import annotations"]
        for group in (stdlib_modules, other_modules, local_modules):
            if not group:
                continue
            assembled.append("")
            for module in group:
                names = sorted(import_groups[module])
                assembled.append(f"from {module} import {', '.join(names)}")

        return assembled

    def emit_exports(self, names: list[str]) -> str:
        """Render the ``__all__`` list of a package module."""
        return self.exports_template.render(i=self.config.indent, names=names).rstrip() + "\n"

    def _is_local(self, module: str) -> bool:
        """Whether a module belongs to the generated package."""
        if module.startswith("."):
            return True
        namespace = self.config.namespace
        return namespace is not None and (module == namespace or module.startswith(namespace + "."))
