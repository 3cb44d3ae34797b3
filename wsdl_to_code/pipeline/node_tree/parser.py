"""
Parser for the flattened service-description tree.

Phase 1 of the pipeline: read the tree produced by the upstream transform
into nodes, without validating any name or type.
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from ..errors import TreeParseError
from .nodes import ClassNode, EntryNode, FunctionNode, NodeTree, ServiceNode

logger = logging.getLogger(__name__)


class TreeParser:
    """Parses a flattened tree document (JSON dictionary or XML) into nodes."""

    def parse(self, document: dict[str, Any], name: str = "") -> NodeTree:
        """
        Parse a JSON tree document.

        Args:
            document: The decoded JSON document
            name: Fallback tree name when the document has none

        Returns:
            NodeTree with classes and services in document order
        """
        if not isinstance(document, dict):
            raise TreeParseError("Tree document must be an object")

        tree = NodeTree(
            name=document.get("name") or name,
            location=document.get("location") or "",
        )

        for i, class_def in enumerate(document.get("classes") or []):
            path = f"classes[{i}]"
            tree.classes.append(
                ClassNode(
                    name=self._required(class_def, "name", path),
                    extends=class_def.get("extends") or None,
                    properties=self._parse_entries(class_def.get("properties"), f"{path}.properties"),
                    source_path=path,
                )
            )

        for i, service_def in enumerate(document.get("services") or []):
            path = f"services[{i}]"
            service = ServiceNode(name=self._required(service_def, "name", path), source_path=path)
            for j, function_def in enumerate(service_def.get("functions") or []):
                function_path = f"{path}.functions[{j}]"
                service.functions.append(
                    FunctionNode(
                        name=self._required(function_def, "name", function_path),
                        parameters=self._parse_entries(function_def.get("parameters"), f"{function_path}.parameters"),
                        returns=self._parse_entries(function_def.get("returns"), f"{function_path}.returns"),
                        source_path=function_path,
                    )
                )
            tree.services.append(service)

        logger.debug("Parsed tree %r: %d classes, %d services", tree.name, len(tree.classes), len(tree.services))
        return tree

    def parse_xml(self, text: str | bytes, name: str = "") -> NodeTree:
        """
        Parse the XML form of the tree.

        Classes are ``<class name="...">`` elements with an optional
        ``<extends>`` child and ``<entry name="..." type="..."/>`` descendants.
        Services are ``<service name="...">`` elements holding
        ``<function name="...">`` elements, each with optional
        ``<parameters>`` and ``<returns>`` entry lists.

        Args:
            text: The XML document
            name: Fallback tree name when the root element has none

        Returns:
            NodeTree with classes and services in document order
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise TreeParseError(f"Invalid tree document: {e}") from e

        tree = NodeTree(
            name=root.get("name") or name,
            location=root.get("location") or "",
        )

        for i, element in enumerate(self._iter_local(root, "class")):
            path = f"class[{i}]"
            extends_element = next(self._iter_local(element, "extends"), None)
            extends = None
            if extends_element is not None:
                extends = (extends_element.text or "").strip() or None
            tree.classes.append(
                ClassNode(
                    name=self._required(element.attrib, "name", path),
                    extends=extends,
                    properties=self._parse_xml_entries(element, path),
                    source_path=path,
                )
            )

        for i, element in enumerate(self._iter_local(root, "service")):
            path = f"service[{i}]"
            service = ServiceNode(name=self._required(element.attrib, "name", path), source_path=path)
            for j, function in enumerate(self._iter_local(element, "function")):
                function_path = f"{path}.function[{j}]"
                parameters = next(self._iter_local(function, "parameters"), None)
                returns = next(self._iter_local(function, "returns"), None)
                service.functions.append(
                    FunctionNode(
                        name=self._required(function.attrib, "name", function_path),
                        parameters=self._parse_xml_entries(parameters, f"{function_path}.parameters"),
                        returns=self._parse_xml_entries(returns, f"{function_path}.returns"),
                        source_path=function_path,
                    )
                )
            tree.services.append(service)

        logger.debug("Parsed tree %r: %d classes, %d services", tree.name, len(tree.classes), len(tree.services))
        return tree

    def _parse_entries(self, entries: list[dict[str, Any]] | None, path: str) -> list[EntryNode]:
        """Parse a list of JSON entries."""
        result = []
        for i, entry in enumerate(entries or []):
            entry_path = f"{path}[{i}]"
            result.append(
                EntryNode(
                    name=self._required(entry, "name", entry_path),
                    type=self._required(entry, "type", entry_path),
                    source_path=entry_path,
                )
            )
        return result

    def _parse_xml_entries(self, element: ET.Element | None, path: str) -> list[EntryNode]:
        """Parse the ``<entry>`` descendants of an element."""
        if element is None:
            return []
        result = []
        for i, entry in enumerate(self._iter_local(element, "entry")):
            entry_path = f"{path}.entry[{i}]"
            result.append(
                EntryNode(
                    name=self._required(entry.attrib, "name", entry_path),
                    type=self._required(entry.attrib, "type", entry_path),
                    source_path=entry_path,
                )
            )
        return result

    @staticmethod
    def _iter_local(element: ET.Element, local_name: str):
        """Iterate descendants by local tag name, ignoring any XML namespace."""
        for child in element.iter():
            if child is not element and child.tag.rpartition("}")[2] == local_name:
                yield child

    @staticmethod
    def _required(source: Any, key: str, path: str) -> str:
        """Fetch a required string attribute."""
        if not isinstance(source, dict):
            raise TreeParseError(f"{path}: expected an object")
        value = source.get(key)
        if not isinstance(value, str) or value == "":
            raise TreeParseError(f"{path}: missing required attribute {key!r}")
        return value


def load_tree(path: str | Path, name: str | None = None) -> NodeTree:
    """Load a tree document from a ``.json`` or ``.xml`` file."""
    path = Path(path)
    if name is None:
        name = path.stem
    parser = TreeParser()
    if path.suffix.lower() == ".xml":
        return parser.parse_xml(path.read_bytes(), name)
    text = path.read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeParseError(f"Invalid tree document {path}: {e}") from e
    return parser.parse(document, name)
