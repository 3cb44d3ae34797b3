"""
Tests for class validation and inheritance ordering.
"""

from __future__ import annotations

import pytest

from wsdl_to_code.pipeline.analyzer.class_resolver import ClassResolver, SymbolTable
from wsdl_to_code.pipeline.errors import DuplicateSymbol, InvalidSymbol, UnresolvedDependency
from wsdl_to_code.pipeline.node_tree.nodes import ClassNode, EntryNode


def class_node(name, extends=None, **properties):
    return ClassNode(
        name=name,
        extends=extends,
        properties=[EntryNode(name=prop_name, type=prop_type) for prop_name, prop_type in properties.items()],
    )


def names(resolved):
    return [descriptor.name for descriptor in resolved.classes]


class TestOrdering:
    def test_base_precedes_subclass(self):
        resolved = ClassResolver().resolve([class_node("Derived", "Base"), class_node("Base")])
        assert names(resolved) == ["Base", "Derived"]

    def test_input_order_kept_within_a_pass(self):
        resolved = ClassResolver().resolve([class_node("B"), class_node("A"), class_node("C")])
        assert names(resolved) == ["B", "A", "C"]

    def test_classes_resolved_earlier_in_a_pass_count(self):
        resolved = ClassResolver().resolve([class_node("Base"), class_node("Middle", "Base"), class_node("Leaf", "Middle")])
        assert names(resolved) == ["Base", "Middle", "Leaf"]

    def test_deep_chain_in_reverse_order(self):
        nodes = [class_node(f"C{i}", f"C{i - 1}" if i else None) for i in range(6)]
        resolved = ClassResolver().resolve(list(reversed(nodes)))
        assert names(resolved) == [f"C{i}" for i in range(6)]

    def test_every_base_is_emitted_before_its_subclasses(self):
        nodes = [
            class_node("Leaf", "Middle"),
            class_node("Other", "Root"),
            class_node("Middle", "Root"),
            class_node("Root"),
        ]
        order = names(ClassResolver().resolve(nodes))
        for descriptor in ClassResolver().resolve(nodes).classes:
            if descriptor.base_name:
                assert order.index(descriptor.base_name) < order.index(descriptor.name)

    def test_base_name_is_normalized(self):
        resolved = ClassResolver().resolve([class_node("Child", "tns:Parent"), class_node("tnsParent")])
        assert names(resolved) == ["tnsParent", "Child"]
        assert resolved.classes[1].base_name == "tnsParent"

    def test_empty_input(self):
        resolved = ClassResolver().resolve([])
        assert resolved.classes == ()
        assert dict(resolved.class_map) == {}


class TestFailures:
    def test_cycle_names_both_classes(self):
        with pytest.raises(UnresolvedDependency) as exc_info:
            ClassResolver().resolve([class_node("A", "B"), class_node("B", "A")])
        assert exc_info.value.names == ["A", "B"]
        assert "A" in str(exc_info.value) and "B" in str(exc_info.value)

    def test_missing_base(self):
        with pytest.raises(UnresolvedDependency) as exc_info:
            ClassResolver().resolve([class_node("Ok"), class_node("Orphan", "Missing")])
        assert exc_info.value.names == ["Orphan"]

    def test_self_inheritance(self):
        with pytest.raises(UnresolvedDependency):
            ClassResolver().resolve([class_node("Loop", "Loop")])

    def test_duplicate_after_normalization(self):
        with pytest.raises(DuplicateSymbol) as exc_info:
            ClassResolver().resolve([class_node("Foo-Bar"), class_node("FooBar")])
        assert exc_info.value.name == "FooBar"
        assert exc_info.value.existing == "Foo-Bar"

    def test_reserved_name(self):
        with pytest.raises(DuplicateSymbol):
            ClassResolver().resolve([class_node("ServiceClient")])

    def test_invalid_class_name(self):
        with pytest.raises(InvalidSymbol):
            ClassResolver().resolve([class_node("123")])

    def test_invalid_property_name(self):
        with pytest.raises(InvalidSymbol):
            ClassResolver().resolve([class_node("Thing", **{"--": "string"})])


class TestDescriptors:
    def test_class_map(self):
        resolved = ClassResolver().resolve([class_node("tns:User"), class_node("Address")])
        assert dict(resolved.class_map) == {"tns:User": "tnsUser", "Address": "Address"}

    def test_class_map_is_read_only(self):
        resolved = ClassResolver().resolve([class_node("User")])
        with pytest.raises(TypeError):
            resolved.class_map["Other"] = "Other"

    def test_properties(self):
        resolved = ClassResolver().resolve([class_node("Thing", **{"MY-VALUE": "string", "count": "int[]"})])
        thing = resolved.classes[0]
        assert [prop.name for prop in thing.properties] == ["MYVALUE", "count"]
        assert thing.aliases == {"MY-VALUE": "MYVALUE"}
        assert thing.properties[1].type.array_depth == 1

    def test_symbol_table_is_shared(self):
        symbols = SymbolTable()
        ClassResolver(symbols).resolve([class_node("User")])
        assert "User" in symbols
        with pytest.raises(DuplicateSymbol):
            symbols.define("User", "service")
