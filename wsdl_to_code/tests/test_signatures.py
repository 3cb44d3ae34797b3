"""
Tests for the synthesized call signatures and the dispatch check.
"""

from __future__ import annotations

import pytest

from wsdl_to_code.pipeline.analyzer.operation_grouper import OperationGrouper
from wsdl_to_code.pipeline.analyzer.signatures import SignatureSynthesizer
from wsdl_to_code.pipeline.node_tree.nodes import EntryNode, FunctionNode
from wsdl_to_code.runtime import InvalidArgumentShape


def overload_set(*variants, name="op"):
    nodes = [
        FunctionNode(name=name, parameters=[EntryNode(name=f"p{i}", type=t) for i, t in enumerate(types)])
        for types in variants
    ]
    return OperationGrouper().group(nodes)[name]


class Address:
    pass


def test_one_entry_per_variant():
    signatures = SignatureSynthesizer().synthesize(overload_set(["string"], ["int", "string"]))
    assert signatures.entries == ("(string)", "(integer)(string)")


def test_tokens():
    signatures = SignatureSynthesizer().synthesize(overload_set(["double", "token", "long", "tns:Address", "Item[][]"]))
    assert signatures.entries == ("(float)(string)(integer)(tnsAddress)(array)",)


def test_no_parameters():
    assert SignatureSynthesizer().synthesize(overload_set([])).entries == ("",)


def test_dispatch_check():
    signatures = SignatureSynthesizer().synthesize(overload_set(["string"], ["int", "string"]))

    assert signatures.check(["a"])
    assert signatures.check([1, "a"])

    with pytest.raises(InvalidArgumentShape) as exc_info:
        signatures.check([1, 2])
    assert str(exc_info.value) == "Invalid parameter types: (integer, integer)"
    assert exc_info.value.signature == "(integer)(integer)"


def test_no_coercion_or_partial_match():
    signatures = SignatureSynthesizer().synthesize(overload_set(["int", "string"]))

    with pytest.raises(InvalidArgumentShape):
        signatures.check([1.0, "a"])
    with pytest.raises(InvalidArgumentShape):
        signatures.check([1])
    with pytest.raises(InvalidArgumentShape):
        signatures.check([1, "a", "extra"])


def test_class_arguments_match_by_class_name():
    signatures = SignatureSynthesizer().synthesize(overload_set(["Address", "string[]"]))
    assert signatures.check([Address(), ["x"]])
    assert signatures.matches("(Address)(array)")
    assert not signatures.matches("(Address)")


def test_duplicate_variants_first_match_wins():
    signatures = SignatureSynthesizer().synthesize(overload_set(["string"], ["string"]))
    assert signatures.entries == ("(string)", "(string)")
    assert signatures.check(["x"])
