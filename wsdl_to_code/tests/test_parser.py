"""
Tests for loading the flattened service tree.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from wsdl_to_code.pipeline.errors import TreeParseError
from wsdl_to_code.pipeline.node_tree import TreeParser, load_tree

TEST_DATA_DIR = Path(__file__).with_name("test_data")


def summarize(tree):
    return {
        "name": tree.name,
        "location": tree.location,
        "classes": [(c.name, c.extends, [(p.name, p.type) for p in c.properties]) for c in tree.classes],
        "services": [
            (
                s.name,
                [(f.name, [(p.name, p.type) for p in f.parameters], [(r.name, r.type) for r in f.returns]) for f in s.functions],
            )
            for s in tree.services
        ],
    }


class TestJsonTree:
    def test_load(self):
        tree = load_tree(TEST_DATA_DIR / "users.tree.json")
        assert tree.name == "users"
        assert tree.location == "http://api.example.com/UserService?wsdl"
        assert [c.name for c in tree.classes] == ["Derived", "Base", "Address"]
        assert tree.classes[0].extends == "Base"
        assert tree.classes[1].extends is None
        assert [f.name for f in tree.services[0].functions] == ["getUser", "getUser", "listUsers", "saveUser"]

    def test_name_fallback(self):
        tree = TreeParser().parse({"services": []}, name="fallback")
        assert tree.name == "fallback"
        assert tree.location == ""

    def test_missing_name(self):
        with pytest.raises(TreeParseError, match=r"classes\[0\]: missing required attribute 'name'"):
            TreeParser().parse({"classes": [{"properties": []}]})

    def test_missing_entry_type(self):
        with pytest.raises(TreeParseError, match="type"):
            TreeParser().parse({"services": [{"name": "S", "functions": [{"name": "f", "parameters": [{"name": "x"}]}]}]})

    def test_not_an_object(self):
        with pytest.raises(TreeParseError):
            TreeParser().parse([])

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(TreeParseError):
            load_tree(path)


class TestXmlTree:
    def test_same_tree_as_json(self):
        json_tree = load_tree(TEST_DATA_DIR / "users.tree.json")
        xml_tree = load_tree(TEST_DATA_DIR / "users.tree.xml")
        assert summarize(xml_tree) == summarize(json_tree)

    def test_without_namespace(self):
        tree = TreeParser().parse_xml(
            '<tree><class name="A"><entry name="x" type="int"/></class>'
            '<service name="S"><function name="f"><parameters><entry name="a" type="A"/></parameters></function></service></tree>',
            name="plain",
        )
        assert tree.name == "plain"
        assert tree.classes[0].properties[0].type == "int"
        assert tree.services[0].functions[0].parameters[0].type == "A"
        assert tree.services[0].functions[0].returns == []

    def test_malformed(self):
        with pytest.raises(TreeParseError):
            TreeParser().parse_xml("<tree>")

    def test_missing_attribute(self):
        with pytest.raises(TreeParseError):
            TreeParser().parse_xml('<tree><class><entry name="x" type="int"/></class></tree>')
