import importlib
import sys
import types
import uuid
from pathlib import Path

import pytest

from wsdl_to_code.pipeline import load_tree

TEST_DATA_DIR = Path(__file__).with_name("test_data")


def unique_module_name() -> str:
    return f"generated_{uuid.uuid4().hex}"


@pytest.fixture
def users_tree():
    return load_tree(TEST_DATA_DIR / "users.tree.json")


@pytest.fixture
def load_source():
    """Execute generated source as a registered module."""
    loaded = []

    def load(source: str):
        name = unique_module_name()
        module = types.ModuleType(name)
        sys.modules[name] = module
        loaded.append(name)
        exec(compile(source, f"<{name}>", "exec"), module.__dict__)
        return module

    yield load

    for name in loaded:
        sys.modules.pop(name, None)


@pytest.fixture
def import_generated(tmp_path, monkeypatch):
    """Import a generated package or module written under tmp_path."""
    monkeypatch.syspath_prepend(str(tmp_path))
    imported = []

    def load(name: str):
        imported.append(name)
        return importlib.import_module(name)

    yield load

    for name in imported:
        for module_name in list(sys.modules):
            if module_name == name or module_name.startswith(name + "."):
                del sys.modules[module_name]
