"""
Tests for the output layouts, importing the generated code.
"""

from __future__ import annotations

import uuid

import pytest

from wsdl_to_code.pipeline import CodeGeneratorConfig, OutputConfig, OutputMode, PipelineGenerator
from wsdl_to_code.pipeline.errors import EmptyOutput, OutputExistsError
from wsdl_to_code.pipeline.writers import GeneratedSources, SingleFileLayout
from wsdl_to_code.runtime import InvalidArgumentShape


def package_name() -> str:
    return f"generated_{uuid.uuid4().hex}"


def relative_files(root, written):
    return sorted(path.relative_to(root).as_posix() for path in written)


def user_transport(client, operation, args):
    """Answers every call with a Derived instance built through the classmap."""
    return client.resolve_class("Derived")(id=len(args), name=operation)


class TestPackageLayout:
    def test_files(self, users_tree, tmp_path):
        name = package_name()
        written = PipelineGenerator(users_tree).save(tmp_path / name)
        assert relative_files(tmp_path / name, written) == [
            "UserService.py",
            "__init__.py",
            "types/Address.py",
            "types/Base.py",
            "types/Derived.py",
            "types/__init__.py",
        ]

    def test_class_module(self, users_tree, tmp_path):
        name = package_name()
        PipelineGenerator(users_tree).save(tmp_path / name)
        content = (tmp_path / name / "types" / "Derived.py").read_text()
        assert content.startswith(
            "from __future__ import annotations\n\n"
            "from dataclasses import dataclass\n\n"
            "from .Base import Base\n\n\n"
            "@dataclass(kw_only=True)\n"
            "class Derived(Base):\n"
        )

    def test_import_and_call(self, users_tree, tmp_path, import_generated):
        name = package_name()
        PipelineGenerator(users_tree).save(tmp_path / name)
        package = import_generated(name)
        types_package = import_generated(f"{name}.types")

        assert types_package.__all__ == ["Base", "Address", "Derived"]
        assert package.__all__ == ["UserService"]

        service = package.UserService(transport=user_transport)
        assert service.wsdl == "http://api.example.com/UserService?wsdl"
        user = service.getUser(3, "bob")
        assert isinstance(user, types_package.Derived)
        assert isinstance(user, types_package.Base)
        assert user.id == 2
        assert user.name == "getUser"

        with pytest.raises(InvalidArgumentShape):
            service.getUser(3)

    def test_namespace_uses_absolute_imports(self, users_tree, tmp_path, import_generated):
        name = package_name()
        PipelineGenerator(users_tree, CodeGeneratorConfig(namespace=name)).save(tmp_path / name)

        service_module = (tmp_path / name / "UserService.py").read_text()
        assert f"from {name}.types.Derived import Derived\n" in service_module
        derived_module = (tmp_path / name / "types" / "Derived.py").read_text()
        assert f"from {name}.types.Base import Base\n" in derived_module

        package = import_generated(name)
        assert package.UserService(transport=user_transport).listUsers().name == "listUsers"


class TestFlatLayout:
    def test_files_and_import(self, users_tree, tmp_path, import_generated):
        name = package_name()
        config = CodeGeneratorConfig(layout="flat", expand_method_arguments=True)
        written = PipelineGenerator(users_tree, config).save(tmp_path / name)
        assert relative_files(tmp_path / name, written) == [
            "Address.py",
            "Base.py",
            "Derived.py",
            "UserService.py",
            "__init__.py",
        ]

        package = import_generated(name)
        assert package.__all__ == ["Base", "Address", "Derived", "UserService"]
        service = package.UserService(transport=user_transport)
        assert service.saveUser(package.Derived(), package.Address()).name == "saveUser"


class TestSingleFileLayout:
    def test_module_named_after_host(self, users_tree, tmp_path, import_generated):
        written = PipelineGenerator(users_tree, CodeGeneratorConfig(layout="single_file")).save(tmp_path)
        assert relative_files(tmp_path, written) == ["apiexamplecom.py"]

        content = written[0].read_text()
        assert content.index("class Base:") < content.index("class Address:") < content.index("class Derived(Base):")
        assert content.index("class Derived(Base):") < content.index("class UserService(ServiceClient):")

        module = import_generated("apiexamplecom")
        user = module.UserService(transport=user_transport).getUser("x")
        assert isinstance(user, module.Derived)

    def test_module_name_fallbacks(self):
        assert SingleFileLayout.module_name(GeneratedSources(name="my-api", location="")) == "myapi"
        assert SingleFileLayout.module_name(GeneratedSources(name="", location="urn:no-host")) == "services"

    def test_nothing_to_write(self, tmp_path):
        with pytest.raises(EmptyOutput):
            SingleFileLayout(CodeGeneratorConfig()).save(GeneratedSources(), tmp_path)


class TestOutputHandling:
    def test_existing_files_are_protected(self, users_tree, tmp_path):
        PipelineGenerator(users_tree).save(tmp_path / "out")
        with pytest.raises(OutputExistsError):
            PipelineGenerator(users_tree).save(tmp_path / "out")

    def test_force_overwrites(self, users_tree, tmp_path):
        PipelineGenerator(users_tree).save(tmp_path / "out")
        config = CodeGeneratorConfig(output=OutputConfig(mode=OutputMode.FORCE))
        written = PipelineGenerator(users_tree, config).save(tmp_path / "out")
        assert len(written) == 6

    def test_generation_comment(self, users_tree, tmp_path):
        written = PipelineGenerator(users_tree).save(tmp_path / "out", "Generated by tests")
        for path in written:
            assert path.read_text().startswith("# Generated by tests\nfrom __future__ import annotations\n")

        config = CodeGeneratorConfig(add_generation_comment=False)
        written = PipelineGenerator(users_tree, config).save(tmp_path / "other", "Generated by tests")
        assert not any("Generated by tests" in path.read_text() for path in written)
