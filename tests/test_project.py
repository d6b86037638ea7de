"""
Tests for the in-memory Project and source file lifecycle.
"""

import pytest

from tsedit import InvalidNodeError, InvalidOperationError, NotFoundError, Project
from tsedit.exceptions import ConfigError
from tsedit.project import normalize_path


class TestNormalizePath:

    def test_normalize(self):
        assert normalize_path("src/./a.ts") == "/src/a.ts"
        assert normalize_path("/src/lib/../a.ts") == "/src/a.ts"
        assert normalize_path("src\\a.ts") == "/src/a.ts"


class TestProject:
    """Test creating, finding and removing source files."""

    def test_create_and_get(self, project):
        sf = project.create_source_file("src/a.ts", "export class A {}")

        assert project.get_source_file("/src/a.ts") is sf
        assert project.get_source_file_or_throw("src/a.ts") is sf
        assert sf.get_project() is project
        assert len(project) == 1

    def test_missing_file(self, project):
        assert project.get_source_file("/nope.ts") is None
        with pytest.raises(NotFoundError):
            project.get_source_file_or_throw("/nope.ts")

    def test_duplicate_path(self, project):
        project.create_source_file("/a.ts", "class A {}")
        with pytest.raises(InvalidOperationError):
            project.create_source_file("/a.ts", "class B {}")

    def test_overwrite_keeps_file_object(self, project):
        sf = project.create_source_file("/a.ts", "class A {}")
        a = sf.get_class_or_throw("A")

        again = project.create_source_file("/a.ts", "class B {}", overwrite=True)

        assert again is sf
        assert sf.get_full_text() == "class B {}"
        assert not a.is_valid()

    def test_unsupported_extension(self, project):
        with pytest.raises(ConfigError):
            project.create_source_file("/a.py", "x = 1")

    def test_tsx_file(self, project):
        sf = project.create_source_file("/view.tsx", "export const View = () => <div />;\n")
        assert sf.get_language() == "tsx"
        assert sf.get_diagnostics() == []

    def test_declaration_file(self, project):
        sf = project.create_source_file("/types.d.ts", "class A {}")
        assert sf.is_declaration_file()
        assert sf.get_class_or_throw("A").is_ambient()

    def test_remove_source_file(self, project):
        sf = project.create_source_file("/a.ts", "class A {}")
        a = sf.get_class_or_throw("A")

        assert project.remove_source_file(sf)

        assert project.get_source_file("/a.ts") is None
        assert not a.is_valid()
        with pytest.raises(InvalidNodeError):
            sf.get_full_text()
        with pytest.raises(InvalidNodeError):
            a.get_name()
        assert not project.remove_source_file("/a.ts")

    def test_invalid_resolution_config(self):
        with pytest.raises(ConfigError):
            Project(resolution_config={"alias_resolution": "sometimes"})

    def test_invalid_manipulation_config(self):
        with pytest.raises(ConfigError):
            Project(manipulation_config={"ledger_max_entries": -1})
        with pytest.raises(ConfigError):
            Project(manipulation_config={"undo": True})

    def test_manipulation_config_reaches_edits(self, warnings_logged):
        quiet = Project(manipulation_config={"warn_on_syntax_regression": False, "ledger_max_entries": 1})
        sf = quiet.create_source_file("/quiet.ts", "let a = 1;\n")

        sf.insert_text(sf.get_end(), "let = ;\n")
        sf.insert_text(0, "// head\n")

        assert not [m for m in warnings_logged if "syntax errors" in m]
        assert len(sf.get_edit_history()) == 1

        loud = Project()
        other = loud.create_source_file("/loud.ts", "let a = 1;\n")
        other.insert_text(other.get_end(), "let = ;\n")

        assert [m for m in warnings_logged if "syntax errors" in m]


class TestModuleResolution:
    """Test resolve_module_specifier."""

    @pytest.fixture
    def files(self, project):
        return {
            "main": project.create_source_file("/src/main.ts", ""),
            "util": project.create_source_file("/src/util.ts", ""),
            "index": project.create_source_file("/src/lib/index.ts", ""),
            "shared": project.create_source_file("/shared.ts", ""),
        }

    def test_suffix(self, project, files):
        assert project.resolve_module_specifier(files["main"], "./util") is files["util"]

    def test_index(self, project, files):
        assert project.resolve_module_specifier(files["main"], "./lib") is files["index"]

    def test_parent_directory(self, project, files):
        assert project.resolve_module_specifier(files["main"], "../shared") is files["shared"]

    def test_js_extension(self, project, files):
        assert project.resolve_module_specifier(files["main"], "./util.js") is files["util"]

    def test_bare_specifier(self, project, files):
        assert project.resolve_module_specifier(files["main"], "react") is None

    def test_missing(self, project, files):
        assert project.resolve_module_specifier(files["main"], "./missing") is None
