"""
Tests for symbols, alias resolution and the default export symbol.
"""

import pytest

from tsedit import NotFoundError, Project


class TestSymbols:
    """Test symbol identity within one file."""

    def test_same_declaration_same_symbol(self, make_file):
        sf = make_file("class Foo {}\nconst x = new Foo();\n")
        foo = sf.get_class_or_throw("Foo")
        reference = sf.get_descendants_of_kind("identifier")[-1]

        assert reference.get_text() == "Foo"
        assert reference.get_symbol() == foo.get_symbol()
        assert reference.get_declaration() is foo

    def test_different_declarations(self, make_file):
        sf = make_file("class A {}\nclass B {}\n")
        assert sf.get_class_or_throw("A").get_symbol() != sf.get_class_or_throw("B").get_symbol()

    def test_declaration_merging(self, make_file):
        """Overloads share one symbol."""
        sf = make_file("function f(a: string): void;\nfunction f(a: any) {}\n")
        first, second = sf.get_functions()

        assert first.is_overload()
        assert not second.is_overload()
        assert first.get_symbol() == second.get_symbol()
        assert len(first.get_symbol().get_declarations()) == 2

    def test_name_node_symbol(self, make_file):
        sf = make_file("interface Shape {}")
        shape = sf.get_interface_or_throw("Shape")
        assert shape.get_name_node().get_symbol() == shape.get_symbol()

    def test_source_file_has_no_symbol(self, make_file):
        sf = make_file("class A {}")
        assert sf.get_symbol() is None
        with pytest.raises(NotFoundError):
            sf.get_symbol_or_throw()


class TestDefaultExportSymbol:
    """Test get_default_export_symbol."""

    def test_declaration(self, make_file):
        sf = make_file("export default class Foo {}")
        symbol = sf.get_default_export_symbol_or_throw()

        assert symbol.get_name() == "Foo"
        assert not symbol.is_alias()
        assert symbol == sf.get_class_or_throw("Foo").get_symbol()

    def test_export_assignment_is_alias(self, make_file):
        sf = make_file("function run() {}\nexport default run;\n")
        symbol = sf.get_default_export_symbol_or_throw()

        assert symbol.is_alias()
        assert symbol.get_aliased_symbol() == sf.get_function_or_throw("run").get_symbol()

    def test_expression_default_export(self, make_file):
        """`export default 42;` has a symbol that aliases nothing."""
        sf = make_file("export default 42;")
        symbol = sf.get_default_export_symbol_or_throw()

        assert not symbol.is_alias()
        assert symbol.get_aliased_symbol() is None

    def test_none(self, make_file):
        sf = make_file("export class A {}")
        assert sf.get_default_export_symbol() is None
        with pytest.raises(NotFoundError):
            sf.get_default_export_symbol_or_throw()

    def test_exported_symbols(self, make_file):
        sf = make_file("export class A {}\nexport const b = 1, c = 2;\nexport default A;\n")
        names = sorted(symbol.get_name() for symbol in sf.get_exported_symbols())
        assert names == ["A", "b", "c", "default"]

    def test_specifier_symbol(self, make_file):
        """An export specifier declares the alias symbol it exports."""
        sf = make_file("class A {}\nexport { A as B };\n")
        specifier = sf.get_export_declarations()[0].get_named_exports()[0]
        symbol = specifier.get_symbol()

        assert symbol.get_name() == "B"
        assert symbol.is_alias()
        assert symbol.get_aliased_symbol() == sf.get_class_or_throw("A").get_symbol()


class TestAliasResolution:
    """Test transitive and single-level alias resolution across files."""

    FILES = {
        "/src/impl.ts": "export default class Impl {}\n",
        "/src/reexport.ts": "import Impl from './impl';\nexport default Impl;\n",
        "/src/main.ts": "import Thing from './reexport';\nexport { Thing as default };\n",
    }

    def _make_project(self, **config):
        project = Project(resolution_config=config or None)
        for path, text in self.FILES.items():
            project.create_source_file(path, text)
        return project

    def test_transitive_by_default(self):
        project = self._make_project()
        impl = project.get_source_file_or_throw("/src/impl.ts").get_class_or_throw("Impl")
        main = project.get_source_file_or_throw("/src/main.ts")

        resolved = main.get_default_export_symbol_or_throw().get_aliased_symbol()

        assert resolved == impl.get_symbol()

    def test_single_level(self):
        project = self._make_project(alias_resolution="single")
        main = project.get_source_file_or_throw("/src/main.ts")

        resolved = main.get_default_export_symbol_or_throw().get_aliased_symbol()

        assert resolved.get_name() == "Thing"
        assert resolved.is_alias()

    def test_max_depth(self):
        project = self._make_project(max_alias_depth=1)
        main = project.get_source_file_or_throw("/src/main.ts")

        resolved = main.get_default_export_symbol_or_throw().get_aliased_symbol()

        assert resolved.get_name() == "Thing"

    def test_imported_default_is_default_export(self):
        """A file re-exporting an import makes the import binding its default export."""
        project = self._make_project()
        reexport = project.get_source_file_or_throw("/src/reexport.ts")
        binding = reexport.get_import_declarations()[0].get_default_import()

        assert binding.get_text() == "Impl"
        assert reexport.get_default_export_symbol_or_throw().get_aliased_symbol().get_name() == "Impl"

    def test_unresolved_module(self, project):
        sf = project.create_source_file("/a.ts", "import X from './missing';\nexport default X;\n")
        resolved = sf.get_default_export_symbol_or_throw().get_aliased_symbol()

        # stops at the import binding
        assert resolved.get_name() == "X"
        assert resolved.is_alias()

    def test_alias_cycle(self, project):
        project.create_source_file("/a.ts", "import b from './b';\nexport default b;\n")
        b = project.create_source_file("/b.ts", "import a from './a';\nexport default a;\n")

        resolved = b.get_default_export_symbol_or_throw().get_aliased_symbol()

        assert resolved is not None
        assert resolved.is_alias()

    def test_import_equals(self, make_file):
        sf = make_file("namespace Inner { export const x = 1; }\nimport Alias = Inner;\nexport default Alias;\n")
        resolved = sf.get_default_export_symbol_or_throw().get_aliased_symbol()
        assert resolved.get_name() == "Inner"
