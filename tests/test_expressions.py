"""
Tests for expression wrappers and the statements that hold expressions.
"""

from tsedit import (
    CallExpression,
    ExportAssignment,
    ExportDeclaration,
    Expression,
    Identifier,
    ImportDeclaration,
    PropertyAccessExpression,
)


class TestExpressioned:
    """Test get_expression on calls, property access and export assignments."""

    def test_import_call(self, make_file):
        """The callee of `import(x)` is the `import` keyword."""
        sf = make_file("const m = import(x);")
        call = sf.get_first_descendant_by_kind_or_throw("call_expression")

        assert isinstance(call, CallExpression)
        assert call.get_expression().get_text() == "import"
        assert [arg.get_text() for arg in call.get_arguments()] == ["x"]

    def test_super_property_access(self, make_file):
        """The object of `super.x` is the `super` keyword."""
        sf = make_file("class A extends B {\n    m() { return super.x; }\n}\n")
        access = sf.get_first_descendant_by_kind_or_throw("member_expression")

        assert isinstance(access, PropertyAccessExpression)
        assert access.get_expression().get_text() == "super"
        assert isinstance(access.get_expression(), Expression)
        assert access.get_name() == "x"

    def test_call_callee(self, make_file):
        sf = make_file("console.log(1, 2);")
        call = sf.get_first_descendant_by_kind_or_throw("call_expression")
        callee = call.get_expression_or_throw()

        assert isinstance(callee, PropertyAccessExpression)
        assert callee.get_expression().get_text() == "console"
        assert len(call.get_arguments()) == 2

    def test_export_assignment(self, make_file):
        sf = make_file("const a = 1;\nexport default a;\n")
        assignment = sf.get_export_assignments()[0]

        assert isinstance(assignment, ExportAssignment)
        assert not assignment.is_export_equals()
        assert assignment.get_expression().get_text() == "a"
        assert isinstance(assignment.get_expression(), Identifier)

    def test_export_equals(self, make_file):
        sf = make_file("const a = 1;\nexport = a;\n")
        assignment = sf.get_export_assignments()[0]

        assert assignment.is_export_equals()
        assert assignment.get_expression().get_text() == "a"

    def test_class_extends(self, make_file):
        sf = make_file("class A extends Base {}")
        assert sf.get_class_or_throw("A").get_extends().get_text() == "Base"


class TestExportDeclarations:
    """Test export declarations and specifiers."""

    def test_named_exports(self, make_file):
        sf = make_file("export { a, b as c } from './m';")
        declaration = sf.get_export_declarations()[0]
        specifiers = declaration.get_named_exports()

        assert isinstance(declaration, ExportDeclaration)
        assert declaration.get_module_specifier_value() == "./m"
        assert [s.get_export_name() for s in specifiers] == ["a", "c"]
        assert specifiers[1].get_name() == "b"
        assert specifiers[1].get_alias() == "c"
        assert specifiers[0].get_export_declaration() is declaration

    def test_namespace_export(self, make_file):
        sf = make_file("export * from './m';")
        declaration = sf.get_export_declarations()[0]

        assert declaration.is_namespace_export()
        assert not declaration.has_named_exports()

    def test_remove_specifier(self, make_file):
        sf = make_file("const a = 1, b = 2;\nexport { a, b };\n")
        declaration = sf.get_export_declarations()[0]

        declaration.get_named_exports()[0].remove()
        assert sf.get_full_text() == "const a = 1, b = 2;\nexport { b };\n"

        declaration.get_named_exports()[0].remove()
        assert sf.get_full_text() == "const a = 1, b = 2;\n"
        assert not declaration.is_valid()


class TestImportDeclarations:
    """Test import declaration queries."""

    def test_import_clause(self, make_file):
        sf = make_file("import D, { a as b, c } from './m';\nimport * as ns from './n';\n")
        first, second = sf.get_import_declarations()

        assert isinstance(first, ImportDeclaration)
        assert first.get_module_specifier_value() == "./m"
        assert first.get_default_import().get_text() == "D"
        assert len(first.get_named_imports()) == 2
        assert first.get_namespace_import() is None
        assert second.get_namespace_import().get_text() == "ns"
        assert second.get_default_import() is None

    def test_type_only(self, make_file):
        sf = make_file("import type { T } from './t';")
        assert sf.get_import_declarations()[0].is_type_only()


class TestEnums:
    """Test enum declarations."""

    def test_members(self, make_file):
        sf = make_file("const enum Color { Red, Green = 2 }")
        color = sf.get_enum_or_throw("Color")

        assert color.is_const_enum()
        assert color.get_member_names() == ["Red", "Green"]

    def test_enum_export(self, make_file):
        sf = make_file("enum Color { Red }")
        sf.get_enum_or_throw("Color").set_is_exported(True)
        assert sf.get_full_text() == "export enum Color { Red }"
