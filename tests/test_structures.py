"""
Tests for structure models and the fill engine.
"""

import pytest

from tsedit import ArgumentError, InvalidOperationError, Scope
from tsedit.structures import (
    ClassDeclarationStructure,
    PropertyDeclarationStructure,
    coerce_structure,
)


class TestStructureModels:
    """Test presence tracking and aliases."""

    def test_presence_tracking(self):
        structure = ClassDeclarationStructure(is_exported=True)
        assert structure.model_fields_set == {"is_exported"}

    def test_camel_case_aliases(self):
        structure = ClassDeclarationStructure.model_validate({"isDefaultExport": True, "name": "A"})
        assert structure.is_default_export is True
        assert structure.model_fields_set == {"is_default_export", "name"}

    def test_explicit_none_is_present(self):
        structure = PropertyDeclarationStructure.model_validate({"scope": None})
        assert "scope" in structure.model_fields_set
        assert structure.scope is None


class TestCoerceStructure:
    """Test coerce_structure."""

    def test_unknown_field(self, make_file):
        sf = make_file("class A {}")
        with pytest.raises(ArgumentError):
            coerce_structure(sf.get_class_or_throw("A"), {"isAsync": True})

    def test_wrong_type(self, make_file):
        sf = make_file("class A {}")
        with pytest.raises(ArgumentError):
            sf.get_class_or_throw("A").fill({"is_exported": "definitely"})

    def test_other_model_is_converted(self, make_file):
        """Only the set fields of another structure model are carried over."""
        sf = make_file("class A {}")
        source = PropertyDeclarationStructure(name="B")
        coerced = coerce_structure(sf.get_class_or_throw("A"), source)

        assert isinstance(coerced, ClassDeclarationStructure)
        assert coerced.model_fields_set == {"name"}

    def test_node_without_structure(self, make_file):
        sf = make_file("foo();")
        call = sf.get_first_descendant_by_kind_or_throw("call_expression")
        with pytest.raises(InvalidOperationError):
            call.fill({})


class TestFill:
    """Test fill() across the trait stack."""

    def test_fill_property(self, make_file):
        sf = make_file("class A {\n    x;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.fill({
            "scope": "private",
            "isStatic": True,
            "isReadonly": True,
            "type": "number",
            "initializer": "1",
        })

        assert sf.get_full_text() == "class A {\n    private static readonly x: number = 1;\n}\n"

    def test_fill_is_idempotent(self, make_file):
        sf = make_file("function f(a) {}\n")
        f = sf.get_function_or_throw("f")
        structure = {"isExported": True, "isAsync": True, "returnType": "void", "name": "g"}

        f.fill(structure)
        text = sf.get_full_text()
        edits = len(sf.get_ledger())
        f.fill(structure)

        assert text == "export async function g(a): void {}\n"
        assert sf.get_full_text() == text
        assert len(sf.get_ledger()) == edits

    def test_fill_clears(self, make_file):
        sf = make_file("class A {\n    private x: number = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.fill({"scope": None, "type": None, "initializer": None})

        assert sf.get_full_text() == "class A {\n    x;\n}\n"

    def test_fill_parameter(self, make_file):
        sf = make_file("class A {\n    constructor(x) {}\n}\n")
        parameter = sf.get_first_descendant_by_kind_or_throw("method_definition").get_parameters()[0]

        parameter.fill({"scope": "public", "isReadonly": True, "type": "string"})

        assert sf.get_full_text() == "class A {\n    constructor(public readonly x: string) {}\n}\n"

    def test_fill_variable_statement(self, make_file):
        sf = make_file("const a = 1;")
        sf.get_variable_statements()[0].fill({"hasDeclareKeyword": True, "isExported": True})
        assert sf.get_full_text() == "export declare const a = 1;"


class TestGetStructure:
    """Test get_structure()."""

    def test_class_structure(self, make_file):
        sf = make_file("export declare abstract class Shape {}")
        structure = sf.get_class_or_throw("Shape").get_structure()

        assert structure.name == "Shape"
        assert structure.is_exported is True
        assert structure.is_default_export is False
        assert structure.is_abstract is True
        assert structure.has_declare_keyword is True

    def test_property_structure(self, make_file):
        sf = make_file("class A {\n    protected static count: number = 0;\n}\n")
        structure = sf.get_class_or_throw("A").get_property_or_throw("count").get_structure()

        assert structure.scope == Scope.PROTECTED
        assert structure.is_static is True
        assert structure.is_readonly is False
        assert structure.type == "number"
        assert structure.initializer == "0"

    def test_structure_fills_back_without_edits(self, make_file):
        """Filling a node with its own structure changes nothing."""
        sf = make_file("export async function load(url: string): Promise<void> {}\n")
        load = sf.get_function_or_throw("load")

        load.fill(load.get_structure())

        assert len(sf.get_ledger()) == 0
