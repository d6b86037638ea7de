"""
Tests for modifier queries and the canonical insertion order of keywords.
"""

import pytest

from tsedit import ArgumentError, InvalidNodeError, Modifier, ModifierKind, NotFoundError, Scope


CLASS_WITH_PROPERTY = "class A {\n    x = 1;\n}\n"


class TestModifierQueries:
    """Test get_modifiers / get_first_modifier_by_kind / has_modifier."""

    def test_modifiers_in_source_order(self, make_file):
        """Wrapper keywords come first, then the declaration's own keywords."""
        sf = make_file("export declare abstract class A {}")
        a = sf.get_class_or_throw("A")

        texts = [m.get_text() for m in a.get_modifiers()]

        assert texts == ["export", "declare", "abstract"]
        assert all(isinstance(m, Modifier) for m in a.get_modifiers())

    def test_first_modifier_by_kind(self, make_file):
        sf = make_file("class A {\n    private static x = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        private = prop.get_first_modifier_by_kind("private")

        assert private is not None
        assert private.get_modifier_kind() == ModifierKind.PRIVATE
        assert prop.get_first_modifier_by_kind(ModifierKind.READONLY) is None
        assert prop.has_modifier("static")

    def test_or_throw(self, make_file):
        sf = make_file("class A {}")
        with pytest.raises(NotFoundError):
            sf.get_class_or_throw("A").get_first_modifier_by_kind_or_throw("export")

    def test_unknown_modifier_kind(self, make_file):
        sf = make_file("class A {}")
        with pytest.raises(ArgumentError):
            sf.get_class_or_throw("A").has_modifier("banana")

    def test_modifier_owner(self, make_file):
        """A wrapper keyword belongs to the declaration, not the export statement."""
        sf = make_file("export class A {}")
        a = sf.get_class_or_throw("A")

        assert a.get_export_keyword_or_throw().get_owner() is a

    def test_same_handle_for_same_keyword(self, make_file):
        sf = make_file("export default class A {}")
        a = sf.get_class_or_throw("A")
        assert a.get_default_keyword() is a.get_modifiers()[1]

    def test_switch_default_is_not_a_modifier(self, make_file):
        sf = make_file("switch (x) {\n    default:\n        break;\n}\n")
        default_case = sf.get_first_descendant_by_kind_or_throw("switch_default")
        assert not any(isinstance(child, Modifier) for child in default_case.get_children())


class TestAddModifier:
    """Test add_modifier placement."""

    def test_class_member_order(self, make_file):
        sf = make_file(CLASS_WITH_PROPERTY)
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.set_scope("private")
        prop.set_is_static(True)
        prop.set_is_readonly(True)

        assert sf.get_full_text() == "class A {\n    private static readonly x = 1;\n}\n"

    def test_class_member_reverse_order(self, make_file):
        """Keywords added in reverse still end up in canonical order."""
        sf = make_file(CLASS_WITH_PROPERTY)
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.set_is_readonly(True)
        prop.set_is_static(True)
        prop.set_scope(Scope.PRIVATE)

        assert sf.get_full_text() == "class A {\n    private static readonly x = 1;\n}\n"

    def test_statement_keyword_order(self, make_file):
        sf = make_file("class A {}")
        a = sf.get_class_or_throw("A")

        a.set_is_abstract(True)
        a.set_has_declare_keyword(True)
        a.set_is_exported(True)

        assert sf.get_full_text() == "export declare abstract class A {}"
        assert a.is_valid()
        assert a.get_kind() == "abstract_class_declaration"

    def test_add_existing_returns_it(self, make_file):
        sf = make_file(CLASS_WITH_PROPERTY)
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        first = prop.add_modifier("static")
        second = prop.add_modifier(ModifierKind.STATIC)

        assert first is second
        assert sf.get_full_text() == "class A {\n    static x = 1;\n}\n"

    def test_async_after_static(self, make_file):
        sf = make_file("class A {\n    static run() {}\n}\n")
        method = sf.get_class_or_throw("A").get_method_or_throw("run")

        method.set_is_async(True)

        assert sf.get_full_text() == "class A {\n    static async run() {}\n}\n"
        assert method.is_async()
        assert method.is_static()

    def test_declaration_keeps_identity(self, make_file):
        """Adding a keyword does not replace the owner's handle."""
        sf = make_file("function f() {}\n")
        f = sf.get_function_or_throw("f")

        f.add_modifier("async")

        assert sf.get_function_or_throw("f") is f
        assert f.get_text() == "async function f() {}"
        assert f.get_start() == 0

    def test_keyword_before_decorated_member(self, make_file):
        sf = make_file("class A {\n    @dec\n    x = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.set_is_readonly(True)

        assert sf.get_full_text() == "class A {\n    @dec\n    readonly x = 1;\n}\n"


class TestRemoveModifier:
    """Test remove_modifier and toggle_modifier."""

    def test_remove_middle_keyword(self, make_file):
        sf = make_file("export declare abstract class A {}")
        a = sf.get_class_or_throw("A")

        assert a.remove_modifier("declare")

        assert sf.get_full_text() == "export abstract class A {}"
        assert not a.has_declare_keyword()
        assert a.is_abstract()

    def test_remove_missing_returns_false(self, make_file):
        sf = make_file("class A {}")
        assert sf.get_class_or_throw("A").remove_modifier("static") is False
        assert len(sf.get_ledger()) == 0

    def test_toggle(self, make_file):
        sf = make_file(CLASS_WITH_PROPERTY)
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.toggle_modifier("static")
        assert prop.is_static()
        prop.toggle_modifier("static")
        assert not prop.is_static()
        assert sf.get_full_text() == CLASS_WITH_PROPERTY

    def test_removed_modifier_is_invalid(self, make_file):
        sf = make_file("class A {\n    static x = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")
        keyword = prop.get_static_keyword_or_throw()

        prop.set_is_static(False)

        with pytest.raises(InvalidNodeError):
            keyword.get_modifier_kind()
        assert sf.get_full_text() == CLASS_WITH_PROPERTY
        assert prop.get_name() == "x"


class TestScope:
    """Test scoped class members and scopeable parameters."""

    def test_default_scope_is_public(self, make_file):
        sf = make_file(CLASS_WITH_PROPERTY)
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        assert prop.get_scope() == Scope.PUBLIC
        assert not prop.has_scope_keyword()

    def test_change_scope(self, make_file):
        sf = make_file("class A {\n    private x = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.set_scope(Scope.PROTECTED)

        assert sf.get_full_text() == "class A {\n    protected x = 1;\n}\n"
        assert prop.get_scope() == Scope.PROTECTED

    def test_change_scope_keeps_other_keywords(self, make_file):
        sf = make_file("class A {\n    private static readonly x = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")
        name = prop.get_name_node()

        prop.set_scope("public")

        assert sf.get_full_text() == "class A {\n    public static readonly x = 1;\n}\n"
        assert [m.get_text() for m in prop.get_modifiers()] == ["public", "static", "readonly"]
        assert name.get_text() == "x"

    def test_clear_scope(self, make_file):
        sf = make_file("class A {\n    private static x = 1;\n}\n")
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")

        prop.set_scope(None)

        assert sf.get_full_text() == "class A {\n    static x = 1;\n}\n"
        assert prop.get_scope() == Scope.PUBLIC

    def test_invalid_scope(self, make_file):
        sf = make_file(CLASS_WITH_PROPERTY)
        prop = sf.get_class_or_throw("A").get_property_or_throw("x")
        with pytest.raises(ArgumentError):
            prop.set_scope("internal")

    def test_parameter_scope(self, make_file):
        sf = make_file("class A {\n    constructor(x: number) {}\n}\n")
        constructor = sf.get_first_descendant_by_kind_or_throw("method_definition")
        parameter = constructor.get_parameters()[0]

        assert parameter.get_scope() is None
        assert not parameter.is_parameter_property()

        parameter.set_scope("private")

        assert sf.get_full_text() == "class A {\n    constructor(private x: number) {}\n}\n"
        assert parameter.get_scope() == Scope.PRIVATE
        assert parameter.is_parameter_property()
