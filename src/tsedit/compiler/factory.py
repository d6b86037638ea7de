"""
Map tree-sitter node types to wrapper classes.
"""

from typing import Dict, Type

from tree_sitter import Node as TsNode

from tsedit.provider.kinds import DEFAULT_EXPORTABLE_EXPRESSION_KINDS
from tsedit.provider.syntax import declaration_of, has_child_of_kind, is_modifier_token, same_node
from .class_ import ClassDeclaration, MethodDeclaration, PropertyDeclaration
from .enum import EnumDeclaration
from .exports import ExportAssignment, ExportDeclaration, ExportSpecifier
from .expressions import CallExpression, Expression, Identifier, PropertyAccessExpression, TypeNode
from .function import FunctionDeclaration, ParameterDeclaration
from .imports import ImportDeclaration
from .interface import InterfaceDeclaration, PropertySignature
from .modifier import Modifier
from .node import Node
from .type_alias import TypeAliasDeclaration
from .variable import VariableDeclaration, VariableStatement

WRAPPER_CLASSES: Dict[str, Type[Node]] = {
    "class_declaration": ClassDeclaration,
    "abstract_class_declaration": ClassDeclaration,
    "function_declaration": FunctionDeclaration,
    "generator_function_declaration": FunctionDeclaration,
    "function_signature": FunctionDeclaration,
    "required_parameter": ParameterDeclaration,
    "optional_parameter": ParameterDeclaration,
    "public_field_definition": PropertyDeclaration,
    "property_signature": PropertySignature,
    "method_definition": MethodDeclaration,
    "method_signature": MethodDeclaration,
    "abstract_method_signature": MethodDeclaration,
    "interface_declaration": InterfaceDeclaration,
    "enum_declaration": EnumDeclaration,
    "type_alias_declaration": TypeAliasDeclaration,
    "lexical_declaration": VariableStatement,
    "variable_declaration": VariableStatement,
    "variable_declarator": VariableDeclaration,
    "export_specifier": ExportSpecifier,
    "import_statement": ImportDeclaration,
    "call_expression": CallExpression,
    "member_expression": PropertyAccessExpression,
    "identifier": Identifier,
    "type_identifier": Identifier,
    "property_identifier": Identifier,
    "shorthand_property_identifier": Identifier,
}

EXPRESSION_KINDS = frozenset({
    "string", "number", "true", "false", "null", "undefined", "this", "super",
    "object", "array", "regex", "template_string",
    "arrow_function", "function_expression", "function", "generator_function", "class",
    "binary_expression", "unary_expression", "update_expression", "ternary_expression",
    "assignment_expression", "augmented_assignment_expression",
    "new_expression", "await_expression", "yield_expression",
    "parenthesized_expression", "subscript_expression",
    "as_expression", "satisfies_expression", "non_null_expression",
})

TYPE_NODE_KINDS = frozenset({
    "predefined_type", "nested_type_identifier", "generic_type", "union_type",
    "intersection_type", "array_type", "tuple_type", "object_type", "function_type",
    "constructor_type", "literal_type", "parenthesized_type", "lookup_type",
    "conditional_type", "type_query", "index_type_query", "readonly_type",
    "template_literal_type", "infer_type", "existential_type",
})


def _is_default_exported_expression(ts_node: TsNode) -> bool:
    parent = ts_node.parent
    return (
        parent is not None
        and parent.type == "export_statement"
        and same_node(declaration_of(parent), ts_node)
    )


def get_wrapper_class(ts_node: TsNode) -> Type[Node]:
    """Pick the wrapper class for a (non-root, non-hidden) syntax node."""
    kind = ts_node.type

    if kind in DEFAULT_EXPORTABLE_EXPRESSION_KINDS and _is_default_exported_expression(ts_node):
        return ClassDeclaration if kind == "class" else FunctionDeclaration

    if kind == "export_statement":
        if has_child_of_kind(ts_node, "default") or has_child_of_kind(ts_node, "="):
            return ExportAssignment
        return ExportDeclaration

    if is_modifier_token(ts_node):
        return Modifier

    wrapper_class = WRAPPER_CLASSES.get(kind)
    if wrapper_class is not None:
        return wrapper_class
    if kind in EXPRESSION_KINDS:
        return Expression
    if kind in TYPE_NODE_KINDS:
        return TypeNode
    return Node
