"""
Class declarations and their members.
"""

from typing import List, Optional

from tsedit.exceptions import NotFoundError
from tsedit.structures.models import (
    ClassDeclarationStructure,
    MethodDeclarationStructure,
    PropertyDeclarationStructure,
)
from .base import (
    AbstractableNode,
    AmbientableNode,
    AsyncableNode,
    DeclarationNamedNode,
    ExportableNode,
    InitializerExpressionableNode,
    PropertyNamedNode,
    ReadonlyableNode,
    ReturnTypedNode,
    ScopedNode,
    StatementNode,
    StaticableNode,
    TypedNode,
)
from .function import ParameterDeclaration, get_parameters
from .node import Node


class ClassDeclaration(
    StatementNode,
    AmbientableNode,
    AbstractableNode,
    ExportableNode,
    DeclarationNamedNode,
):
    """
    `class Foo {}`, `abstract class Foo {}`, or the anonymous class of
    `export default class {}`.
    """

    _structure_class = ClassDeclarationStructure

    def get_members(self) -> List[Node]:
        body = self.compiler_node.child_by_field_name("body")
        if body is None:
            return []
        return self._wrap_all(c for c in body.named_children if c.type != "comment")

    def get_properties(self) -> List["PropertyDeclaration"]:
        return [m for m in self.get_members() if isinstance(m, PropertyDeclaration)]

    def get_property(self, name: str) -> Optional["PropertyDeclaration"]:
        for prop in self.get_properties():
            if prop.get_name() == name:
                return prop
        return None

    def get_property_or_throw(self, name: str) -> "PropertyDeclaration":
        prop = self.get_property(name)
        if prop is None:
            raise NotFoundError(f"Expected to find a property named '{name}'.")
        return prop

    def get_methods(self) -> List["MethodDeclaration"]:
        """Methods, excluding the constructor."""
        return [
            m for m in self.get_members()
            if isinstance(m, MethodDeclaration) and m.get_name() != "constructor"
        ]

    def get_method(self, name: str) -> Optional["MethodDeclaration"]:
        for method in self.get_methods():
            if method.get_name() == name:
                return method
        return None

    def get_method_or_throw(self, name: str) -> "MethodDeclaration":
        method = self.get_method(name)
        if method is None:
            raise NotFoundError(f"Expected to find a method named '{name}'.")
        return method

    def get_extends(self) -> Optional[Node]:
        """The expression after `extends`, if any."""
        for child in self.compiler_node.named_children:
            if child.type != "class_heritage":
                continue
            for clause in child.named_children:
                if clause.type == "extends_clause":
                    value = clause.child_by_field_name("value")
                    if value is None and clause.named_children:
                        value = clause.named_children[0]
                    return self._wrap(value)
        return None


class PropertyDeclaration(
    StatementNode,
    AbstractableNode,
    ReadonlyableNode,
    StaticableNode,
    ScopedNode,
    InitializerExpressionableNode,
    TypedNode,
    PropertyNamedNode,
):
    """A class property: `private static readonly x: number = 1;`."""

    _structure_class = PropertyDeclarationStructure

    def has_question_token(self) -> bool:
        return any(child.type == "?" for child in self.compiler_node.children)

    def has_exclamation_token(self) -> bool:
        return any(child.type == "!" for child in self.compiler_node.children)


class MethodDeclaration(
    StatementNode,
    AsyncableNode,
    AbstractableNode,
    StaticableNode,
    ScopedNode,
    ReturnTypedNode,
    PropertyNamedNode,
):
    """A class method, including abstract method signatures and overloads."""

    _structure_class = MethodDeclarationStructure

    def get_parameters(self) -> List[ParameterDeclaration]:
        return get_parameters(self)

    def has_body(self) -> bool:
        return self.compiler_node.child_by_field_name("body") is not None
