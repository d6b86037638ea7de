"""
Function declarations and parameters.
"""

from typing import List, Optional

from tsedit.exceptions import NotFoundError
from tsedit.structures.models import FunctionDeclarationStructure, ParameterDeclarationStructure
from .base import (
    AmbientableNode,
    AsyncableNode,
    BindingNamedNode,
    DeclarationNamedNode,
    ExportableNode,
    InitializerExpressionableNode,
    ReadonlyableNode,
    ReturnTypedNode,
    ScopeableNode,
    StatementNode,
    TypedNode,
    remove_list_item,
)
from .node import Node

PARAMETER_KINDS = ("required_parameter", "optional_parameter")


def get_parameters(node: Node) -> List["ParameterDeclaration"]:
    """Parameters of a function-like node, in order."""
    parameters = node.compiler_node.child_by_field_name("parameters")
    if parameters is None:
        return []
    return node._wrap_all(c for c in parameters.named_children if c.type in PARAMETER_KINDS)


class FunctionDeclaration(
    StatementNode,
    AmbientableNode,
    AsyncableNode,
    ReturnTypedNode,
    ExportableNode,
    DeclarationNamedNode,
):
    """
    `function f() {}`, an overload signature `function f(): void;`, or the
    anonymous function of `export default function () {}`.
    """

    _structure_class = FunctionDeclarationStructure

    def get_parameters(self) -> List["ParameterDeclaration"]:
        return get_parameters(self)

    def get_parameter(self, name: str) -> Optional["ParameterDeclaration"]:
        for parameter in self.get_parameters():
            if parameter.get_name() == name:
                return parameter
        return None

    def get_parameter_or_throw(self, name: str) -> "ParameterDeclaration":
        parameter = self.get_parameter(name)
        if parameter is None:
            raise NotFoundError(f"Expected to find a parameter named '{name}'.")
        return parameter

    def is_generator(self) -> bool:
        return any(child.type == "*" for child in self.compiler_node.children)

    def is_overload(self) -> bool:
        """True for a signature without a body."""
        return self.compiler_node.child_by_field_name("body") is None

    def has_body(self) -> bool:
        return not self.is_overload()


class ParameterDeclaration(
    ReadonlyableNode,
    ScopeableNode,
    InitializerExpressionableNode,
    TypedNode,
    BindingNamedNode,
):
    """
    A parameter. With a scope or `readonly` keyword in a constructor it is
    also a parameter property.
    """

    _structure_class = ParameterDeclarationStructure

    def is_rest_parameter(self) -> bool:
        pattern = self._get_name_child_ts_node()
        return pattern is not None and pattern.type == "rest_pattern"

    def is_optional(self) -> bool:
        """True for `x?`, rest parameters and parameters with an initializer."""
        return (
            self.get_kind() == "optional_parameter"
            or self.is_rest_parameter()
            or self.has_initializer()
        )

    def is_parameter_property(self) -> bool:
        return self.has_scope_keyword() or self.is_readonly()

    def remove(self):
        """Remove the parameter and one adjacent comma."""
        parent = self.get_parent_or_throw()
        siblings = [c for c in parent.get_children() if isinstance(c, ParameterDeclaration)]
        remove_list_item(self, siblings)
