"""
Interface declarations and property signatures.
"""

from typing import List, Optional

from tsedit.exceptions import NotFoundError
from tsedit.structures.models import InterfaceDeclarationStructure, PropertySignatureStructure
from .base import (
    AmbientableNode,
    ExportableNode,
    NamedNode,
    PropertyNamedNode,
    ReadonlyableNode,
    StatementNode,
    TypedNode,
)
from .node import Node


class InterfaceDeclaration(StatementNode, AmbientableNode, ExportableNode, NamedNode):
    """`interface Foo { ... }`."""

    _structure_class = InterfaceDeclarationStructure

    def get_members(self) -> List[Node]:
        body = self.compiler_node.child_by_field_name("body")
        if body is None:
            return []
        return self._wrap_all(c for c in body.named_children if c.type != "comment")

    def get_properties(self) -> List["PropertySignature"]:
        return [m for m in self.get_members() if isinstance(m, PropertySignature)]

    def get_property(self, name: str) -> Optional["PropertySignature"]:
        for prop in self.get_properties():
            if prop.get_name() == name:
                return prop
        return None

    def get_property_or_throw(self, name: str) -> "PropertySignature":
        prop = self.get_property(name)
        if prop is None:
            raise NotFoundError(f"Expected to find a property named '{name}'.")
        return prop


class PropertySignature(StatementNode, ReadonlyableNode, TypedNode, PropertyNamedNode):
    """An interface property: `readonly x?: number;`."""

    _structure_class = PropertySignatureStructure

    def has_question_token(self) -> bool:
        return any(child.type == "?" for child in self.compiler_node.children)
