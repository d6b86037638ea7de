"""
Enum declarations.
"""

from typing import List

from tsedit.structures.models import EnumDeclarationStructure
from .base import AmbientableNode, ExportableNode, NamedNode, StatementNode
from .node import Node


class EnumDeclaration(StatementNode, AmbientableNode, ExportableNode, NamedNode):
    """`enum Color { Red, Green }` or `const enum ...`."""

    _structure_class = EnumDeclarationStructure
    _can_be_default_export = False

    def is_const_enum(self) -> bool:
        return any(child.type == "const" for child in self.compiler_node.children)

    def get_members(self) -> List[Node]:
        body = self.compiler_node.child_by_field_name("body")
        if body is None:
            return []
        return self._wrap_all(c for c in body.named_children if c.type != "comment")

    def get_member_names(self) -> List[str]:
        names = []
        for member in self.get_members():
            node = member.compiler_node
            name = node.child_by_field_name("name") if node.type == "enum_assignment" else node
            names.append(member._wrap(name).get_text())
        return names
