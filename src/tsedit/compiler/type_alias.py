"""
Type alias declarations.
"""

from typing import Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import InvalidOperationError
from tsedit.structures.models import TypeAliasDeclarationStructure
from .base import AmbientableNode, ExportableNode, NamedNode, StatementNode, TypedNode


class TypeAliasDeclaration(StatementNode, AmbientableNode, ExportableNode, TypedNode, NamedNode):
    """
    `type Foo = ...`. The aliased type is the node's type and cannot be
    removed, only replaced.
    """

    _structure_class = TypeAliasDeclarationStructure
    _can_be_default_export = False

    def _get_type_annotation_ts_node(self) -> Optional[TsNode]:
        return self.compiler_node.child_by_field_name("value")

    def remove_type(self):
        raise InvalidOperationError("A type alias must have a type. Use set_type() to replace it.")
