"""
Ambientable trait: the `declare` keyword.
"""

from typing import Optional

from tsedit.provider.kinds import ModifierKind
from ..node import Node
from .modifierable import ModifierableNode


class AmbientableNode(ModifierableNode):
    """
    A declaration that can be marked `declare`.
    """

    def has_declare_keyword(self) -> bool:
        return self.get_declare_keyword() is not None

    def get_declare_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.DECLARE)

    def get_declare_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.DECLARE)

    def is_ambient(self) -> bool:
        """
        True if the declaration has no runtime body of its own: it is marked
        `declare`, is an interface or type alias, sits inside a `declare`d
        declaration, or lives in a .d.ts file.
        """
        if self.has_declare_keyword():
            return True
        if self.get_kind() in ("interface_declaration", "type_alias_declaration"):
            return True
        node = self._get_outer_node().parent
        while node is not None:
            if node.type == "ambient_declaration":
                return True
            node = node.parent
        return self.get_source_file().is_declaration_file()

    def set_has_declare_keyword(self, value: bool = True):
        return self.toggle_modifier(ModifierKind.DECLARE, value)

    def _fill(self, structure):
        super()._fill(structure)
        if "has_declare_keyword" in structure.model_fields_set and structure.has_declare_keyword is not None:
            self.set_has_declare_keyword(structure.has_declare_keyword)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        data["has_declare_keyword"] = self.has_declare_keyword()
