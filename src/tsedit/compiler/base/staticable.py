"""
Staticable trait: the `static` keyword on class members.
"""

from typing import Optional

from tsedit.provider.kinds import ModifierKind
from ..node import Node
from .modifierable import ModifierableNode


class StaticableNode(ModifierableNode):

    def is_static(self) -> bool:
        return self.get_static_keyword() is not None

    def get_static_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.STATIC)

    def get_static_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.STATIC)

    def set_is_static(self, value: bool = True):
        return self.toggle_modifier(ModifierKind.STATIC, value)

    def _fill(self, structure):
        super()._fill(structure)
        if "is_static" in structure.model_fields_set and structure.is_static is not None:
            self.set_is_static(structure.is_static)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        data["is_static"] = self.is_static()
