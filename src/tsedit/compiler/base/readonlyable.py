"""
Readonlyable trait: the `readonly` keyword on properties and parameters.
"""

from typing import Optional

from tsedit.provider.kinds import ModifierKind
from ..node import Node
from .modifierable import ModifierableNode


class ReadonlyableNode(ModifierableNode):

    def is_readonly(self) -> bool:
        return self.get_readonly_keyword() is not None

    def get_readonly_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.READONLY)

    def get_readonly_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.READONLY)

    def set_is_readonly(self, value: bool = True):
        return self.toggle_modifier(ModifierKind.READONLY, value)

    def _fill(self, structure):
        super()._fill(structure)
        if "is_readonly" in structure.model_fields_set and structure.is_readonly is not None:
            self.set_is_readonly(structure.is_readonly)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        data["is_readonly"] = self.is_readonly()
