"""
Abstractable trait: the `abstract` keyword on classes and class members.
"""

from typing import Optional

from tsedit.provider.kinds import ModifierKind
from ..node import Node
from .modifierable import ModifierableNode


class AbstractableNode(ModifierableNode):

    def is_abstract(self) -> bool:
        return self.get_abstract_keyword() is not None

    def get_abstract_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.ABSTRACT)

    def get_abstract_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.ABSTRACT)

    def set_is_abstract(self, value: bool = True):
        return self.toggle_modifier(ModifierKind.ABSTRACT, value)

    def _fill(self, structure):
        super()._fill(structure)
        if "is_abstract" in structure.model_fields_set and structure.is_abstract is not None:
            self.set_is_abstract(structure.is_abstract)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        data["is_abstract"] = self.is_abstract()
