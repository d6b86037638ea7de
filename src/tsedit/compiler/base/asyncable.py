"""
Asyncable trait: the `async` keyword on functions and methods.
"""

from typing import Optional

from tsedit.provider.kinds import ModifierKind
from ..node import Node
from .modifierable import ModifierableNode


class AsyncableNode(ModifierableNode):

    def is_async(self) -> bool:
        return self.get_async_keyword() is not None

    def get_async_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.ASYNC)

    def get_async_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.ASYNC)

    def set_is_async(self, value: bool = True):
        return self.toggle_modifier(ModifierKind.ASYNC, value)

    def _fill(self, structure):
        super()._fill(structure)
        if "is_async" in structure.model_fields_set and structure.is_async is not None:
            self.set_is_async(structure.is_async)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        data["is_async"] = self.is_async()
