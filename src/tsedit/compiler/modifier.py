"""
Modifier: a keyword token in a declaration's modifier list.
"""

from tsedit.manipulation.config import TRAILING_WHITESPACE
from tsedit.manipulation.positions import extend_over
from tsedit.provider.kinds import ModifierKind
from tsedit.provider.syntax import modifier_text
from .node import Node


class Modifier(Node):
    """
    A modifier keyword such as `export`, `default` or `static`.

    Modifiers have no identity beyond their owner: adding or removing one
    goes through the owner's modifierable trait. Removing a modifier also
    removes the spaces that follow it.
    """

    def get_modifier_kind(self) -> ModifierKind:
        return ModifierKind(modifier_text(self.compiler_node, self._get_buffer()))

    def get_owner(self):
        """The declaration this modifier belongs to."""
        return self.get_parent()

    def _get_removal_range(self):
        node = self.compiler_node
        end = extend_over(self._get_buffer(), node.end_byte, TRAILING_WHITESPACE["keyword"])
        return node.start_byte, end
