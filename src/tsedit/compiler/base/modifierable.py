"""
Modifierable trait: read and edit a declaration's modifier list.

Modifier kinds form a closed enumeration (ModifierKind). Queries are an
ordered scan over the modifier tokens; additions insert the keyword at its
canonical position, after the last present modifier of the kinds it must
follow.
"""

from typing import Dict, List, Optional, Union

from tsedit.exceptions import ArgumentError, NotFoundError
from tsedit.manipulation.editor import insert_text, remove_nodes
from tsedit.provider.kinds import (
    MODIFIER_LIST_TRIVIA_KINDS,
    STATEMENT_DECLARATION_KINDS,
    ModifierKind,
)
from tsedit.provider.syntax import is_modifier_token, modifier_tokens
from ..node import Node

_ORDER_GROUP = [
    ModifierKind.EXPORT,
    ModifierKind.DEFAULT,
    ModifierKind.DECLARE,
    ModifierKind.PUBLIC,
    ModifierKind.PRIVATE,
    ModifierKind.PROTECTED,
    ModifierKind.STATIC,
]

# Kinds a new modifier is placed after, when present
ADD_AFTER: Dict[ModifierKind, List[ModifierKind]] = {
    ModifierKind.EXPORT: [],
    ModifierKind.PUBLIC: [],
    ModifierKind.PROTECTED: [],
    ModifierKind.PRIVATE: [],
    ModifierKind.DEFAULT: [ModifierKind.EXPORT],
    ModifierKind.DECLARE: [ModifierKind.EXPORT, ModifierKind.DEFAULT],
    ModifierKind.STATIC: [ModifierKind.PUBLIC, ModifierKind.PROTECTED, ModifierKind.PRIVATE],
    ModifierKind.OVERRIDE: _ORDER_GROUP,
    ModifierKind.ABSTRACT: _ORDER_GROUP,
    ModifierKind.ASYNC: _ORDER_GROUP + [ModifierKind.ABSTRACT],
    ModifierKind.READONLY: _ORDER_GROUP + [ModifierKind.ABSTRACT, ModifierKind.OVERRIDE],
    ModifierKind.ACCESSOR: _ORDER_GROUP + [ModifierKind.ABSTRACT, ModifierKind.OVERRIDE],
}

# Keywords tree-sitter keeps on a wrapper statement instead of the declaration
STATEMENT_MODIFIER_KINDS = frozenset({ModifierKind.EXPORT, ModifierKind.DEFAULT, ModifierKind.DECLARE})


def to_modifier_kind(value: Union[str, ModifierKind]) -> ModifierKind:
    try:
        return ModifierKind(value)
    except ValueError:
        raise ArgumentError("text", f"'{value}' is not a modifier keyword") from None


class ModifierableNode(Node):
    """
    A node that can carry modifier keywords.
    """

    def get_modifiers(self) -> List[Node]:
        """Modifiers in source order, including export/default/declare."""
        return self._wrap_all(modifier_tokens(self.compiler_node))

    def get_first_modifier_by_kind(self, kind: Union[str, ModifierKind]) -> Optional[Node]:
        kind = to_modifier_kind(kind)
        for modifier in self.get_modifiers():
            if modifier.get_modifier_kind() == kind:
                return modifier
        return None

    def get_first_modifier_by_kind_or_throw(self, kind: Union[str, ModifierKind]) -> Node:
        modifier = self.get_first_modifier_by_kind(kind)
        if modifier is None:
            raise NotFoundError(f"Expected a '{to_modifier_kind(kind).value}' modifier.")
        return modifier

    def has_modifier(self, kind: Union[str, ModifierKind]) -> bool:
        return self.get_first_modifier_by_kind(kind) is not None

    def add_modifier(self, text: Union[str, ModifierKind]) -> Node:
        """
        Add a modifier at its canonical position.

        Args:
            text: Modifier keyword, e.g. "export" or ModifierKind.STATIC

        Returns:
            The new modifier, or the existing one if the node already has it
        """
        kind = to_modifier_kind(text)
        existing = self.get_first_modifier_by_kind(kind)
        if existing is not None:
            return existing

        modifiers = self.get_modifiers()
        anchor_position = None
        for position, modifier in enumerate(modifiers):
            if modifier.get_modifier_kind() in ADD_AFTER[kind]:
                anchor_position = position

        if anchor_position is None:
            insert_pos = modifiers[0].get_start() if modifiers else self._get_keyword_insert_pos()
        elif anchor_position + 1 < len(modifiers):
            insert_pos = modifiers[anchor_position + 1].get_start()
        else:
            insert_pos = self._get_keyword_insert_pos()

        # statement keywords end up on a wrapper, so the declaration must not grow over them
        core = self.compiler_node
        owner = self
        if kind in STATEMENT_MODIFIER_KINDS and core.type in STATEMENT_DECLARATION_KINDS:
            owner = None

        insert_text(self._source_file, insert_pos, f"{kind.value} ", owner=owner)
        return self.get_first_modifier_by_kind_or_throw(kind)

    def remove_modifier(self, text: Union[str, ModifierKind]) -> bool:
        """Remove the first modifier of a kind. Returns False if there was none."""
        modifier = self.get_first_modifier_by_kind(text)
        if modifier is None:
            return False
        remove_nodes([modifier])
        return True

    def toggle_modifier(self, text: Union[str, ModifierKind], value: Optional[bool] = None):
        """
        Add or remove a modifier.

        Args:
            text: Modifier keyword
            value: True adds, False removes, None flips the current state
        """
        if value is None:
            value = not self.has_modifier(text)
        if value:
            self.add_modifier(text)
        else:
            self.remove_modifier(text)
        return self

    def _get_keyword_insert_pos(self) -> int:
        """Start of the first token after the modifier list."""
        core = self.compiler_node
        for child in core.children:
            if is_modifier_token(child) or child.type in MODIFIER_LIST_TRIVIA_KINDS:
                continue
            return child.start_byte
        return core.start_byte
