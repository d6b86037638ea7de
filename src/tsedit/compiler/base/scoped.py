"""
Scoped traits: accessibility keywords (`public`, `protected`, `private`).

ScopedNode is used by class members, which are public when no keyword is
written. ScopeableNode is used by parameters, which only have a scope (and
become parameter properties) when a keyword is written.
"""

from typing import Optional, Union

from tsedit.exceptions import ArgumentError
from tsedit.provider.kinds import ModifierKind, Scope
from .modifierable import ModifierableNode

_SCOPE_KINDS = (ModifierKind.PUBLIC, ModifierKind.PROTECTED, ModifierKind.PRIVATE)


def to_scope(value: Union[str, Scope, None]) -> Optional[Scope]:
    if value is None:
        return None
    try:
        return Scope(value)
    except ValueError:
        raise ArgumentError("scope", f"'{value}' is not a scope") from None


class ScopedNode(ModifierableNode):

    def get_scope(self) -> Optional[Scope]:
        """The written scope, or Scope.PUBLIC when none is written."""
        scope = self._get_scope_from_modifiers()
        return scope if scope is not None else Scope.PUBLIC

    def has_scope_keyword(self) -> bool:
        return self._get_scope_from_modifiers() is not None

    def set_scope(self, scope: Union[str, Scope, None]):
        """
        Set the accessibility keyword.

        Args:
            scope: The scope to write, or None to remove any scope keyword
        """
        scope = to_scope(scope)
        # only one accessibility keyword may be present at a time
        for kind in _SCOPE_KINDS:
            if scope is None or kind.value != scope.value:
                self.remove_modifier(kind)
        if scope is not None:
            self.add_modifier(ModifierKind(scope.value))
        return self

    def _get_scope_from_modifiers(self) -> Optional[Scope]:
        for modifier in self.get_modifiers():
            kind = modifier.get_modifier_kind()
            if kind in _SCOPE_KINDS:
                return Scope(kind.value)
        return None

    def _fill(self, structure):
        super()._fill(structure)
        if "scope" in structure.model_fields_set:
            self.set_scope(structure.scope)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        if self.has_scope_keyword():
            data["scope"] = self.get_scope()


class ScopeableNode(ScopedNode):

    def get_scope(self) -> Optional[Scope]:
        """The written scope, or None."""
        return self._get_scope_from_modifiers()
