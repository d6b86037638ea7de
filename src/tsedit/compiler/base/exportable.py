"""
Exportable trait: export and default-export state of a declaration.

A file has at most one default export. A node is the default export if it
carries the `default` keyword, or if its symbol is the file's default
export symbol directly or through alias resolution (`export default Foo;`,
`export { Foo as default }`).
"""

from typing import Optional

from tsedit.exceptions import InvalidOperationError
from tsedit.logging_config import get_logger
from tsedit.provider.kinds import ModifierKind
from tsedit.manipulation.editor import remove_nodes
from ..node import Node
from .modifierable import ModifierableNode

logger = get_logger("compiler")


class ExportGetableNode(Node):
    """
    Read-only export queries, for nodes whose export state is decided by
    the file's symbol table rather than by their own keywords.
    """

    def is_default_export(self) -> bool:
        """True if this node's symbol is (or resolves to) the file's default export."""
        default_symbol = self.get_source_file().get_default_export_symbol()
        if default_symbol is None:
            return False
        symbol = self.get_symbol()
        if symbol is None:
            return False
        if symbol == default_symbol:
            return True
        aliased = default_symbol.get_aliased_symbol()
        return aliased is not None and aliased == symbol

    def is_exported(self) -> bool:
        """True if the file exports this node under any name."""
        if self.is_default_export():
            return True
        symbol = self.get_symbol()
        if symbol is None:
            return False
        for exported in self.get_source_file()._get_symbol_table().exports.values():
            if exported == symbol:
                return True
            aliased = exported.get_aliased_symbol()
            if aliased is not None and aliased == symbol:
                return True
        return False

    def is_named_export(self) -> bool:
        return self.is_exported() and not self.is_default_export()


class ExportableNode(ExportGetableNode, ModifierableNode):
    """
    A declaration that can carry `export` and `default` keywords.
    """

    # Declarations TypeScript does not allow after `export default`
    _can_be_default_export = True

    def has_export_keyword(self) -> bool:
        return self.get_export_keyword() is not None

    def get_export_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.EXPORT)

    def get_export_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.EXPORT)

    def has_default_keyword(self) -> bool:
        return self.get_default_keyword() is not None

    def get_default_keyword(self) -> Optional[Node]:
        return self.get_first_modifier_by_kind(ModifierKind.DEFAULT)

    def get_default_keyword_or_throw(self) -> Node:
        return self.get_first_modifier_by_kind_or_throw(ModifierKind.DEFAULT)

    def is_default_export(self) -> bool:
        if self.has_default_keyword():
            return True
        return super().is_default_export()

    def is_exported(self) -> bool:
        if self.has_export_keyword():
            return True
        return super().is_exported()

    def is_named_export(self) -> bool:
        """True if this is a top-level `export` declaration without `default`."""
        return (
            self._is_top_level()
            and self.has_export_keyword()
            and not self.has_default_keyword()
        )

    def set_is_default_export(self, value: bool = True):
        """
        Make this node the file's default export, or stop it being one.

        Setting True removes the file's current default export first, then
        adds `export` and `default`. Setting False removes the file's
        default export if it is this node.

        Raises:
            InvalidOperationError: If value is True and the node is not a
                top-level statement, or the declaration kind cannot be a
                default export
        """
        if value == self.is_default_export():
            return self

        if value and not self._is_top_level():
            raise InvalidOperationError(
                "The parent must be a source file in order to set this node as a default export."
            )
        if value and not self._can_be_default_export:
            raise InvalidOperationError(f"A {type(self).__name__} cannot be a default export.")

        source_file = self.get_source_file()
        default_symbol = source_file.get_default_export_symbol()
        if default_symbol is not None:
            logger.debug(f"Removing default export '{default_symbol.get_name()}' of {source_file.get_file_path()}")
            source_file.remove_default_export(default_symbol)

        if value:
            self.add_modifier(ModifierKind.EXPORT)
            self.add_modifier(ModifierKind.DEFAULT)
        return self

    def set_is_exported(self, value: bool = True):
        """
        Add or remove the `export` keyword.

        At top level this always clears default export status first, so
        `export default class A {}` becomes `export class A {}` for True
        and `class A {}` for False.
        """
        if self._is_top_level():
            self.set_is_default_export(False)

        if value:
            if not self.has_export_keyword():
                self.add_modifier(ModifierKind.EXPORT)
        else:
            export_keyword = self.get_export_keyword()
            if export_keyword is not None:
                remove_nodes([export_keyword])
        return self

    def _is_top_level(self) -> bool:
        parent = self.get_parent()
        return parent is not None and parent.is_source_file()

    def _fill(self, structure):
        super()._fill(structure)
        fields = structure.model_fields_set

        wants_default = "is_default_export" in fields and structure.is_default_export is True
        if "is_exported" in fields and structure.is_exported is not None:
            # skip when the requested default export already holds
            if not (wants_default and self.is_default_export()):
                self.set_is_exported(structure.is_exported)
        if "is_default_export" in fields and structure.is_default_export is not None:
            self.set_is_default_export(structure.is_default_export)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        data["is_exported"] = self.has_export_keyword()
        data["is_default_export"] = self.has_default_keyword()

