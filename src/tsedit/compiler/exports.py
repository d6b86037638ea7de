"""
Export assignments (`export default x;`, `export = x;`) and export
declarations (`export { a, b as c } from "./m";`).
"""

from typing import List, Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import NotFoundError
from tsedit.provider.syntax import first_named_child_of_kind, has_child_of_kind, string_literal_value
from .base import ExpressionedNode, StatementNode, remove_list_item
from .node import Node


class ExportAssignment(StatementNode, ExpressionedNode):
    """`export default <expression>;` or `export = <expression>;`."""

    def _get_expression_ts_node(self) -> Optional[TsNode]:
        core = self.compiler_node
        value = core.child_by_field_name("value")
        if value is not None:
            return value
        named = [c for c in core.named_children if c.type not in ("comment", "decorator")]
        return named[-1] if named else None

    def is_export_equals(self) -> bool:
        return has_child_of_kind(self.compiler_node, "=")


class ExportDeclaration(StatementNode):
    """`export { ... }`, `export { ... } from "m"` or `export * from "m"`."""

    def get_named_exports(self) -> List["ExportSpecifier"]:
        clause = first_named_child_of_kind(self.compiler_node, "export_clause")
        if clause is None:
            return []
        return self._wrap_all(c for c in clause.named_children if c.type == "export_specifier")

    def has_named_exports(self) -> bool:
        return bool(self.get_named_exports())

    def is_namespace_export(self) -> bool:
        return has_child_of_kind(self.compiler_node, "*")

    def get_module_specifier_value(self) -> Optional[str]:
        source = self.compiler_node.child_by_field_name("source")
        return string_literal_value(source, self._get_buffer())

    def has_module_specifier(self) -> bool:
        return self.compiler_node.child_by_field_name("source") is not None


class ExportSpecifier(Node):
    """One `name` or `name as alias` entry of an export declaration."""

    def get_name_node(self) -> Node:
        return self._wrap(self.compiler_node.child_by_field_name("name"))

    def get_name(self) -> str:
        """The local (or re-exported) name."""
        return self.get_name_node().get_text()

    def get_alias_node(self) -> Optional[Node]:
        return self._wrap(self.compiler_node.child_by_field_name("alias"))

    def get_alias(self) -> Optional[str]:
        alias = self.get_alias_node()
        return alias.get_text() if alias is not None else None

    def get_export_name(self) -> str:
        """The name the module exports: the alias if present."""
        alias = self.get_alias()
        return alias if alias is not None else self.get_name()

    def get_export_declaration(self) -> ExportDeclaration:
        for ancestor in self.get_ancestors():
            if isinstance(ancestor, ExportDeclaration):
                return ancestor
        raise NotFoundError("Expected the export specifier to be inside an export declaration.")

    def remove(self):
        """Remove the specifier, or the whole declaration if it is the last one."""
        declaration = self.get_export_declaration()
        specifiers = declaration.get_named_exports()
        if len(specifiers) == 1:
            declaration.remove()
        else:
            remove_list_item(self, specifiers)
