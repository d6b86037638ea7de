"""
Variable statements and declarations.

A variable statement (`export const a = 1, b = 2;`) carries the export and
declare keywords; each declarator is a VariableDeclaration.
"""

from typing import List, Optional

from tsedit.exceptions import ArgumentError, NotFoundError
from tsedit.manipulation.editor import replace_text
from tsedit.structures.models import VariableDeclarationStructure, VariableStatementStructure
from .base import (
    AmbientableNode,
    BindingNamedNode,
    ExportableNode,
    ExportGetableNode,
    InitializerExpressionableNode,
    StatementNode,
    TypedNode,
    remove_list_item,
)

DECLARATION_KEYWORDS = ("const", "let", "var")


class VariableStatement(StatementNode, AmbientableNode, ExportableNode):
    """`const`, `let` or `var` statement."""

    _structure_class = VariableStatementStructure
    _can_be_default_export = False

    def get_declarations(self) -> List["VariableDeclaration"]:
        core = self.compiler_node
        return self._wrap_all(c for c in core.named_children if c.type == "variable_declarator")

    def get_declaration(self, name: str) -> Optional["VariableDeclaration"]:
        for declaration in self.get_declarations():
            if declaration.get_name() == name:
                return declaration
        return None

    def _get_keyword_ts_node(self):
        for child in self.compiler_node.children:
            if child.type in DECLARATION_KEYWORDS:
                return child
        raise NotFoundError("Expected a const, let or var keyword.")

    def get_declaration_kind(self) -> str:
        return self._get_keyword_ts_node().type

    def set_declaration_kind(self, kind: str):
        """Switch between `const`, `let` and `var`."""
        if kind not in DECLARATION_KEYWORDS:
            raise ArgumentError("kind", f"Expected one of {', '.join(DECLARATION_KEYWORDS)}, got '{kind}'")
        keyword = self._get_keyword_ts_node()
        if keyword.type != kind:
            replace_text(self._source_file, keyword.start_byte, keyword.end_byte, kind)
        return self


class VariableDeclaration(
    ExportGetableNode,
    InitializerExpressionableNode,
    TypedNode,
    BindingNamedNode,
):
    """One declarator of a variable statement: `a: number = 1`."""

    _structure_class = VariableDeclarationStructure

    def get_variable_statement(self) -> VariableStatement:
        return self.get_parent_or_throw()

    def remove(self):
        """Remove the declarator, or the whole statement if it is the only one."""
        statement = self.get_variable_statement()
        declarations = statement.get_declarations()
        if len(declarations) == 1:
            statement.remove()
        else:
            remove_list_item(self, declarations)
