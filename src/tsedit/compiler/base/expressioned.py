"""
Expressioned trait: nodes that wrap a single inner expression.
"""

from typing import Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import NotFoundError
from ..node import Node


class ExpressionedNode(Node):
    """
    Call expressions (callee), property access (object) and export
    assignments (exported value).
    """

    _expression_field = "expression"

    def _get_expression_ts_node(self) -> Optional[TsNode]:
        return self.compiler_node.child_by_field_name(self._expression_field)

    def get_expression(self) -> Optional[Node]:
        return self._wrap(self._get_expression_ts_node())

    def get_expression_or_throw(self) -> Node:
        expression = self.get_expression()
        if expression is None:
            raise NotFoundError(f"Expected {type(self).__name__} to have an expression.")
        return expression
