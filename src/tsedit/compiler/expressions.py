"""
Expression and type node wrappers.
"""

from typing import List, Optional

from .base import ExpressionedNode
from .node import Node


class Expression(Node):
    """Any expression without a more specific wrapper."""


class TypeNode(Node):
    """Any type node (`string`, `Foo<T>`, `A | B`, ...)."""


class Identifier(Expression):
    """
    An identifier, type identifier or property identifier.
    """

    def get_declaration(self) -> Optional[Node]:
        """The first declaration of the symbol this identifier names, if any."""
        symbol = self.get_symbol()
        if symbol is None:
            return None
        declarations = symbol.get_declarations()
        return declarations[0] if declarations else None


class CallExpression(ExpressionedNode, Expression):
    """
    A call such as `foo(a)` or `import(x)`. The expression is the callee.
    """

    _expression_field = "function"

    def get_arguments(self) -> List[Node]:
        arguments = self.compiler_node.child_by_field_name("arguments")
        if arguments is None:
            return []
        return self._wrap_all(c for c in arguments.named_children if c.type != "comment")


class PropertyAccessExpression(ExpressionedNode, Expression):
    """
    A property access such as `a.b` or `super.x`. The expression is the
    object being accessed.
    """

    _expression_field = "object"

    def get_name_node(self) -> Optional[Node]:
        return self._wrap(self.compiler_node.child_by_field_name("property"))

    def get_name(self) -> Optional[str]:
        name_node = self.get_name_node()
        return name_node.get_text() if name_node is not None else None
