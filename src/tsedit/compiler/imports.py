"""
Import declarations.
"""

from typing import List, Optional

from tsedit.provider.syntax import first_named_child_of_kind, string_literal_value
from .base import StatementNode
from .node import Node


class ImportDeclaration(StatementNode):
    """`import d, { a as b } from "./m";` and `import * as ns from "./m";`."""

    def get_module_specifier_value(self) -> Optional[str]:
        source = self.compiler_node.child_by_field_name("source")
        return string_literal_value(source, self._get_buffer())

    def _get_clause(self):
        return first_named_child_of_kind(self.compiler_node, "import_clause")

    def get_default_import(self) -> Optional[Node]:
        clause = self._get_clause()
        if clause is None:
            return None
        return self._wrap(first_named_child_of_kind(clause, "identifier"))

    def get_namespace_import(self) -> Optional[Node]:
        clause = self._get_clause()
        namespace = first_named_child_of_kind(clause, "namespace_import") if clause is not None else None
        if namespace is None:
            return None
        return self._wrap(first_named_child_of_kind(namespace, "identifier"))

    def get_named_imports(self) -> List[Node]:
        clause = self._get_clause()
        named = first_named_child_of_kind(clause, "named_imports") if clause is not None else None
        if named is None:
            return []
        return self._wrap_all(c for c in named.named_children if c.type == "import_specifier")

    def is_type_only(self) -> bool:
        core = self.compiler_node
        return any(child.type == "type" for child in core.children)
