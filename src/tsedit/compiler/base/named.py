"""
Named traits: declarations with a name.

NamedNode requires a name. DeclarationNamedNode allows an anonymous
declaration (`export default class {}`). BindingNamedNode reads the name
from a binding pattern (variables, parameters). PropertyNamedNode is used
by class and interface members.

Renaming rewrites the name token only. References elsewhere are left as
they are.
"""

from typing import Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import ArgumentError, NotFoundError
from tsedit.manipulation.editor import insert_text, replace_node_text
from ..node import Node


def validate_identifier(name: str, allow_private: bool = False) -> str:
    if not isinstance(name, str) or not name:
        raise ArgumentError("name", "A name must be a non-empty string")
    check = name[1:] if allow_private and name.startswith("#") else name
    if not check.replace("$", "_").isidentifier():
        raise ArgumentError("name", f"'{name}' is not a valid identifier")
    return name


class NamedNode(Node):
    """
    A node whose name is a required `name` child.
    """

    _allow_private_name = False

    def _get_name_child_ts_node(self) -> Optional[TsNode]:
        """The direct child holding the name."""
        return self.compiler_node.child_by_field_name("name")

    def _get_name_ts_node(self) -> Optional[TsNode]:
        return self._get_name_child_ts_node()

    def get_name_node(self) -> Optional[Node]:
        return self._wrap(self._get_name_ts_node())

    def get_name_node_or_throw(self) -> Node:
        name_node = self.get_name_node()
        if name_node is None:
            raise NotFoundError(f"Expected {type(self).__name__} to have a name.")
        return name_node

    def get_name(self) -> str:
        return self.get_name_node_or_throw().get_text()

    def get_name_or_throw(self) -> str:
        return self.get_name_node_or_throw().get_text()

    def rename(self, new_name: str):
        """
        Change the declared name.

        The name node keeps its identity and spans the new text.
        """
        validate_identifier(new_name, self._allow_private_name)
        name_node = self.get_name_node_or_throw()
        if name_node.get_text() != new_name:
            replace_node_text(name_node, new_name)
        return self

    def _fill(self, structure):
        super()._fill(structure)
        if "name" in structure.model_fields_set and structure.name is not None:
            if self.get_name_node() is None or self.get_name() != structure.name:
                self.rename(structure.name)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        name_node = self.get_name_node()
        data["name"] = name_node.get_text() if name_node is not None else None


class DeclarationNamedNode(NamedNode):
    """
    A class or function declaration. May be anonymous when default exported.
    """

    def get_name(self) -> Optional[str]:
        name_node = self.get_name_node()
        return name_node.get_text() if name_node is not None else None

    def rename(self, new_name: str):
        """
        Change the declared name. Naming an anonymous declaration inserts
        the name after its `class` / `function` keyword.
        """
        if self.get_name_node() is not None:
            return super().rename(new_name)

        validate_identifier(new_name)
        keyword = None
        for child in self.compiler_node.children:
            if child.type in ("class", "function", "*"):
                keyword = child
            elif child.is_named and child.type not in ("decorator", "comment"):
                break
        if keyword is None:
            raise NotFoundError(f"Could not find where to insert a name in {type(self).__name__}.")
        insert_text(self._source_file, keyword.end_byte, f" {new_name}", owner=self)
        return self


class BindingNamedNode(NamedNode):
    """
    A variable or parameter whose name is a binding pattern.
    """

    def _get_name_child_ts_node(self) -> Optional[TsNode]:
        core = self.compiler_node
        name = core.child_by_field_name("name")
        if name is None:
            name = core.child_by_field_name("pattern")
        return name

    def _get_name_ts_node(self) -> Optional[TsNode]:
        child = self._get_name_child_ts_node()
        if child is not None and child.type == "rest_pattern":
            for grandchild in child.named_children:
                if grandchild.type == "identifier":
                    return grandchild
        return child


class PropertyNamedNode(NamedNode):
    """
    A class or interface member. Private names (`#field`) are allowed.
    """

    _allow_private_name = True
