"""
InitializerExpressionable trait: `= value` initializers.
"""

from typing import Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import ArgumentError, NotFoundError
from tsedit.manipulation.editor import insert_text, remove_text, replace_node_text
from ..node import Node


class InitializerExpressionableNode(Node):
    """
    A variable, property or parameter with an optional initializer.

    Insertion positions are taken from the typed and named traits the
    concrete node also composes.
    """

    def _get_initializer_ts_node(self) -> Optional[TsNode]:
        return self.compiler_node.child_by_field_name("value")

    def has_initializer(self) -> bool:
        return self._get_initializer_ts_node() is not None

    def get_initializer(self) -> Optional[Node]:
        return self._wrap(self._get_initializer_ts_node())

    def get_initializer_or_throw(self) -> Node:
        initializer = self.get_initializer()
        if initializer is None:
            raise NotFoundError(f"Expected {type(self).__name__} to have an initializer.")
        return initializer

    def set_initializer(self, text: str):
        """
        Set the initializer expression text.

        An existing initializer is replaced and becomes invalid.

        Raises:
            ArgumentError: If text is empty
        """
        if not text or not text.strip():
            raise ArgumentError("text", "An initializer cannot be empty. Use remove_initializer() instead.")

        initializer = self.get_initializer()
        if initializer is not None:
            if initializer.get_text() != text:
                replace_node_text(initializer, text, keep_identity=False)
            return self

        insert_text(self._source_file, self._get_initializer_insert_pos(), f" = {text}", owner=self)
        return self

    def remove_initializer(self):
        """Remove `= value` along with the whitespace before the `=`."""
        initializer = self._get_initializer_ts_node()
        if initializer is None:
            return self

        equals = initializer.prev_sibling
        while equals is not None and equals.type != "=":
            equals = equals.prev_sibling
        start = equals.start_byte if equals is not None else initializer.start_byte
        before = equals.prev_sibling if equals is not None else None
        if before is not None:
            start = before.end_byte
        remove_text(self._source_file, start, initializer.end_byte)
        return self

    def _get_initializer_insert_pos(self) -> int:
        annotation = self.compiler_node.child_by_field_name("type")
        if annotation is not None:
            return annotation.end_byte
        return self._get_type_insert_pos()

    def _fill(self, structure):
        super()._fill(structure)
        if "initializer" in structure.model_fields_set:
            if structure.initializer is None:
                self.remove_initializer()
            else:
                self.set_initializer(structure.initializer)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        initializer = self.get_initializer()
        data["initializer"] = initializer.get_text() if initializer is not None else None
