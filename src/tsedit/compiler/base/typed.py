"""
Typed traits: type annotations (`: T`) on declarations and return types.
"""

from typing import Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import NotFoundError
from tsedit.manipulation.editor import insert_text, remove_text, replace_node_text
from ..node import Node

ANNOTATION_KINDS = ("type_annotation", "asserts_annotation", "type_predicate_annotation")


def annotated_type(annotation: Optional[TsNode]) -> Optional[TsNode]:
    """The type inside a `: T` annotation node."""
    if annotation is None:
        return None
    if annotation.type not in ANNOTATION_KINDS:
        return annotation
    for child in annotation.named_children:
        if child.type != "comment":
            return child
    return None


class TypedNode(Node):
    """
    A declaration with an optional `: T` type annotation.
    """

    def _get_type_annotation_ts_node(self) -> Optional[TsNode]:
        return self.compiler_node.child_by_field_name("type")

    def get_type_node(self) -> Optional[Node]:
        return self._wrap(annotated_type(self._get_type_annotation_ts_node()))

    def get_type_node_or_throw(self) -> Node:
        type_node = self.get_type_node()
        if type_node is None:
            raise NotFoundError(f"Expected {type(self).__name__} to have a type.")
        return type_node

    def has_type(self) -> bool:
        return self._get_type_annotation_ts_node() is not None

    def set_type(self, text: str):
        """
        Set the type annotation text. An empty text removes the annotation.

        An existing type node is replaced and becomes invalid.
        """
        if not text or not text.strip():
            return self.remove_type()

        type_node = self.get_type_node()
        if type_node is not None:
            if type_node.get_text() != text:
                replace_node_text(type_node, text, keep_identity=False)
            return self

        insert_text(self._source_file, self._get_type_insert_pos(), f": {text}", owner=self)
        return self

    def remove_type(self):
        annotation = self._get_type_annotation_ts_node()
        if annotation is not None:
            remove_text(self._source_file, annotation.start_byte, annotation.end_byte)
        return self

    def _get_type_insert_pos(self) -> int:
        """End of the name, past any `?` or `!` that follows it."""
        core = self.compiler_node
        name_child = self._get_name_child_ts_node()
        if name_child is None:
            return core.start_byte
        pos = name_child.end_byte
        seen = False
        for child in core.children:
            if child.start_byte == name_child.start_byte and child.type == name_child.type:
                seen = True
            elif seen:
                if child.type in ("?", "!"):
                    pos = child.end_byte
                else:
                    break
        return pos

    def _fill(self, structure):
        super()._fill(structure)
        if "type" in structure.model_fields_set:
            if structure.type is None:
                self.remove_type()
            else:
                self.set_type(structure.type)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        type_node = self.get_type_node()
        data["type"] = type_node.get_text() if type_node is not None else None


class ReturnTypedNode(Node):
    """
    A function-like declaration with an optional return type.
    """

    def _get_return_annotation_ts_node(self) -> Optional[TsNode]:
        return self.compiler_node.child_by_field_name("return_type")

    def get_return_type_node(self) -> Optional[Node]:
        return self._wrap(annotated_type(self._get_return_annotation_ts_node()))

    def get_return_type_node_or_throw(self) -> Node:
        type_node = self.get_return_type_node()
        if type_node is None:
            raise NotFoundError(f"Expected {type(self).__name__} to have a return type.")
        return type_node

    def has_return_type(self) -> bool:
        return self._get_return_annotation_ts_node() is not None

    def set_return_type(self, text: str):
        if not text or not text.strip():
            return self.remove_return_type()

        annotation = self._get_return_annotation_ts_node()
        if annotation is not None:
            type_node = self.get_return_type_node()
            if annotation.type == "type_annotation" and type_node is not None:
                if type_node.get_text() != text:
                    replace_node_text(type_node, text, keep_identity=False)
                return self
            self.remove_return_type()

        parameters = self.compiler_node.child_by_field_name("parameters")
        if parameters is None:
            raise NotFoundError(f"Could not find the parameters of {type(self).__name__}.")
        insert_text(self._source_file, parameters.end_byte, f": {text}", owner=self)
        return self

    def remove_return_type(self):
        annotation = self._get_return_annotation_ts_node()
        if annotation is not None:
            remove_text(self._source_file, annotation.start_byte, annotation.end_byte)
        return self

    def _fill(self, structure):
        super()._fill(structure)
        if "return_type" in structure.model_fields_set:
            if structure.return_type is None:
                self.remove_return_type()
            else:
                self.set_return_type(structure.return_type)

    def _collect_structure(self, data: dict):
        super()._collect_structure(data)
        annotation = self._get_return_annotation_ts_node()
        if annotation is None:
            data["return_type"] = None
        else:
            data["return_type"] = self.get_return_type_node().get_text()
