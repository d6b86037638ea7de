"""
Node: stateful handle over a tree-sitter node.

A handle is an (arena index, generation) pair owned by its SourceFile. It
caches nothing but that pair: every structural fact (text, range, parent,
children) is read from the live tree on each call. When the text range
behind a handle is removed, the arena bumps the slot's generation and the
handle fails with InvalidNodeError from then on.

Hidden wrappers (export_statement / ambient_declaration around a
declaration) never get handles. Their keyword tokens show up as leading
children and modifiers of the declaration, and the declaration's start is
the wrapper's start.
"""

from typing import Any, Iterator, List, Optional

from tree_sitter import Node as TsNode

from tsedit.exceptions import InvalidNodeError, NotFoundError
from tsedit.provider.kinds import normalize_kind
from tsedit.provider.symbols import SymbolTable
from tsedit.provider.syntax import (
    is_hidden_wrapper,
    outer_chain,
    outer_node,
    same_node,
    unwrap_declaration,
)
from tsedit.structures.fill import fill_node, get_node_structure


def visible_children(core: TsNode) -> List[TsNode]:
    """
    Children of a node as the wrapper layer presents them.

    Tokens of the hidden wrappers around `core` (e.g. `export`, `default`)
    are spliced around the node's own children, and hidden wrapper children
    are replaced by the declarations they carry.
    """
    before: List[TsNode] = []
    after: List[TsNode] = []
    if core.parent is not None:
        chain = outer_chain(core)
        for wrapper, inner in zip(chain, chain[1:]):
            seen = False
            trailing = []
            for child in wrapper.children:
                if same_node(child, inner):
                    seen = True
                elif seen:
                    trailing.append(child)
                else:
                    before.append(child)
            after = trailing + after

    children = []
    for child in before + list(core.children) + after:
        children.append(unwrap_declaration(child) if is_hidden_wrapper(child) else child)
    return children


def iter_visible_descendants(core: TsNode) -> Iterator[TsNode]:
    """Depth-first, pre-order walk over visible_children()."""
    stack = list(reversed(visible_children(core)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(visible_children(node)))


class Node:
    """
    Base wrapper for every syntax node.

    Concrete node types add behavior by mixing in capability traits from
    tsedit.compiler.base. Traits contribute to fill() and get_structure()
    through cooperative _fill / _collect_structure overrides, applied from
    the most basic trait to the most derived.
    """

    # pydantic model accepted by fill(); None means the node cannot be filled
    _structure_class = None

    def __init__(self, source_file: Any, index: int, generation: int):
        self._source_file = source_file
        self._index = index
        self._generation = generation

    # ------------------------------------------------------------------ #
    # Validity
    # ------------------------------------------------------------------ #

    def is_valid(self) -> bool:
        """False once the node was removed or its file became unusable."""
        sf = self._source_file
        return sf._usable and sf._arena.is_current(self._index, self._generation)

    def _ensure_valid(self):
        sf = self._source_file
        if not sf._arena.is_current(self._index, self._generation):
            raise InvalidNodeError(type(self).__name__)
        sf._ensure_usable()

    @property
    def compiler_node(self) -> TsNode:
        """The tree-sitter node this handle is currently bound to."""
        self._ensure_valid()
        return self._source_file._arena.get_ts_node(self._index)

    def _get_outer_node(self) -> TsNode:
        return outer_node(self.compiler_node)

    def _get_range(self):
        node = self.compiler_node
        return node.start_byte, node.end_byte

    def _get_removal_range(self):
        outer = self._get_outer_node()
        return outer.start_byte, outer.end_byte

    def _get_buffer(self) -> bytes:
        self._ensure_valid()
        return self._source_file._buffer

    def _wrap(self, ts_node: Optional[TsNode]):
        if ts_node is None:
            return None
        return self._source_file._get_or_create_node(ts_node)

    def _wrap_all(self, ts_nodes) -> List["Node"]:
        return [self._wrap(node) for node in ts_nodes]

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def get_source_file(self):
        self._ensure_valid()
        return self._source_file

    def is_source_file(self) -> bool:
        return False

    def get_parent(self) -> Optional["Node"]:
        parent = self._get_outer_node().parent
        if parent is None:
            return None
        if is_hidden_wrapper(parent):
            parent = unwrap_declaration(parent)
        return self._wrap(parent)

    def get_parent_or_throw(self) -> "Node":
        parent = self.get_parent()
        if parent is None:
            raise NotFoundError(f"Expected to find a parent for {self.get_kind()}.")
        return parent

    def get_ancestors(self) -> List["Node"]:
        ancestors = []
        parent = self.get_parent()
        while parent is not None:
            ancestors.append(parent)
            parent = parent.get_parent()
        return ancestors

    def get_first_ancestor_by_kind(self, kind) -> Optional["Node"]:
        kind = normalize_kind(kind)
        for ancestor in self.get_ancestors():
            if ancestor.get_kind() == kind:
                return ancestor
        return None

    def get_children(self) -> List["Node"]:
        return self._wrap_all(visible_children(self.compiler_node))

    def get_child_count(self) -> int:
        return len(visible_children(self.compiler_node))

    def get_first_child_by_kind(self, kind) -> Optional["Node"]:
        kind = normalize_kind(kind)
        for child in visible_children(self.compiler_node):
            if child.type == kind:
                return self._wrap(child)
        return None

    def get_first_child_by_kind_or_throw(self, kind) -> "Node":
        child = self.get_first_child_by_kind(kind)
        if child is None:
            raise NotFoundError(f"A child of kind {normalize_kind(kind)} was expected.")
        return child

    def get_children_of_kind(self, kind) -> List["Node"]:
        kind = normalize_kind(kind)
        return self._wrap_all(c for c in visible_children(self.compiler_node) if c.type == kind)

    def _get_siblings(self) -> List["Node"]:
        parent = self.get_parent()
        if parent is None:
            return [self]
        return parent.get_children()

    def get_previous_sibling(self) -> Optional["Node"]:
        siblings = self._get_siblings()
        position = next(i for i, sibling in enumerate(siblings) if sibling is self)
        return siblings[position - 1] if position > 0 else None

    def get_next_sibling(self) -> Optional["Node"]:
        siblings = self._get_siblings()
        position = next(i for i, sibling in enumerate(siblings) if sibling is self)
        return siblings[position + 1] if position + 1 < len(siblings) else None

    def get_descendants(self) -> List["Node"]:
        return self._wrap_all(iter_visible_descendants(self.compiler_node))

    def get_first_descendant_by_kind(self, kind) -> Optional["Node"]:
        kind = normalize_kind(kind)
        for node in iter_visible_descendants(self.compiler_node):
            if node.type == kind:
                return self._wrap(node)
        return None

    def get_first_descendant_by_kind_or_throw(self, kind) -> "Node":
        descendant = self.get_first_descendant_by_kind(kind)
        if descendant is None:
            raise NotFoundError(f"A descendant of kind {normalize_kind(kind)} was expected.")
        return descendant

    def get_descendants_of_kind(self, kind) -> List["Node"]:
        kind = normalize_kind(kind)
        return self._wrap_all(n for n in iter_visible_descendants(self.compiler_node) if n.type == kind)

    # ------------------------------------------------------------------ #
    # Text and positions (UTF-8 byte offsets)
    # ------------------------------------------------------------------ #

    def get_kind(self) -> str:
        return self.compiler_node.type

    def get_start(self) -> int:
        """Start of the node, including its export/default/declare keywords."""
        return self._get_outer_node().start_byte

    def get_end(self) -> int:
        return self._get_outer_node().end_byte

    def get_pos(self) -> int:
        """
        Start of the node's leading trivia: the end of the previous
        non-comment sibling, or the start of the parent.
        """
        outer = self._get_outer_node()
        sibling = outer.prev_sibling
        while sibling is not None and sibling.type == "comment":
            sibling = sibling.prev_sibling
        if sibling is not None:
            return sibling.end_byte
        parent = outer.parent
        if parent is None or parent.parent is None:
            return 0
        return parent.start_byte

    def get_width(self) -> int:
        return self.get_end() - self.get_start()

    def get_text(self) -> str:
        return self._get_buffer()[self.get_start():self.get_end()].decode("utf-8")

    def get_full_text(self) -> str:
        return self._get_buffer()[self.get_pos():self.get_end()].decode("utf-8")

    def get_start_line_number(self) -> int:
        return self._get_outer_node().start_point[0] + 1

    def get_end_line_number(self) -> int:
        return self._get_outer_node().end_point[0] + 1

    # ------------------------------------------------------------------ #
    # Symbols
    # ------------------------------------------------------------------ #

    def get_symbol(self):
        return SymbolTable.build(self.get_source_file()).symbol_of(self)

    def get_symbol_or_throw(self):
        symbol = self.get_symbol()
        if symbol is None:
            raise NotFoundError(f"Could not find the symbol of {self.get_kind()}.")
        return symbol

    # ------------------------------------------------------------------ #
    # Structures
    # ------------------------------------------------------------------ #

    def fill(self, structure) -> "Node":
        """Apply a partial structure (model or dict) to this node."""
        return fill_node(self, structure)

    def get_structure(self):
        """Describe the node's current state as its structure model."""
        return get_node_structure(self)

    def _fill(self, structure):
        pass

    def _collect_structure(self, data: dict):
        pass

    def __repr__(self):
        if not self.is_valid():
            return f"<{type(self).__name__} (invalidated)>"
        return f"<{type(self).__name__} {self.get_kind()} [{self.get_start()}:{self.get_end()}]>"
