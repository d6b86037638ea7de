"""
NodeArena: slot storage behind node handles.

Each wrapper is an (index, generation) pair into the arena. A slot records
the tree-sitter node it is currently bound to, the byte range and kind it
had at the last sync, and a weak reference to the wrapper. Invalidating a
slot bumps its generation so any handle still holding the old generation
fails fast, and the slot goes on a free list for reuse.

Slots are released as soon as the last reference to their wrapper goes
away, so an edit only has to shift and rebind the handles callers still
hold. The root slot keeps its wrapper (the SourceFile) alive.

Lookup by (start, end, kind) guarantees that wrapping the same syntax node
twice returns the same wrapper object while that object is alive.
"""

import weakref
from typing import Any, Dict, List, Optional, Set, Tuple

from tree_sitter import Node as TsNode

NodeKey = Tuple[int, int, str]


def node_key(ts_node: TsNode) -> NodeKey:
    return ts_node.start_byte, ts_node.end_byte, ts_node.type


class NodeArena:
    """
    Generation-checked slots for node wrappers of one source file.
    """

    def __init__(self):
        self._generations: List[int] = []
        self._live: List[bool] = []
        self._ts_nodes: List[Optional[TsNode]] = []
        self._ranges: List[Tuple[int, int]] = []
        self._kinds: List[str] = []
        self._wrappers: List[Optional[weakref.ref]] = []
        self._free: List[int] = []
        self._unkeyed: Set[int] = set()
        self._pinned: Dict[int, Any] = {}
        self._by_key: Dict[NodeKey, int] = {}

    def reserve(self, ts_node: TsNode, keyed: bool = True) -> Tuple[int, int]:
        """
        Take a slot for a syntax node.

        Args:
            ts_node: The node to bind
            keyed: Register the slot for lookup(). The root slot is not keyed.

        Returns:
            (index, generation) of the slot
        """
        if self._free:
            index = self._free.pop()
            self._live[index] = True
            self._ts_nodes[index] = ts_node
            self._ranges[index] = (ts_node.start_byte, ts_node.end_byte)
            self._kinds[index] = ts_node.type
            self._wrappers[index] = None
        else:
            index = len(self._generations)
            self._generations.append(0)
            self._live.append(True)
            self._ts_nodes.append(ts_node)
            self._ranges.append((ts_node.start_byte, ts_node.end_byte))
            self._kinds.append(ts_node.type)
            self._wrappers.append(None)

        if keyed:
            self._by_key[node_key(ts_node)] = index
        else:
            self._unkeyed.add(index)
        return index, self._generations[index]

    def attach(self, index: int, wrapper: Any):
        """
        Store the wrapper of a slot.

        Unkeyed slots keep the wrapper alive. Keyed slots hold it weakly and
        are invalidated when it is garbage collected.
        """
        if index in self._unkeyed:
            self._pinned[index] = wrapper
            self._wrappers[index] = weakref.ref(wrapper)
            return

        generation = self._generations[index]
        arena_ref = weakref.ref(self)

        def release(_ref):
            arena = arena_ref()
            # the slot may already have been invalidated and reused
            if arena is not None and arena.is_current(index, generation):
                arena.invalidate(index)

        self._wrappers[index] = weakref.ref(wrapper, release)

    def lookup(self, ts_node: TsNode) -> Optional[Any]:
        """Return the live wrapper bound to a syntax node, if any."""
        index = self._by_key.get(node_key(ts_node))
        if index is None or not self._live[index]:
            return None
        ref = self._wrappers[index]
        return ref() if ref is not None else None

    def is_current(self, index: int, generation: int) -> bool:
        return self._live[index] and self._generations[index] == generation

    def is_live(self, index: int) -> bool:
        return self._live[index]

    def live_indices(self) -> List[int]:
        return [index for index, live in enumerate(self._live) if live]

    def get_ts_node(self, index: int) -> TsNode:
        return self._ts_nodes[index]

    def get_range(self, index: int) -> Tuple[int, int]:
        return self._ranges[index]

    def set_range(self, index: int, start: int, end: int):
        self._ranges[index] = (start, end)

    def get_kind(self, index: int) -> str:
        return self._kinds[index]

    def bind(self, index: int, ts_node: TsNode, start: int, end: int):
        """Point a slot at its node in a freshly parsed tree."""
        self._ts_nodes[index] = ts_node
        self._ranges[index] = (start, end)
        self._kinds[index] = ts_node.type

    def invalidate(self, index: int):
        """Retire a slot. Handles holding the previous generation become invalid."""
        if not self._live[index]:
            return
        ts_node = self._ts_nodes[index]
        if ts_node is not None and self._by_key.get(node_key(ts_node)) == index:
            del self._by_key[node_key(ts_node)]
        self._generations[index] += 1
        self._live[index] = False
        self._ts_nodes[index] = None
        self._wrappers[index] = None
        self._pinned.pop(index, None)
        self._unkeyed.discard(index)
        self._free.append(index)

    def reindex(self):
        """Rebuild the lookup table after slots were rebound."""
        self._by_key = {
            node_key(self._ts_nodes[index]): index
            for index in self.live_indices()
            if index not in self._unkeyed
        }

    def __len__(self):
        return sum(1 for live in self._live if live)
