"""
TextEditEngine: Apply byte-range edits to a source file and resynchronize.

Every manipulation in tsedit ends up here. One call to apply():
1. Rewrites the byte buffer (edits applied last-to-first)
2. Shifts the recorded range of every live node handle
3. Invalidates handles whose range was fully removed
4. Edits the tree-sitter tree and reparses incrementally
5. Rebinds each surviving handle to its new syntax node
6. Records the edits in the file's ledger

If a surviving handle cannot be found in the new tree the source file is
marked unusable and ManipulationError is raised. There is no rollback.
"""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel

from tsedit.exceptions import ArgumentError, ManipulationError
from tsedit.logging_config import get_logger
from tsedit.provider.kinds import kind_family
from tsedit.provider.syntax import find_node_by_range
from .config import MANIPULATION_CONFIG
from .positions import merge_ranges, point_at, shift_range

logger = get_logger("manipulation")


class TextChange(BaseModel):
    """Replace [start, end) with new_text. Offsets are UTF-8 bytes."""
    start: int
    end: int
    new_text: str = ""


class TextEditEngine:
    """
    Apply text changes to one source file.
    """

    def __init__(self, source_file: Any, config: Optional[dict] = None):
        """
        Initialize the engine for a source file.

        Args:
            source_file: The SourceFile whose buffer and tree are edited
            config: Optional config overrides (merges with MANIPULATION_CONFIG)
        """
        self.source_file = source_file
        self.config = {**MANIPULATION_CONFIG, **(config or {})}

    def apply(
        self,
        changes: List[TextChange],
        operation: str,
        grow: Optional[Any] = None,
        retain: Optional[Any] = None,
    ) -> None:
        """
        Apply non-overlapping changes and resynchronize the tree.

        Args:
            changes: Changes expressed in offsets of the current text
            operation: Ledger label ("insert", "remove", "replace")
            grow: Node that owns an insertion at its boundary and expands over it
            retain: Node whose exact range is replaced and which keeps its identity
        """
        sf = self.source_file
        sf._ensure_usable()
        if not changes:
            return

        changes = sorted(changes, key=lambda c: c.start, reverse=True)
        self._check_changes(changes, len(sf._buffer))

        arena = sf._arena
        growing = self._owner_chain(arena, grow) if grow is not None else frozenset()
        retain_index = retain._index if retain is not None else None
        errors_before = len(sf._diagnostics)

        buffer = sf._buffer
        tree = sf._tree
        invalidated = 0

        for change in changes:
            new_bytes = change.new_text.encode("utf-8")
            start, end = change.start, change.end
            new_end = start + len(new_bytes)
            old_text = buffer[start:end].decode("utf-8", errors="replace")

            start_point = point_at(buffer, start)
            old_end_point = point_at(buffer, end)
            buffer = buffer[:start] + new_bytes + buffer[end:]

            tree.edit(
                start_byte=start,
                old_end_byte=end,
                new_end_byte=new_end,
                start_point=start_point,
                old_end_point=old_end_point,
                new_end_point=point_at(buffer, new_end),
            )

            invalidated += self._update_handles(arena, start, end, len(new_bytes), growing, retain_index)
            sf._ledger.record_edit(operation, start, end, old_text, change.new_text)

        sf._buffer = buffer
        result = sf._provider.reparse(tree, buffer, sf._language, sf.get_file_path())
        sf._tree = result.tree
        sf._diagnostics = result.diagnostics

        logger.debug(
            f"Applied {len(changes)} {operation} edit(s) to {sf.get_file_path()}, "
            f"invalidated {invalidated} node(s)"
        )

        if self.config["warn_on_syntax_regression"] and len(result.diagnostics) > errors_before:
            logger.warning(
                f"Edit introduced syntax errors in {sf.get_file_path()}: "
                f"{result.diagnostics[0].message}"
            )

        self._rebind(arena)

    def _check_changes(self, changes: List[TextChange], length: int):
        previous_start = None
        for change in changes:
            if change.start < 0 or change.end > length or change.start > change.end:
                raise ArgumentError(
                    "changes", f"Range [{change.start}:{change.end}] is outside the text (length {length})"
                )
            if previous_start is not None and change.end > previous_start:
                raise ArgumentError("changes", "Text changes must not overlap")
            previous_start = change.start

    def _owner_chain(self, arena, owner) -> frozenset:
        """Slots of the owner and its syntax ancestors. Descendants sharing the owner's span are excluded."""
        keys = set()
        node = owner.compiler_node
        while node is not None:
            keys.add((node.start_byte, node.end_byte, node.type))
            node = node.parent
        chain = set()
        for index in arena.live_indices():
            ts_node = arena.get_ts_node(index)
            if (ts_node.start_byte, ts_node.end_byte, ts_node.type) in keys:
                chain.add(index)
        return frozenset(chain)

    def _update_handles(self, arena, start, end, new_length, growing, retain_index) -> int:
        root_index = self.source_file._index

        invalidated = 0
        for index in arena.live_indices():
            if index == root_index:
                continue
            node_start, node_end = arena.get_range(index)
            new_range = shift_range(
                node_start, node_end, start, end, new_length,
                grow=(index in growing), retain=(index == retain_index),
            )
            if new_range is None:
                arena.invalidate(index)
                invalidated += 1
            else:
                arena.set_range(index, *new_range)
        return invalidated

    def _rebind(self, arena):
        sf = self.source_file
        root = sf._tree.root_node
        failed = []

        for index in arena.live_indices():
            if index == sf._index:
                arena.bind(index, root, 0, len(sf._buffer))
                continue
            start, end = arena.get_range(index)
            node = find_node_by_range(root, start, end, kind_family(arena.get_kind(index)))
            if node is None:
                failed.append((arena.get_kind(index), start, end))
            else:
                arena.bind(index, node, start, end)

        arena.reindex()

        if failed:
            sf._mark_unusable()
            details = ", ".join(f"{kind} [{start}:{end}]" for kind, start, end in failed[:5])
            logger.error(f"Failed to resynchronize {sf.get_file_path()}: {details}")
            raise ManipulationError(
                sf.get_file_path(),
                f"Could not find {len(failed)} node(s) in the reparsed tree: {details}",
                new_text=sf._buffer.decode("utf-8", errors="replace"),
            )


def _engine(source_file: Any) -> TextEditEngine:
    return TextEditEngine(source_file, source_file._manipulation_config)


def _single_source_file(nodes: List[Any]):
    source_file = nodes[0].get_source_file()
    for node in nodes[1:]:
        if node.get_source_file() is not source_file:
            raise ArgumentError("nodes", "All nodes must belong to the same source file")
    return source_file


def remove_nodes(nodes: Iterable[Any]) -> None:
    """
    Remove nodes from their source file.

    The union of the nodes' removal ranges is deleted in one resync. Removed
    nodes (and everything inside them) become invalid.
    """
    nodes = [node for node in nodes if node is not None]
    if not nodes:
        return
    source_file = _single_source_file(nodes)
    ranges = merge_ranges([node._get_removal_range() for node in nodes])
    changes = [TextChange(start=start, end=end) for start, end in ranges]
    _engine(source_file).apply(changes, "remove")


def insert_text(source_file: Any, pos: int, text: str, owner: Optional[Any] = None) -> None:
    """
    Insert text at a byte offset.

    Args:
        owner: Node the inserted text belongs to. If it starts or ends at
            `pos`, it and its ancestors expand over the insertion. Its
            descendants shift as usual.
    """
    _engine(source_file).apply([TextChange(start=pos, end=pos, new_text=text)], "insert", grow=owner)


def replace_text(source_file: Any, start: int, end: int, text: str) -> None:
    """Replace a byte range. Nodes inside the range are invalidated."""
    _engine(source_file).apply([TextChange(start=start, end=end, new_text=text)], "replace")


def remove_text(source_file: Any, start: int, end: int) -> None:
    _engine(source_file).apply([TextChange(start=start, end=end)], "remove")


def replace_node_text(node: Any, text: str, keep_identity: bool = True) -> None:
    """
    Replace the text of a node.

    With keep_identity the node handle survives and spans the new text,
    otherwise it is invalidated like any removed node.
    """
    start, end = node._get_range()
    source_file = node.get_source_file()
    _engine(source_file).apply(
        [TextChange(start=start, end=end, new_text=text)],
        "replace",
        retain=node if keep_identity else None,
    )
