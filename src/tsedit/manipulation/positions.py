"""
Position arithmetic for text edits.

All offsets are UTF-8 byte offsets, matching tree-sitter.
"""

from typing import List, Optional, Tuple


def point_at(source: bytes, offset: int) -> Tuple[int, int]:
    """Return the (row, column) tree-sitter point of a byte offset."""
    row = source.count(b"\n", 0, offset)
    line_start = source.rfind(b"\n", 0, offset) + 1
    return row, offset - line_start


def merge_ranges(ranges: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Union overlapping or touching ranges, sorted by start."""
    merged: List[Tuple[int, int]] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def shift_range(
    node_start: int,
    node_end: int,
    start: int,
    end: int,
    new_length: int,
    grow: bool = False,
    retain: bool = False,
) -> Optional[Tuple[int, int]]:
    """
    Compute a node's range after [start, end) is replaced by new_length bytes.

    Args:
        node_start, node_end: The node's range before the edit
        start, end: The replaced range
        new_length: Length of the inserted text
        grow: The node owns an insertion at its boundary and expands over it
        retain: The node is exactly the replaced range and takes the new text

    Returns:
        The new range, or None if the node was fully removed.
    """
    delta = new_length - (end - start)

    if retain and node_start == start and node_end == end:
        return start, start + new_length

    if end > start and start <= node_start and node_end <= end:
        if node_start < node_end or start < node_start < end:
            return None

    if start == end:
        if grow and node_start <= start <= node_end:
            return node_start, node_end + delta
        if node_start >= start:
            return node_start + delta, node_end + delta
        if node_end > start:
            return node_start, node_end + delta
        return node_start, node_end

    if node_start >= end:
        return node_start + delta, node_end + delta
    if node_end <= start:
        return node_start, node_end

    # partial overlap or containment
    new_start = node_start if node_start < start else start
    new_end = node_end + delta if node_end >= end else start + new_length
    return new_start, new_end


def extend_over(source: bytes, offset: int, chars: bytes, include_newline: bool = False) -> int:
    """
    Advance offset over any of `chars`, then optionally over one line break.
    """
    length = len(source)
    while offset < length and source[offset] in chars:
        offset += 1
    if include_newline:
        if source.startswith(b"\r\n", offset):
            offset += 2
        elif offset < length and source[offset] == 0x0A:
            offset += 1
    return offset


def retreat_over(source: bytes, offset: int, chars: bytes) -> int:
    """Move offset back over any of `chars`."""
    while offset > 0 and source[offset - 1] in chars:
        offset -= 1
    return offset


def line_start_if_blank(source: bytes, offset: int) -> int:
    """
    Return the start of offset's line if only spaces or tabs precede it on
    that line, otherwise offset unchanged.
    """
    start = retreat_over(source, offset, b" \t")
    if start == 0 or source[start - 1] == 0x0A:
        return start
    return offset
