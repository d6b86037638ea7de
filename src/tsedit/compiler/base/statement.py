"""
Statement trait: removal of whole statements and list items.
"""

from tsedit.manipulation.config import TRAILING_WHITESPACE
from tsedit.manipulation.editor import remove_nodes, remove_text
from tsedit.manipulation.positions import extend_over, line_start_if_blank
from ..node import Node


class StatementNode(Node):
    """
    A statement (or class/interface member) that occupies its own line.

    remove() deletes the statement with its indentation, a separator token
    that directly follows it, trailing spaces and one line break.
    """

    def remove(self):
        remove_nodes([self])

    def _get_removal_range(self):
        buffer = self._get_buffer()
        outer = self._get_outer_node()
        end = outer.end_byte
        following = outer.next_sibling
        if following is not None and following.type in (";", ",") and following.start_byte == end:
            end = following.end_byte
        start = line_start_if_blank(buffer, outer.start_byte)
        end = extend_over(buffer, end, TRAILING_WHITESPACE["statement"], include_newline=True)
        return start, end


def remove_list_item(node: Node, siblings: list):
    """
    Remove one item of a comma separated list (declarators, specifiers,
    parameters) together with one adjacent comma.

    Args:
        node: The item to remove
        siblings: All items of the list, in source order
    """
    position = next(i for i, sibling in enumerate(siblings) if sibling is node)
    if position + 1 < len(siblings):
        start, end = node.get_start(), siblings[position + 1].get_start()
    elif position > 0:
        start, end = siblings[position - 1].get_end(), node.get_end()
    else:
        start, end = node.get_start(), node.get_end()
    remove_text(node.get_source_file(), start, end)
