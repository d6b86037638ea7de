"""
Manipulation package: text edits synchronized with the syntax tree.

All node mutations are expressed as byte-range changes and go through
TextEditEngine, which keeps buffer, tree and node handles consistent.
"""

from .editor import (
    TextChange,
    TextEditEngine,
    insert_text,
    remove_nodes,
    remove_text,
    replace_node_text,
    replace_text,
)
from .ledger import EditLedger, TextEdit
from .config import MANIPULATION_CONFIG, TRAILING_WHITESPACE

__all__ = [
    # Engine
    "TextChange",
    "TextEditEngine",
    "insert_text",
    "remove_nodes",
    "remove_text",
    "replace_node_text",
    "replace_text",

    # Ledger
    "EditLedger",
    "TextEdit",

    # Configuration
    "MANIPULATION_CONFIG",
    "TRAILING_WHITESPACE",
]
