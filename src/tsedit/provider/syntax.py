"""
Helpers over raw tree-sitter nodes.

tree-sitter attaches `export`, `default` and `declare` to wrapper nodes
(export_statement, ambient_declaration) around a declaration. These helpers
translate between that shape and the declaration-centric view used by the
wrapper layer, where those keywords are modifiers of the declaration.
"""

from typing import List, Optional

from tree_sitter import Node

from .kinds import (
    DEFAULT_EXPORTABLE_EXPRESSION_KINDS,
    HIDDEN_WRAPPER_KINDS,
    MODIFIER_LIST_TRIVIA_KINDS,
    MODIFIER_TOKEN_KINDS,
    NAMED_MODIFIER_KINDS,
    NON_MODIFIER_PARENT_KINDS,
    STATEMENT_DECLARATION_KINDS,
)


def same_node(a: Optional[Node], b: Optional[Node]) -> bool:
    """Compare nodes by range and kind, which is stable across Node copies."""
    if a is None or b is None:
        return False
    return a.start_byte == b.start_byte and a.end_byte == b.end_byte and a.type == b.type


def has_child_of_kind(node: Node, kind: str) -> bool:
    return any(child.type == kind for child in node.children)


def first_named_child_of_kind(node: Node, kind: str) -> Optional[Node]:
    for child in node.named_children:
        if child.type == kind:
            return child
    return None


def declaration_of(node: Node) -> Optional[Node]:
    """
    Return the declaration wrapped by an export_statement or
    ambient_declaration, or None if the node wraps no declaration.
    """
    if node.type == "export_statement":
        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            return declaration
        value = node.child_by_field_name("value")
        if (
            value is not None
            and value.type in DEFAULT_EXPORTABLE_EXPRESSION_KINDS
            and has_child_of_kind(node, "default")
        ):
            return value
        return None

    if node.type == "ambient_declaration":
        for child in node.named_children:
            if child.type in STATEMENT_DECLARATION_KINDS or child.type in HIDDEN_WRAPPER_KINDS:
                return child
        return None

    return None


def is_hidden_wrapper(node: Node) -> bool:
    return node.type in HIDDEN_WRAPPER_KINDS and declaration_of(node) is not None


def unwrap_declaration(node: Node) -> Node:
    """Descend through hidden wrappers to the declaration they carry."""
    while node.type in HIDDEN_WRAPPER_KINDS:
        declaration = declaration_of(node)
        if declaration is None:
            break
        node = declaration
    return node


def outer_chain(core: Node) -> List[Node]:
    """
    Return the hidden wrappers around `core`, outermost first, followed by
    `core` itself.
    """
    chain = [core]
    node = core
    while node.parent is not None and is_hidden_wrapper(node.parent):
        if not same_node(declaration_of(node.parent), node):
            break
        node = node.parent
        chain.insert(0, node)
    return chain


def outer_node(core: Node) -> Node:
    return outer_chain(core)[0]


def is_modifier_token(node: Node) -> bool:
    if node.type in NAMED_MODIFIER_KINDS:
        return True
    if node.type not in MODIFIER_TOKEN_KINDS or node.is_named:
        return False
    # `default:` of a switch, `x as default` of an export or import
    return node.parent is None or node.parent.type not in NON_MODIFIER_PARENT_KINDS


def modifier_tokens(core: Node) -> List[Node]:
    """
    Collect the modifier tokens of a declaration in source order.

    Tokens held by hidden wrappers (export, default, declare) come first,
    then the declaration's own leading keywords. Scanning the declaration
    stops at its first named child that is not a modifier or decorator.
    """
    tokens: List[Node] = []
    chain = outer_chain(core)
    for wrapper, inner in zip(chain, chain[1:]):
        for child in wrapper.children:
            if same_node(child, inner):
                break
            if is_modifier_token(child):
                tokens.append(child)

    for child in core.children:
        if is_modifier_token(child):
            tokens.append(child)
        elif child.is_named and child.type not in MODIFIER_LIST_TRIVIA_KINDS:
            break
    return tokens


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8")


def modifier_text(node: Node, source: bytes) -> str:
    """Keyword text of a modifier token (`public` for accessibility_modifier)."""
    if node.is_named:
        return node_text(node, source).strip()
    return node.type


def string_literal_value(node: Optional[Node], source: bytes) -> Optional[str]:
    """Unquote a string literal node."""
    if node is None:
        return None
    text = node_text(node, source)
    if len(text) >= 2 and text[0] in "'\"`" and text[-1] == text[0]:
        return text[1:-1]
    return text


def first_token_start(node: Node) -> int:
    """Start of the first child that is not a decorator or comment."""
    for child in node.children:
        if child.type not in MODIFIER_LIST_TRIVIA_KINDS:
            return child.start_byte
    return node.start_byte


def find_node_by_range(root: Node, start: int, end: int, kinds: frozenset) -> Optional[Node]:
    """
    Find the outermost node spanning exactly [start, end) whose kind is in
    `kinds`, descending only through nodes that contain the range.
    """
    node: Optional[Node] = root
    while node is not None:
        if node.start_byte == start and node.end_byte == end and node.type in kinds:
            return node
        next_node = None
        for child in node.children:
            if child.start_byte <= start and end <= child.end_byte:
                if child.start_byte == child.end_byte and start != end:
                    continue
                next_node = child
                break
        node = next_node
    return None
