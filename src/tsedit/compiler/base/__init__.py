"""
Capability traits mixed into concrete node types.

Each trait adds one facet of behavior (modifiers, export state, names,
types, ...). A concrete node type lists exactly the traits its syntax kind
supports; fill() and get_structure() visit them from the most basic to the
most derived.
"""

from .modifierable import ModifierableNode, ADD_AFTER, to_modifier_kind
from .exportable import ExportableNode, ExportGetableNode
from .ambientable import AmbientableNode
from .abstractable import AbstractableNode
from .asyncable import AsyncableNode
from .staticable import StaticableNode
from .readonlyable import ReadonlyableNode
from .scoped import ScopedNode, ScopeableNode
from .named import BindingNamedNode, DeclarationNamedNode, NamedNode, PropertyNamedNode
from .typed import ReturnTypedNode, TypedNode
from .initializer import InitializerExpressionableNode
from .expressioned import ExpressionedNode
from .statement import StatementNode, remove_list_item

__all__ = [
    "ModifierableNode",
    "ADD_AFTER",
    "to_modifier_kind",
    "ExportableNode",
    "ExportGetableNode",
    "AmbientableNode",
    "AbstractableNode",
    "AsyncableNode",
    "StaticableNode",
    "ReadonlyableNode",
    "ScopedNode",
    "ScopeableNode",
    "NamedNode",
    "DeclarationNamedNode",
    "BindingNamedNode",
    "PropertyNamedNode",
    "TypedNode",
    "ReturnTypedNode",
    "InitializerExpressionableNode",
    "ExpressionedNode",
    "StatementNode",
    "remove_list_item",
]
