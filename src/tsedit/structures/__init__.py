"""
Structures: declarative partial node state and the fill engine.
"""

from .models import (
    Structure,
    NamedNodeStructure,
    ExportableNodeStructure,
    AmbientableNodeStructure,
    AbstractableNodeStructure,
    AsyncableNodeStructure,
    StaticableNodeStructure,
    ReadonlyableNodeStructure,
    ScopedNodeStructure,
    TypedNodeStructure,
    ReturnTypedNodeStructure,
    InitializerExpressionableNodeStructure,
    ClassDeclarationStructure,
    FunctionDeclarationStructure,
    ParameterDeclarationStructure,
    PropertyDeclarationStructure,
    PropertySignatureStructure,
    MethodDeclarationStructure,
    InterfaceDeclarationStructure,
    EnumDeclarationStructure,
    TypeAliasDeclarationStructure,
    VariableStatementStructure,
    VariableDeclarationStructure,
)
from .fill import coerce_structure, fill_node, get_node_structure

__all__ = [
    "Structure",
    "NamedNodeStructure",
    "ExportableNodeStructure",
    "AmbientableNodeStructure",
    "AbstractableNodeStructure",
    "AsyncableNodeStructure",
    "StaticableNodeStructure",
    "ReadonlyableNodeStructure",
    "ScopedNodeStructure",
    "TypedNodeStructure",
    "ReturnTypedNodeStructure",
    "InitializerExpressionableNodeStructure",
    "ClassDeclarationStructure",
    "FunctionDeclarationStructure",
    "ParameterDeclarationStructure",
    "PropertyDeclarationStructure",
    "PropertySignatureStructure",
    "MethodDeclarationStructure",
    "InterfaceDeclarationStructure",
    "EnumDeclarationStructure",
    "TypeAliasDeclarationStructure",
    "VariableStatementStructure",
    "VariableDeclarationStructure",
    "coerce_structure",
    "fill_node",
    "get_node_structure",
]
