"""
tsedit: trait-composed, text-synchronized editing of TypeScript syntax trees.

Parse TypeScript with tree-sitter, query declarations through small
capability traits (exportable, modifierable, named, typed, ...), and mutate
them with every edit kept consistent across the text, the tree and the
node handles.
"""

__version__ = "0.1.0"

from tsedit.exceptions import (
    ArgumentError,
    ConfigError,
    InvalidNodeError,
    InvalidOperationError,
    ManipulationError,
    NotFoundError,
    ParserError,
    TsEditError,
)
from tsedit.provider import ModifierKind, Scope, Symbol, SyntaxKind
from tsedit.compiler import (
    CallExpression,
    ClassDeclaration,
    EnumDeclaration,
    ExportAssignment,
    ExportDeclaration,
    ExportSpecifier,
    Expression,
    FunctionDeclaration,
    Identifier,
    ImportDeclaration,
    InterfaceDeclaration,
    MethodDeclaration,
    Modifier,
    Node,
    ParameterDeclaration,
    PropertyAccessExpression,
    PropertyDeclaration,
    PropertySignature,
    SourceFile,
    TypeAliasDeclaration,
    TypeNode,
    VariableDeclaration,
    VariableStatement,
)
from tsedit.manipulation import remove_nodes
from tsedit.project import Project

__all__ = [
    "__version__",
    "ArgumentError",
    "ConfigError",
    "InvalidNodeError",
    "InvalidOperationError",
    "ManipulationError",
    "NotFoundError",
    "ParserError",
    "TsEditError",
    "ModifierKind",
    "Scope",
    "Symbol",
    "SyntaxKind",
    "CallExpression",
    "ClassDeclaration",
    "EnumDeclaration",
    "ExportAssignment",
    "ExportDeclaration",
    "ExportSpecifier",
    "Expression",
    "FunctionDeclaration",
    "Identifier",
    "ImportDeclaration",
    "InterfaceDeclaration",
    "MethodDeclaration",
    "Modifier",
    "Node",
    "ParameterDeclaration",
    "PropertyAccessExpression",
    "PropertyDeclaration",
    "PropertySignature",
    "SourceFile",
    "TypeAliasDeclaration",
    "TypeNode",
    "VariableDeclaration",
    "VariableStatement",
    "remove_nodes",
    "Project",
]
