"""
Compiler package: node wrappers over the tree-sitter tree.

Node handles are created lazily by SourceFile and composed from the
capability traits in tsedit.compiler.base.
"""

from .node import Node
from .arena import NodeArena
from .modifier import Modifier
from .expressions import CallExpression, Expression, Identifier, PropertyAccessExpression, TypeNode
from .class_ import ClassDeclaration, MethodDeclaration, PropertyDeclaration
from .function import FunctionDeclaration, ParameterDeclaration
from .interface import InterfaceDeclaration, PropertySignature
from .enum import EnumDeclaration
from .type_alias import TypeAliasDeclaration
from .variable import VariableDeclaration, VariableStatement
from .exports import ExportAssignment, ExportDeclaration, ExportSpecifier
from .imports import ImportDeclaration
from .factory import get_wrapper_class
from .source_file import SourceFile

__all__ = [
    "Node",
    "NodeArena",
    "Modifier",
    "Expression",
    "TypeNode",
    "Identifier",
    "CallExpression",
    "PropertyAccessExpression",
    "ClassDeclaration",
    "MethodDeclaration",
    "PropertyDeclaration",
    "FunctionDeclaration",
    "ParameterDeclaration",
    "InterfaceDeclaration",
    "PropertySignature",
    "EnumDeclaration",
    "TypeAliasDeclaration",
    "VariableStatement",
    "VariableDeclaration",
    "ExportAssignment",
    "ExportDeclaration",
    "ExportSpecifier",
    "ImportDeclaration",
    "get_wrapper_class",
    "SourceFile",
]
