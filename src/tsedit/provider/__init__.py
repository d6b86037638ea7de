"""
This facade exposes the public API for the syntax tree provider.

tree-sitter does the parsing; this package adds diagnostics, the
grammar-level kind vocabulary and file-level symbol resolution.
"""
from .config import PROVIDER_CONFIG, RESOLUTION_CONFIG, SUPPORTED_LANGUAGES, language_for_path
from .kinds import ModifierKind, Scope, SyntaxKind
from .parser import Diagnostic, ParseResult, TypeScriptProvider, get_provider
from .symbols import AliasTarget, Symbol, SymbolTable

__all__ = [
    "PROVIDER_CONFIG",
    "RESOLUTION_CONFIG",
    "SUPPORTED_LANGUAGES",
    "language_for_path",
    "SyntaxKind",
    "ModifierKind",
    "Scope",
    "Diagnostic",
    "ParseResult",
    "TypeScriptProvider",
    "get_provider",
    "AliasTarget",
    "Symbol",
    "SymbolTable",
]
