"""
SourceFile: the root node of a parsed file.

A SourceFile owns everything its nodes depend on: the UTF-8 text buffer,
the tree-sitter tree, the node arena and the edit ledger. All node handles
of the file resolve through it, and all edits go through the text edit
engine against it.

If an edit cannot be resynchronized the file is marked unusable and every
further access to it or its nodes raises InvalidNodeError.
"""

from typing import Any, Dict, List, Optional, Type

from tree_sitter import Node as TsNode

from tsedit.exceptions import InvalidNodeError, NotFoundError
from tsedit.logging_config import get_logger
from tsedit.manipulation.editor import insert_text, remove_nodes, remove_text, replace_text
from tsedit.manipulation.ledger import EditLedger, TextEdit
from tsedit.provider.config import language_for_path, validate_resolution_config
from tsedit.provider.parser import Diagnostic, TypeScriptProvider, get_provider
from tsedit.provider.symbols import Symbol, SymbolTable
from tsedit.provider.syntax import is_hidden_wrapper, unwrap_declaration
from .arena import NodeArena
from .base import ExportableNode
from .class_ import ClassDeclaration
from .enum import EnumDeclaration
from .exports import ExportAssignment, ExportDeclaration, ExportSpecifier
from .factory import get_wrapper_class
from .function import FunctionDeclaration
from .imports import ImportDeclaration
from .interface import InterfaceDeclaration
from .node import Node
from .type_alias import TypeAliasDeclaration
from .variable import VariableDeclaration, VariableStatement

logger = get_logger("compiler")


class SourceFile(Node):
    """
    A parsed TypeScript file.
    """

    def __init__(
        self,
        file_path: str,
        text: str = "",
        project: Optional[Any] = None,
        provider: Optional[TypeScriptProvider] = None,
        resolution_config: Optional[Dict[str, Any]] = None,
        manipulation_config: Optional[Dict[str, Any]] = None,
    ):
        """
        Parse text into a source file.

        Args:
            file_path: Path of the file; its extension selects the grammar
            text: Source text
            project: Owning Project, used to resolve imports between files
            provider: Parser provider, defaults to the shared provider
            resolution_config: Overrides for RESOLUTION_CONFIG
            manipulation_config: Overrides for MANIPULATION_CONFIG
        """
        self._file_path = file_path
        self._project = project
        self._provider = provider or get_provider()
        self._language = language_for_path(file_path)
        self._resolution_config = validate_resolution_config(resolution_config)
        self._manipulation_config = manipulation_config
        self._usable = True
        self._unusable_reason = ""

        self._buffer = text.encode("utf-8")
        result = self._provider.parse(self._buffer, self._language, file_path)
        self._tree = result.tree
        self._diagnostics: List[Diagnostic] = result.diagnostics

        self._arena = NodeArena()
        self._ledger = EditLedger(file_path, manipulation_config)

        index, generation = self._arena.reserve(self._tree.root_node, keyed=False)
        self._arena.attach(index, self)
        super().__init__(self, index, generation)

        logger.debug(f"Created source file {file_path} ({len(self._buffer)} bytes)")

    # ------------------------------------------------------------------ #
    # Internals used by nodes and the edit engine
    # ------------------------------------------------------------------ #

    def _ensure_usable(self):
        if not self._usable:
            raise InvalidNodeError(
                "SourceFile",
                f"{self._file_path} can no longer be used: {self._unusable_reason}",
            )

    def _mark_unusable(self, reason: str = "a manipulation could not be resynchronized"):
        self._usable = False
        self._unusable_reason = reason
        logger.warning(f"Source file {self._file_path} marked unusable: {reason}")

    def _get_or_create_node(self, ts_node: Optional[TsNode]) -> Optional[Node]:
        """Return the unique wrapper for a syntax node, creating it on first use."""
        if ts_node is None:
            return None
        if ts_node.parent is None:
            return self
        if is_hidden_wrapper(ts_node):
            ts_node = unwrap_declaration(ts_node)

        existing = self._arena.lookup(ts_node)
        if existing is not None:
            return existing

        wrapper_class = get_wrapper_class(ts_node)
        index, generation = self._arena.reserve(ts_node)
        wrapper = wrapper_class(self, index, generation)
        self._arena.attach(index, wrapper)
        return wrapper

    def _get_symbol_table(self) -> SymbolTable:
        self._ensure_usable()
        return SymbolTable.build(self)

    # ------------------------------------------------------------------ #
    # Node overrides
    # ------------------------------------------------------------------ #

    def is_source_file(self) -> bool:
        return True

    def get_source_file(self) -> "SourceFile":
        self._ensure_valid()
        return self

    def get_parent(self) -> Optional[Node]:
        self._ensure_valid()
        return None

    def get_pos(self) -> int:
        self._ensure_valid()
        return 0

    def get_start(self) -> int:
        return self.compiler_node.start_byte

    def get_end(self) -> int:
        return len(self._get_buffer())

    def get_full_text(self) -> str:
        return self._get_buffer().decode("utf-8")

    def get_symbol(self) -> Optional[Symbol]:
        self._ensure_valid()
        return None

    # ------------------------------------------------------------------ #
    # File facts
    # ------------------------------------------------------------------ #

    def get_file_path(self) -> str:
        return self._file_path

    def get_project(self):
        return self._project

    def get_language(self) -> str:
        return self._language

    def get_resolution_config(self) -> Dict[str, Any]:
        return dict(self._resolution_config)

    def is_declaration_file(self) -> bool:
        return self._file_path.endswith(".d.ts")

    def get_diagnostics(self) -> List[Diagnostic]:
        """Syntax diagnostics of the current text."""
        self._ensure_usable()
        return list(self._diagnostics)

    def get_edit_history(self) -> List[TextEdit]:
        """Edits applied to this file, oldest first."""
        return self._ledger.get_edits()

    def get_ledger(self) -> EditLedger:
        return self._ledger

    # ------------------------------------------------------------------ #
    # Statements
    # ------------------------------------------------------------------ #

    def get_statements(self) -> List[Node]:
        root = self.compiler_node
        return self._wrap_all(c for c in root.named_children if c.type != "comment")

    def _get_statements_of_type(self, node_class: Type[Node]) -> List[Any]:
        return [s for s in self.get_statements() if isinstance(s, node_class)]

    def _find_named(self, node_class: Type[Node], name: str) -> Optional[Any]:
        for statement in self._get_statements_of_type(node_class):
            if statement.get_name() == name:
                return statement
        return None

    def _find_named_or_throw(self, node_class: Type[Node], name: str) -> Any:
        found = self._find_named(node_class, name)
        if found is None:
            raise NotFoundError(f"Expected to find a {node_class.__name__} named '{name}' in {self._file_path}.")
        return found

    def get_classes(self) -> List[ClassDeclaration]:
        return self._get_statements_of_type(ClassDeclaration)

    def get_class(self, name: str) -> Optional[ClassDeclaration]:
        return self._find_named(ClassDeclaration, name)

    def get_class_or_throw(self, name: str) -> ClassDeclaration:
        return self._find_named_or_throw(ClassDeclaration, name)

    def get_functions(self) -> List[FunctionDeclaration]:
        return self._get_statements_of_type(FunctionDeclaration)

    def get_function(self, name: str) -> Optional[FunctionDeclaration]:
        return self._find_named(FunctionDeclaration, name)

    def get_function_or_throw(self, name: str) -> FunctionDeclaration:
        return self._find_named_or_throw(FunctionDeclaration, name)

    def get_interfaces(self) -> List[InterfaceDeclaration]:
        return self._get_statements_of_type(InterfaceDeclaration)

    def get_interface(self, name: str) -> Optional[InterfaceDeclaration]:
        return self._find_named(InterfaceDeclaration, name)

    def get_interface_or_throw(self, name: str) -> InterfaceDeclaration:
        return self._find_named_or_throw(InterfaceDeclaration, name)

    def get_enums(self) -> List[EnumDeclaration]:
        return self._get_statements_of_type(EnumDeclaration)

    def get_enum(self, name: str) -> Optional[EnumDeclaration]:
        return self._find_named(EnumDeclaration, name)

    def get_enum_or_throw(self, name: str) -> EnumDeclaration:
        return self._find_named_or_throw(EnumDeclaration, name)

    def get_type_aliases(self) -> List[TypeAliasDeclaration]:
        return self._get_statements_of_type(TypeAliasDeclaration)

    def get_type_alias(self, name: str) -> Optional[TypeAliasDeclaration]:
        return self._find_named(TypeAliasDeclaration, name)

    def get_type_alias_or_throw(self, name: str) -> TypeAliasDeclaration:
        return self._find_named_or_throw(TypeAliasDeclaration, name)

    def get_variable_statements(self) -> List[VariableStatement]:
        return self._get_statements_of_type(VariableStatement)

    def get_variable_declaration(self, name: str) -> Optional[VariableDeclaration]:
        for statement in self.get_variable_statements():
            declaration = statement.get_declaration(name)
            if declaration is not None:
                return declaration
        return None

    def get_variable_declaration_or_throw(self, name: str) -> VariableDeclaration:
        declaration = self.get_variable_declaration(name)
        if declaration is None:
            raise NotFoundError(f"Expected to find a variable named '{name}' in {self._file_path}.")
        return declaration

    def get_export_assignments(self) -> List[ExportAssignment]:
        return self._get_statements_of_type(ExportAssignment)

    def get_export_declarations(self) -> List[ExportDeclaration]:
        return self._get_statements_of_type(ExportDeclaration)

    def get_import_declarations(self) -> List[ImportDeclaration]:
        return self._get_statements_of_type(ImportDeclaration)

    # ------------------------------------------------------------------ #
    # Default export
    # ------------------------------------------------------------------ #

    def get_default_export_symbol(self) -> Optional[Symbol]:
        return self._get_symbol_table().default_export

    def get_default_export_symbol_or_throw(self) -> Symbol:
        symbol = self.get_default_export_symbol()
        if symbol is None:
            raise NotFoundError(f"Expected to find a default export in {self._file_path}.")
        return symbol

    def get_exported_symbols(self) -> List[Symbol]:
        return list(self._get_symbol_table().exports.values())

    def remove_default_export(self, default_export_symbol: Optional[Symbol] = None):
        """
        Remove the file's default export.

        An export assignment (`export default x;`) is removed as a statement,
        an `x as default` specifier is removed from its export declaration,
        and a declaration loses its `export` and `default` keywords.

        Args:
            default_export_symbol: The symbol to remove, defaults to the
                file's current default export symbol
        """
        symbol = default_export_symbol or self.get_default_export_symbol()
        if symbol is None:
            return self

        keywords = []
        for declaration in symbol.get_declarations():
            if isinstance(declaration, (ExportAssignment, ExportSpecifier)):
                declaration.remove()
            elif isinstance(declaration, ExportableNode) and declaration.has_default_keyword():
                keywords.extend([declaration.get_export_keyword(), declaration.get_default_keyword()])
        remove_nodes(keywords)
        return self

    # ------------------------------------------------------------------ #
    # Text edits
    # ------------------------------------------------------------------ #

    def insert_text(self, pos: int, text: str):
        """Insert text at a byte offset."""
        insert_text(self, pos, text)
        return self

    def remove_text(self, start: int, end: int):
        remove_text(self, start, end)
        return self

    def replace_text(self, start: int, end: int, text: str):
        replace_text(self, start, end, text)
        return self

    def replace_with_text(self, text: str):
        """Replace the whole file. Every node except the file itself is invalidated."""
        return self.replace_text(0, len(self._get_buffer()), text)

    def __repr__(self):
        return f"<SourceFile {self._file_path}>"
