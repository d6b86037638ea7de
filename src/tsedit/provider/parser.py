"""
TypeScriptProvider: tree-sitter backed parsing for TypeScript sources.

Produces the syntax tree consumed by the node wrapper layer, plus syntax
diagnostics (ERROR and MISSING nodes). Reparsing after an edit reuses the
edited tree so tree-sitter only reparses the changed region.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from tree_sitter import Language, Node, Parser, Tree
import tree_sitter_typescript as tstypescript

from tsedit.exceptions import ParserError
from tsedit.logging_config import get_logger
from .config import PROVIDER_CONFIG, validate_language

logger = get_logger("provider")


class Diagnostic(BaseModel):
    """
    A syntax problem reported by the parser.
    """
    message: str
    start_byte: int
    end_byte: int
    line: int  # 1-indexed
    column: int  # 1-indexed
    kind: str  # "error" or "missing"


@dataclass
class ParseResult:
    """Tree plus the diagnostics found in it."""
    tree: Tree
    diagnostics: List[Diagnostic] = field(default_factory=list)


class TypeScriptProvider:
    """
    Parse TypeScript text into tree-sitter trees.

    One parser per grammar is created up front and reused for every file.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the provider with optional config.

        Args:
            config: Optional config overrides (merges with PROVIDER_CONFIG)
        """
        self.config = {**PROVIDER_CONFIG, **(config or {})}
        self.parsers: Dict[str, Parser] = {}
        self._init_parsers()

    def _init_parsers(self):
        """Initialize tree-sitter parsers for the typescript and tsx grammars."""
        try:
            ts_parser = Parser()
            ts_parser.language = Language(tstypescript.language_typescript())
            self.parsers["typescript"] = ts_parser

            tsx_parser = Parser()
            tsx_parser.language = Language(tstypescript.language_tsx())
            self.parsers["tsx"] = tsx_parser
        except Exception as e:
            logger.error(f"Failed to initialize parsers: {e}")
            raise ParserError("<grammar>", str(e)) from e

        logger.debug(f"TypeScriptProvider initialized parsers: {list(self.parsers.keys())}")

    def _get_parser(self, language: Optional[str]) -> Parser:
        language = validate_language(language or self.config["default_language"])
        return self.parsers[language]

    def parse(
        self,
        source: Union[str, bytes],
        language: Optional[str] = None,
        file_path: str = "<memory>"
    ) -> ParseResult:
        """
        Parse source text from scratch.

        Args:
            source: Source text (str is encoded as UTF-8)
            language: Grammar name, defaults to config["default_language"]
            file_path: Used for error messages only

        Returns:
            ParseResult with the tree and its diagnostics
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        parser = self._get_parser(language)
        try:
            tree = parser.parse(source)
        except Exception as e:
            raise ParserError(file_path, str(e)) from e

        diagnostics = self.collect_diagnostics(tree) if self.config["collect_diagnostics"] else []
        if diagnostics:
            logger.debug(f"Parsed {file_path} with {len(diagnostics)} syntax diagnostic(s)")
        return ParseResult(tree=tree, diagnostics=diagnostics)

    def reparse(
        self,
        old_tree: Tree,
        source: bytes,
        language: Optional[str] = None,
        file_path: str = "<memory>"
    ) -> ParseResult:
        """
        Reparse after the old tree was edited with Tree.edit().

        Falls back to a full parse when incremental reparsing is disabled.
        """
        if not self.config["incremental_reparse"]:
            return self.parse(source, language, file_path)

        parser = self._get_parser(language)
        try:
            tree = parser.parse(source, old_tree)
        except Exception as e:
            raise ParserError(file_path, str(e)) from e

        diagnostics = self.collect_diagnostics(tree) if self.config["collect_diagnostics"] else []
        return ParseResult(tree=tree, diagnostics=diagnostics)

    def collect_diagnostics(self, tree: Tree) -> List[Diagnostic]:
        """
        Find all ERROR and MISSING nodes in a tree.

        Only subtrees flagged with has_error are visited.
        """
        diagnostics: List[Diagnostic] = []
        if not tree.root_node.has_error:
            return diagnostics

        stack: List[Node] = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type == "ERROR":
                diagnostics.append(self._make_diagnostic(node, "error", "Unexpected syntax"))
            elif node.is_missing:
                diagnostics.append(self._make_diagnostic(node, "missing", f"Missing '{node.type}'"))
            if node.has_error:
                stack.extend(reversed(node.children))

        diagnostics.sort(key=lambda d: d.start_byte)
        return diagnostics

    def _make_diagnostic(self, node: Node, kind: str, message: str) -> Diagnostic:
        line = node.start_point[0] + 1
        column = node.start_point[1] + 1
        return Diagnostic(
            message=f"{message} at line {line}, column {column}",
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            line=line,
            column=column,
            kind=kind,
        )


_default_provider: Optional[TypeScriptProvider] = None


def get_provider() -> TypeScriptProvider:
    """Return the shared provider, creating it on first use."""
    global _default_provider
    if _default_provider is None:
        _default_provider = TypeScriptProvider()
    return _default_provider
