"""
Symbols and export resolution for a source file.

The symbol table is rebuilt from the live tree on every query, so it always
reflects the current text. Symbols keep wrapper handles (not raw syntax
nodes) for their declarations, so they stay usable across edits.

Equality follows declaration identity: two symbols are equal when they
denote the same file-level binding, the same alias declaration, or the same
nested declaration.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from tree_sitter import Node as TsNode

from tsedit.logging_config import get_logger
from .config import validate_resolution_config
from .kinds import STATEMENT_DECLARATION_KINDS
from .syntax import (
    declaration_of,
    first_named_child_of_kind,
    has_child_of_kind,
    node_text,
    string_literal_value,
    unwrap_declaration,
)

logger = get_logger("symbols")


@dataclass(frozen=True)
class AliasTarget:
    """Where an alias points: a local name, or an export of another module."""
    name: str
    module_specifier: Optional[str] = None


class Symbol:
    """
    A named binding of a source file.

    Alias symbols (imports, `export default x;`, `export { x as y }`,
    `import x = y;`) carry an AliasTarget and resolve lazily.
    """

    def __init__(
        self,
        source_file: Any,
        name: str,
        key: Tuple,
        declarations: List[Any],
        alias_target: Optional[AliasTarget] = None,
    ):
        self._source_file = source_file
        self._name = name
        self._key = key
        self._declarations = declarations
        self._alias_target = alias_target

    def get_name(self) -> str:
        return self._name

    def get_declarations(self) -> List[Any]:
        return list(self._declarations)

    def get_source_file(self):
        return self._source_file

    def is_alias(self) -> bool:
        return self._alias_target is not None

    def get_alias_target(self) -> Optional[AliasTarget]:
        return self._alias_target

    def get_immediate_aliased_symbol(self) -> Optional["Symbol"]:
        """Resolve exactly one level of alias indirection."""
        target = self._alias_target
        if target is None:
            return None

        if target.module_specifier is None:
            return SymbolTable.build(self._source_file).get_local(target.name)

        project = self._source_file.get_project()
        if project is None:
            return None
        module = project.resolve_module_specifier(self._source_file, target.module_specifier)
        if module is None:
            logger.debug(
                f"Could not resolve module '{target.module_specifier}' "
                f"from {self._source_file.get_file_path()}"
            )
            return None

        table = SymbolTable.build(module)
        if target.name == "default":
            return table.default_export
        if target.name == "*":
            return None
        return table.get_export(target.name)

    def get_aliased_symbol(self) -> Optional["Symbol"]:
        """
        Resolve alias indirection.

        With alias_resolution "transitive" (the default) aliases are followed
        until a non-alias symbol, an unresolvable target, a cycle or
        max_alias_depth. With "single" only one level is followed.

        Returns:
            The resolved symbol, or None if this symbol is not an alias or
            its first hop cannot be resolved.
        """
        if not self.is_alias():
            return None

        config = validate_resolution_config(self._source_file.get_resolution_config())
        current = self.get_immediate_aliased_symbol()
        if config["alias_resolution"] == "single":
            return current

        seen = {self}
        depth = 1
        while current is not None and current.is_alias():
            if current in seen:
                logger.warning(f"Alias cycle detected while resolving '{self._name}'")
                break
            if depth >= config["max_alias_depth"]:
                logger.warning(
                    f"Stopped resolving '{self._name}' after {config['max_alias_depth']} aliases"
                )
                break
            seen.add(current)
            next_symbol = current.get_immediate_aliased_symbol()
            if next_symbol is None:
                break
            current = next_symbol
            depth += 1
        return current

    def equals(self, other: Optional["Symbol"]) -> bool:
        return isinstance(other, Symbol) and self._key == other._key

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        alias = " (alias)" if self.is_alias() else ""
        return f"<Symbol {self._name}{alias}>"


class SymbolTable:
    """
    File-level bindings of one source file.

    Attributes:
        locals: Top-level declarations and import bindings by name
        exports: Named exports by exported name
        default_export: The file's default export symbol, if any
    """

    def __init__(self, source_file: Any):
        self.source_file = source_file
        self.locals: Dict[str, Symbol] = {}
        self.exports: Dict[str, Symbol] = {}
        self.default_export: Optional[Symbol] = None
        self._by_declaration: Dict[Any, Symbol] = {}
        self._file_key = id(source_file)

    @classmethod
    def build(cls, source_file: Any) -> "SymbolTable":
        table = cls(source_file)
        table._collect()
        return table

    def get_local(self, name: str) -> Optional[Symbol]:
        return self.locals.get(name)

    def get_export(self, name: str) -> Optional[Symbol]:
        return self.exports.get(name)

    def symbol_of(self, node: Any) -> Optional[Symbol]:
        """
        Return the symbol a wrapper node declares or refers to.

        Nested declarations (members, parameters) get a symbol keyed on the
        node itself. Identifiers resolve to the declaration they name, or to
        the file-level binding with the same text.
        """
        symbol = self._by_declaration.get(node)
        if symbol is not None:
            return symbol
        if node.is_source_file():
            return None

        if node.get_kind() in ("identifier", "type_identifier", "property_identifier"):
            parent = node.get_parent()
            get_name_node = getattr(parent, "get_name_node", None)
            if parent is not None and callable(get_name_node) and get_name_node() is node:
                return self.symbol_of(parent)
            return self.locals.get(node.get_text())

        get_name = getattr(node, "get_name", None)
        if callable(get_name):
            name = get_name()
            if name:
                return Symbol(self.source_file, name, ("declaration", id(node)), [node])
        return None

    # ------------------------------------------------------------------ #
    # Collection
    # ------------------------------------------------------------------ #

    def _collect(self):
        root = self.source_file.compiler_node
        self._source = self.source_file.get_full_text().encode("utf-8")
        for statement in root.named_children:
            self._visit_statement(statement)

    def _wrap(self, node: TsNode):
        return self.source_file._get_or_create_node(node)

    def _text(self, node: TsNode) -> str:
        return node_text(node, self._source)

    def _add_local(self, name: str, declaration: TsNode, alias_target: Optional[AliasTarget] = None) -> Symbol:
        wrapper = self._wrap(declaration)
        symbol = self.locals.get(name)
        if symbol is None:
            symbol = Symbol(self.source_file, name, ("local", self._file_key, name), [wrapper], alias_target)
            self.locals[name] = symbol
        else:
            # declaration merging (overloads, interface + class, ...)
            symbol._declarations.append(wrapper)
        self._by_declaration[wrapper] = symbol
        return symbol

    def _set_default(self, symbol: Symbol):
        if self.default_export is None:
            self.default_export = symbol
        self.exports.setdefault("default", symbol)

    def _visit_statement(self, statement: TsNode):
        kind = statement.type
        if kind == "export_statement":
            self._visit_export(statement)
        elif kind == "ambient_declaration":
            declaration = declaration_of(statement)
            if declaration is not None:
                self._visit_declaration(declaration, exported=False)
        elif kind == "import_statement":
            self._visit_import(statement)
        elif kind == "import_alias":
            self._visit_import_alias(statement)
        elif kind in STATEMENT_DECLARATION_KINDS:
            self._visit_declaration(statement, exported=False)
        elif kind == "expression_statement":
            # top-level `namespace N {}` parses as an expression statement
            module = first_named_child_of_kind(statement, "internal_module")
            if module is not None:
                self._visit_declaration(module, exported=False)

    def _visit_declaration(self, declaration: TsNode, exported: bool) -> List[Symbol]:
        declaration = unwrap_declaration(declaration)
        symbols: List[Symbol] = []

        if declaration.type in ("lexical_declaration", "variable_declaration"):
            for declarator in declaration.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                if name_node is not None and name_node.type == "identifier":
                    symbols.append(self._add_local(self._text(name_node), declarator))
        else:
            name_node = declaration.child_by_field_name("name")
            if name_node is not None:
                symbols.append(self._add_local(self._text(name_node), declaration))

        if exported:
            for symbol in symbols:
                self.exports[symbol.get_name()] = symbol
        return symbols

    def _visit_export(self, statement: TsNode):
        is_default = has_child_of_kind(statement, "default")
        declaration = declaration_of(statement)

        if declaration is not None:
            symbols = self._visit_declaration(declaration, exported=not is_default)
            if not is_default:
                return
            if symbols:
                self._set_default(symbols[0])
            else:
                # anonymous `export default class {}` / `function () {}`
                wrapper = self._wrap(declaration)
                symbol = Symbol(self.source_file, "default", ("default", self._file_key), [wrapper])
                self._by_declaration[wrapper] = symbol
                self._set_default(symbol)
            return

        if is_default:
            value = statement.child_by_field_name("value")
            target = None
            if value is not None and value.type == "identifier":
                target = AliasTarget(name=self._text(value))
            wrapper = self._wrap(statement)
            symbol = Symbol(self.source_file, "default", ("default", self._file_key), [wrapper], target)
            self._by_declaration[wrapper] = symbol
            self._set_default(symbol)
            return

        clause = first_named_child_of_kind(statement, "export_clause")
        if clause is None:
            return
        module = string_literal_value(statement.child_by_field_name("source"), self._source)
        for specifier in clause.named_children:
            if specifier.type != "export_specifier":
                continue
            name_node = specifier.child_by_field_name("name")
            if name_node is None:
                continue
            local_name = self._text(name_node)
            alias_node = specifier.child_by_field_name("alias")
            exported_name = self._text(alias_node) if alias_node is not None else local_name
            wrapper = self._wrap(specifier)
            symbol = Symbol(
                self.source_file, exported_name, ("export", self._file_key, exported_name),
                [wrapper], AliasTarget(name=local_name, module_specifier=module),
            )
            self._by_declaration[wrapper] = symbol
            if exported_name == "default":
                self._set_default(symbol)
            else:
                self.exports[exported_name] = symbol

    def _visit_import(self, statement: TsNode):
        module = string_literal_value(statement.child_by_field_name("source"), self._source)
        clause = first_named_child_of_kind(statement, "import_clause")
        if clause is None or module is None:
            return

        for child in clause.named_children:
            if child.type == "identifier":
                self._add_local(self._text(child), child, AliasTarget("default", module))
            elif child.type == "namespace_import":
                identifier = first_named_child_of_kind(child, "identifier")
                if identifier is not None:
                    self._add_local(self._text(identifier), child, AliasTarget("*", module))
            elif child.type == "named_imports":
                for specifier in child.named_children:
                    if specifier.type != "import_specifier":
                        continue
                    name_node = specifier.child_by_field_name("name")
                    if name_node is None:
                        continue
                    alias_node = specifier.child_by_field_name("alias")
                    local_name = self._text(alias_node if alias_node is not None else name_node)
                    self._add_local(local_name, specifier, AliasTarget(self._text(name_node), module))

    def _visit_import_alias(self, statement: TsNode):
        # import Local = Target;
        identifiers = [c for c in statement.named_children if c.type in ("identifier", "nested_identifier")]
        if len(identifiers) < 2:
            return
        local, target = identifiers[0], identifiers[1]
        self._add_local(self._text(local), statement, AliasTarget(name=self._text(target)))
