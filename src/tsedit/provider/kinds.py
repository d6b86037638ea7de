"""
Syntax kinds of the tree-sitter TypeScript grammar used by tsedit.

Kinds are tree-sitter node type strings. SyntaxKind names the ones the
wrapper layer knows about; since it is a str enum its members compare equal
to the raw type strings.
"""

from enum import Enum


class SyntaxKind(str, Enum):
    SOURCE_FILE = "program"
    CLASS_DECLARATION = "class_declaration"
    ABSTRACT_CLASS_DECLARATION = "abstract_class_declaration"
    CLASS_EXPRESSION = "class"
    FUNCTION_DECLARATION = "function_declaration"
    GENERATOR_FUNCTION_DECLARATION = "generator_function_declaration"
    FUNCTION_EXPRESSION = "function_expression"
    PARAMETER = "required_parameter"
    OPTIONAL_PARAMETER = "optional_parameter"
    PROPERTY_DECLARATION = "public_field_definition"
    PROPERTY_SIGNATURE = "property_signature"
    METHOD_DECLARATION = "method_definition"
    INTERFACE_DECLARATION = "interface_declaration"
    ENUM_DECLARATION = "enum_declaration"
    TYPE_ALIAS_DECLARATION = "type_alias_declaration"
    LEXICAL_DECLARATION = "lexical_declaration"
    VARIABLE_STATEMENT = "variable_declaration"
    VARIABLE_DECLARATION = "variable_declarator"
    EXPORT_STATEMENT = "export_statement"
    EXPORT_CLAUSE = "export_clause"
    EXPORT_SPECIFIER = "export_specifier"
    AMBIENT_DECLARATION = "ambient_declaration"
    IMPORT_DECLARATION = "import_statement"
    IMPORT_ALIAS = "import_alias"
    CALL_EXPRESSION = "call_expression"
    PROPERTY_ACCESS_EXPRESSION = "member_expression"
    IDENTIFIER = "identifier"
    TYPE_IDENTIFIER = "type_identifier"
    PROPERTY_IDENTIFIER = "property_identifier"
    TYPE_ANNOTATION = "type_annotation"
    ACCESSIBILITY_MODIFIER = "accessibility_modifier"
    OVERRIDE_MODIFIER = "override_modifier"
    IMPORT_KEYWORD = "import"
    SUPER_KEYWORD = "super"
    COMMENT = "comment"
    ERROR = "ERROR"


class ModifierKind(str, Enum):
    """Closed set of keywords that can appear in a modifier list."""
    EXPORT = "export"
    DEFAULT = "default"
    DECLARE = "declare"
    ABSTRACT = "abstract"
    ASYNC = "async"
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    STATIC = "static"
    READONLY = "readonly"
    OVERRIDE = "override"
    ACCESSOR = "accessor"


class Scope(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


# Syntax nodes that only exist to attach `export`/`default`/`declare` to a
# declaration. They are hidden by the wrapper layer.
HIDDEN_WRAPPER_KINDS = frozenset({"export_statement", "ambient_declaration"})

CLASS_KINDS = frozenset({"class_declaration", "abstract_class_declaration", "class"})

FUNCTION_KINDS = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "function_signature",
})

# Expression forms of a class/function that still count as the declaration
# when they are the value of `export default`.
DEFAULT_EXPORTABLE_EXPRESSION_KINDS = frozenset({
    "class", "function_expression", "function", "generator_function",
})

# Declarations that can be top-level statements and so can carry
# export/default/declare through a wrapper node.
STATEMENT_DECLARATION_KINDS = frozenset({
    "class_declaration",
    "abstract_class_declaration",
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
    "interface_declaration",
    "enum_declaration",
    "type_alias_declaration",
    "lexical_declaration",
    "variable_declaration",
    "internal_module",
    "module",
}) | DEFAULT_EXPORTABLE_EXPRESSION_KINDS

# Kinds that may replace one another when a modifier is added or removed,
# e.g. `class` <-> `abstract class`.
KIND_FAMILIES = (
    CLASS_KINDS,
    FUNCTION_KINDS,
    frozenset({"method_definition", "abstract_method_signature", "method_signature"}),
    frozenset({"required_parameter", "optional_parameter"}),
    frozenset({"lexical_declaration", "variable_declaration"}),
)

# Anonymous keyword tokens that act as modifiers.
MODIFIER_TOKEN_KINDS = frozenset({
    "export", "default", "declare", "abstract", "async",
    "static", "readonly", "override", "accessor",
})

# Named nodes that wrap a single modifier keyword.
NAMED_MODIFIER_KINDS = frozenset({"accessibility_modifier", "override_modifier"})

# Parents in which a modifier keyword is used as something else.
NON_MODIFIER_PARENT_KINDS = frozenset({"switch_default", "export_specifier", "import_specifier"})

# Children that may precede modifiers without ending the modifier list.
MODIFIER_LIST_TRIVIA_KINDS = frozenset({"decorator", "comment"})


def kind_family(kind: str) -> frozenset:
    """Return the set of kinds interchangeable with `kind`."""
    for family in KIND_FAMILIES:
        if kind in family:
            return family
    return frozenset({kind})


def normalize_kind(kind) -> str:
    """Accept a SyntaxKind member or a raw type string."""
    if isinstance(kind, SyntaxKind):
        return kind.value
    return kind
