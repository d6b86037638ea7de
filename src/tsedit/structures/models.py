"""
Structure models: partial, declarative descriptions of node state.

Presence is tracked by pydantic (model_fields_set): a field that was not
given leaves the node as it is, a given field is authoritative. For
clearable fields (type, initializer, return_type, scope) an explicit None
clears the value.

Fields accept snake_case names or their camelCase aliases, so
{"isExported": True} and {"is_exported": True} are equivalent. Unknown
fields are rejected.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tsedit.provider.kinds import Scope


class Structure(BaseModel):
    """Base for all structures."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


# ---------------------------------------------------------------------- #
# Trait structures
# ---------------------------------------------------------------------- #

class NamedNodeStructure(Structure):
    name: Optional[str] = None


class ExportableNodeStructure(Structure):
    is_exported: Optional[bool] = None
    is_default_export: Optional[bool] = None


class AmbientableNodeStructure(Structure):
    has_declare_keyword: Optional[bool] = None


class AbstractableNodeStructure(Structure):
    is_abstract: Optional[bool] = None


class AsyncableNodeStructure(Structure):
    is_async: Optional[bool] = None


class StaticableNodeStructure(Structure):
    is_static: Optional[bool] = None


class ReadonlyableNodeStructure(Structure):
    is_readonly: Optional[bool] = None


class ScopedNodeStructure(Structure):
    scope: Optional[Scope] = None


class TypedNodeStructure(Structure):
    type: Optional[str] = None


class ReturnTypedNodeStructure(Structure):
    return_type: Optional[str] = None


class InitializerExpressionableNodeStructure(Structure):
    initializer: Optional[str] = None


# ---------------------------------------------------------------------- #
# Node structures
# ---------------------------------------------------------------------- #

class ClassDeclarationStructure(
    NamedNodeStructure,
    ExportableNodeStructure,
    AbstractableNodeStructure,
    AmbientableNodeStructure,
):
    pass


class FunctionDeclarationStructure(
    NamedNodeStructure,
    ExportableNodeStructure,
    ReturnTypedNodeStructure,
    AsyncableNodeStructure,
    AmbientableNodeStructure,
):
    pass


class ParameterDeclarationStructure(
    NamedNodeStructure,
    TypedNodeStructure,
    InitializerExpressionableNodeStructure,
    ScopedNodeStructure,
    ReadonlyableNodeStructure,
):
    pass


class PropertyDeclarationStructure(
    NamedNodeStructure,
    TypedNodeStructure,
    InitializerExpressionableNodeStructure,
    ScopedNodeStructure,
    StaticableNodeStructure,
    ReadonlyableNodeStructure,
    AbstractableNodeStructure,
):
    pass


class PropertySignatureStructure(
    NamedNodeStructure,
    TypedNodeStructure,
    ReadonlyableNodeStructure,
):
    pass


class MethodDeclarationStructure(
    NamedNodeStructure,
    ReturnTypedNodeStructure,
    ScopedNodeStructure,
    StaticableNodeStructure,
    AbstractableNodeStructure,
    AsyncableNodeStructure,
):
    pass


class InterfaceDeclarationStructure(
    NamedNodeStructure,
    ExportableNodeStructure,
    AmbientableNodeStructure,
):
    pass


class EnumDeclarationStructure(
    NamedNodeStructure,
    ExportableNodeStructure,
    AmbientableNodeStructure,
):
    pass


class TypeAliasDeclarationStructure(
    NamedNodeStructure,
    TypedNodeStructure,
    ExportableNodeStructure,
    AmbientableNodeStructure,
):
    pass


class VariableStatementStructure(ExportableNodeStructure, AmbientableNodeStructure):
    pass


class VariableDeclarationStructure(
    NamedNodeStructure,
    TypedNodeStructure,
    InitializerExpressionableNodeStructure,
):
    pass
