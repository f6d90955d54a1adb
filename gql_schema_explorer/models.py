"""Pydantic models for GraphQL introspection results."""

from typing import ClassVar, Optional, Protocol

import pydantic
from pydantic import BaseModel, ConfigDict, StrictBool
from pydantic.alias_generators import to_camel

from .utils import sanitize

# Number of ofType levels requested by the introspection query
TYPE_LEVELS = 7

SCALAR = "SCALAR"
OBJECT = "OBJECT"
INTERFACE = "INTERFACE"
UNION = "UNION"
ENUM = "ENUM"
INPUT_OBJECT = "INPUT_OBJECT"
LIST = "LIST"
NON_NULL = "NON_NULL"

KINDS = (SCALAR, OBJECT, INTERFACE, UNION, ENUM, INPUT_OBJECT, LIST, NON_NULL)


class TableItem(Protocol):
    """Anything that can be rendered as one row of a table."""

    table_headers: ClassVar[tuple[str, ...]]

    def table_fields(self) -> list[str]: ...


class IntrospectionModel(BaseModel):
    """Base model: immutable, camelCase keys, unknown keys ignored."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class TypeRef(IntrospectionModel):
    """Reference to a named type, possibly wrapped in LIST / NON_NULL."""

    name: Optional[str] = None
    kind: Optional[str] = None
    wrapped: Optional["TypeRef"] = pydantic.Field(None, alias="ofType")

    def is_required(self) -> bool:
        return self.kind == NON_NULL

    def is_list(self) -> bool:
        return self.kind == LIST

    def decorated_name(self, levels: int = TYPE_LEVELS) -> str:
        """
        Rebuild the compact type signature, e.g. ``[String!]!``.

        Each wrapper consumes one level of the budget. Once the budget
        is spent the remaining chain renders as an empty string, so chains
        longer than the introspection query can return are truncated.

        Args:
            levels: Remaining number of chain nodes to render

        Returns:
            Decorated type name, empty for an empty reference
        """
        if levels <= 0:
            return ""

        if self.name is not None:
            name = self.name
        elif self.wrapped is not None:
            name = self.wrapped.decorated_name(levels - 1)
        else:
            name = ""

        if self.is_required():
            name += "!"

        if self.is_list():
            name = f"[{name}]"

        return name


class Input(IntrospectionModel):
    """Argument or input object field."""

    table_headers: ClassVar[tuple[str, ...]] = ("Name", "Type", "Description", "Default")

    name: Optional[str] = None
    description: Optional[str] = None
    input_type: Optional[TypeRef] = pydantic.Field(None, alias="type")
    default_value: Optional[str] = None

    def table_fields(self) -> list[str]:
        type_name = self.input_type.decorated_name() if self.input_type is not None else ""
        return [
            sanitize(self.name),
            type_name,
            sanitize(self.description),
            sanitize(self.default_value),
        ]


class Field(IntrospectionModel):
    """Field of an object or interface type."""

    table_headers: ClassVar[tuple[str, ...]] = ("Name", "Type", "Description")

    name: Optional[str] = None
    description: Optional[str] = None
    args: Optional[tuple[Input, ...]] = None
    field_type: Optional[TypeRef] = pydantic.Field(None, alias="type")
    is_deprecated: Optional[StrictBool] = None
    deprecation_reason: Optional[str] = None

    def table_fields(self) -> list[str]:
        type_name = self.field_type.decorated_name() if self.field_type is not None else ""
        return [sanitize(self.name), type_name, sanitize(self.description)]


class Enum(IntrospectionModel):
    """A single value of an enum type."""

    table_headers: ClassVar[tuple[str, ...]] = ("Name", "Description", "Deprecated")

    name: Optional[str] = None
    description: Optional[str] = None
    is_deprecated: Optional[StrictBool] = None
    deprecation_reason: Optional[str] = None

    def table_fields(self) -> list[str]:
        # A reason without the deprecated flag is not shown
        deprecated = sanitize(self.deprecation_reason) if self.is_deprecated else "no"
        return [sanitize(self.name), sanitize(self.description), deprecated]


class Type(IntrospectionModel):
    """Named type declared by the schema."""

    name: Optional[str] = None
    kind: Optional[str] = None
    description: Optional[str] = None
    fields: Optional[tuple[Field, ...]] = None
    input_fields: Optional[tuple[Input, ...]] = None
    interfaces: Optional[tuple[TypeRef, ...]] = None
    enum_values: Optional[tuple[Enum, ...]] = None
    possible_types: Optional[tuple[TypeRef, ...]] = None

    def is_kind(self, kind: str) -> bool:
        return self.kind == kind

    def members(self) -> list[tuple[str, tuple[TableItem, ...]]]:
        """
        Row-projectable members grouped by section.

        Returns:
            List of (section title, items) for fields, input fields and
            enum values, in that order, skipping absent sections
        """
        sections = [
            ("Fields", self.fields),
            ("Input fields", self.input_fields),
            ("Enum values", self.enum_values),
        ]
        return [(title, items) for title, items in sections if items is not None]


class Directive(IntrospectionModel):
    """Directive declared by the schema."""

    name: Optional[str] = None
    description: Optional[str] = None
    locations: Optional[tuple[str, ...]] = None
    args: Optional[tuple[Input, ...]] = None
