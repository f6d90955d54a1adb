"""Schema aggregate: construction from introspection results and navigation."""

import json
from collections import Counter
from collections.abc import Iterable
from typing import Optional

import pydantic

from . import log, transport, utils
from .errors import (
    DeserializationError,
    InvalidResponseError,
    MissingDataError,
    MissingSchemaError,
    NotImplementedSchemaError,
)
from .models import Directive, IntrospectionModel, Type


class Schema(IntrospectionModel):
    """Schema described by an introspection response."""

    query_type: Optional[Type] = None
    mutation_type: Optional[Type] = None
    subscription_type: Optional[Type] = None
    types: Optional[tuple[Type, ...]] = None
    directives: Optional[tuple[Directive, ...]] = None

    @classmethod
    def from_str(cls, text: str) -> "Schema":
        """
        Build a schema from the raw text of an introspection response.

        Args:
            text: JSON document of the form {"data": {"__schema": {...}}}

        Returns:
            Populated Schema

        Raises:
            InvalidResponseError: If text is not a JSON object
            MissingDataError: If the response has no "data" key
            MissingSchemaError: If "data" has no "__schema" key
            DeserializationError: If "__schema" does not match the model
        """
        try:
            payload = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise InvalidResponseError(str(e)) from e

        if not isinstance(payload, dict):
            raise InvalidResponseError("response format not an object")

        if "data" not in payload:
            raise MissingDataError()

        data = payload["data"]
        if not isinstance(data, dict) or "__schema" not in data:
            raise MissingSchemaError()

        try:
            schema = cls.model_validate(data["__schema"])
        except pydantic.ValidationError as e:
            raise DeserializationError(str(e)) from e

        log.debug("Parsed schema with %d types", len(schema.types or ()))
        return schema

    @classmethod
    def from_url(cls, url: str, headers: Iterable[str] = ()) -> "Schema":
        """Introspect a live endpoint; transport errors propagate unchanged."""
        return cls.from_str(transport.introspect(url, headers))

    @classmethod
    def from_json(cls, path: str) -> "Schema":
        """Load a saved introspection response; OSError propagates unchanged."""
        return cls.from_str(utils.read_text(path))

    @classmethod
    def from_schema(cls, path: str) -> "Schema":
        """SDL files are not supported."""
        raise NotImplementedSchemaError()

    def get_query_name(self) -> Optional[str]:
        return self._type_name(self.query_type)

    def get_mutation_name(self) -> Optional[str]:
        return self._type_name(self.mutation_type)

    def get_subscription_name(self) -> Optional[str]:
        return self._type_name(self.subscription_type)

    def get_type(self, name: str) -> Optional[Type]:
        """Return the first type named exactly `name`, or None."""
        for typ in self.types or ():
            if typ.name == name:
                return typ
        return None

    def get_types_of_kind(self, kind: str) -> tuple[Type, ...]:
        """Return every type of exactly `kind`, in schema order."""
        return tuple(typ for typ in self.types or () if typ.is_kind(kind))

    def get_directive(self, name: str) -> Optional[Directive]:
        for directive in self.directives or ():
            if directive.name == name:
                return directive
        return None

    def kind_counts(self) -> dict[str, int]:
        """Count types per kind, in order of first appearance."""
        counts = Counter(typ.kind for typ in self.types or () if typ.kind is not None)
        return dict(counts)

    @staticmethod
    def _type_name(typ: Optional[Type]) -> Optional[str]:
        return typ.name if typ is not None else None
