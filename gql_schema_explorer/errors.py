"""Errors raised while constructing a schema."""


class SchemaError(Exception):
    """Base class for schema construction failures."""


class InvalidResponseError(SchemaError):
    """Response text is not valid JSON or not a JSON object."""


class MissingDataError(SchemaError):
    """Response object has no `data` key."""

    def __init__(self, message: str = "data not in response"):
        super().__init__(message)


class MissingSchemaError(SchemaError):
    """Response `data` has no `__schema` key."""

    def __init__(self, message: str = "schema not in response"):
        super().__init__(message)


class DeserializationError(SchemaError):
    """`__schema` payload does not match the schema model."""


class NotImplementedSchemaError(SchemaError, NotImplementedError):
    """Construction path that is not available yet."""

    def __init__(self, message: str = "not yet implemented"):
        super().__init__(message)
