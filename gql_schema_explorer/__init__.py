"""Typed, navigable model of GraphQL introspection responses."""

import logging

from rich.logging import RichHandler

__version__ = "0.1.0"

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)],
)

log = logging.getLogger("gql_schema_explorer")
