"""Schema loading from the available sources."""

from collections.abc import Iterable
from typing import Optional

from . import log
from .schema import Schema


def load_schema(
    url: Optional[str] = None,
    schema_file: Optional[str] = None,
    headers: Iterable[str] = (),
    sdl_file: Optional[str] = None,
) -> Schema:
    """
    Load a GraphQL schema from a saved response, an SDL file or via introspection.

    Args:
        url: GraphQL endpoint URL
        schema_file: Path to a saved introspection response (JSON)
        headers: Extra "Name: Value" headers sent with the introspection request
        sdl_file: Path to an SDL schema file (not supported yet)

    Returns:
        Parsed Schema

    Raises:
        ValueError: If no source is provided
    """
    if schema_file:
        log.debug("Loading schema from %s", schema_file)
        return Schema.from_json(schema_file)

    if sdl_file:
        return Schema.from_schema(sdl_file)

    if not url:
        raise ValueError("No URL or schema file provided")

    log.debug("Introspecting schema at %s", url)
    return Schema.from_url(url, headers)
