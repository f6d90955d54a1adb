"""HTTP transport for introspection queries."""

from collections.abc import Iterable

import requests

from . import log, utils


def parse_headers(headers: Iterable[str]) -> dict[str, str]:
    """
    Parse "Name: Value" header strings.

    Strings that do not split into exactly two parts on ":" are skipped.

    Args:
        headers: Header strings, e.g. from the command line

    Returns:
        Dict of header name -> value
    """
    out = {}
    for header in headers:
        parts = header.split(":")
        if len(parts) != 2:
            log.debug("Skipping malformed header %r", header)
            continue
        name, value = parts[0].strip(), parts[1].strip()
        out[name] = value
    return out


def introspect(graphql_url: str, headers: Iterable[str] = ()) -> str:
    """
    Run the introspection query against a GraphQL endpoint.

    Args:
        graphql_url: GraphQL endpoint URL
        headers: Extra "Name: Value" headers, e.g. for authentication

    Returns:
        Raw response body

    Raises:
        requests.RequestException: If the request fails or returns an HTTP error
    """
    request_headers = parse_headers(headers)
    request_headers["Content-Type"] = "application/json"

    log.debug("Posting introspection query to %s", graphql_url)
    resp = requests.post(
        graphql_url,
        json={"query": utils.compact_query()},
        headers=request_headers,
    )
    resp.raise_for_status()

    return resp.text
