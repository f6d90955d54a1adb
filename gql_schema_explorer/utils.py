"""Utility functions for introspection loading and display."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from graphql import strip_ignored_characters

# Introspection query; TypeRef nests seven ofType levels
INTROSPECTION_QUERY = """query IntrospectionQuery {
  __schema {
    queryType {
      name
    }
    mutationType {
      name
    }
    subscriptionType {
      name
    }
    types {
      ...FullType
    }
    directives {
      name
      description
      locations
      args {
        ...InputValue
      }
    }
  }
}

fragment FullType on __Type {
  kind
  name
  description
  fields(includeDeprecated: true) {
    name
    description
    args {
      ...InputValue
    }
    type {
      ...TypeRef
    }
    isDeprecated
    deprecationReason
  }
  inputFields {
    ...InputValue
  }
  interfaces {
    ...TypeRef
  }
  enumValues(includeDeprecated: true) {
    name
    description
    isDeprecated
    deprecationReason
  }
  possibleTypes {
    ...TypeRef
  }
}

fragment InputValue on __InputValue {
  name
  description
  type {
    ...TypeRef
  }
  defaultValue
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
"""


def compact_query(query: str = INTROSPECTION_QUERY) -> str:
    """Strip whitespace, newlines and commas from a GraphQL document."""
    return strip_ignored_characters(query)


# File system utilities
def ensure_dir(path: str) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(path).mkdir(parents=True, exist_ok=True)


def exists(path: str) -> bool:
    """Check if file exists."""
    return Path(path).exists()


def dirname(path: str) -> str:
    """Get directory name from path."""
    return str(Path(path).parent)


def expand_path(path: str) -> str:
    """Expand ~ and environment variables in path."""
    return str(Path(os.path.expandvars(path)).expanduser())


# File I/O
def read_text(path: str) -> str:
    """Read UTF-8 text file."""
    return Path(path).read_text(encoding="utf-8")


def to_json(data: Any) -> str:
    """Convert data to JSON string."""
    return json.dumps(data, indent=2)


# Display helpers
def sanitize(text: Optional[str]) -> str:
    """
    Make an optional text attribute safe for a single table cell.

    Args:
        text: Text from the introspection response, possibly absent

    Returns:
        Empty string when absent, otherwise the stripped text with all
        newlines removed
    """
    if text is None:
        return ""
    return text.strip().replace("\n", "")
