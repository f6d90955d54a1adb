import json
from pathlib import Path
from typing import Any

import pytest

from gql_schema_explorer.schema import Schema

DATA_DIR = Path(__file__).parent / "data"
INTROSPECTION_FILE = DATA_DIR / "introspection.json"


def response(schema: Any) -> str:
    """Wrap a __schema payload in the introspection response envelope."""
    return json.dumps({"data": {"__schema": schema}})


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("GQL_SCHEMA_CONFIG", str(path))
    return path


@pytest.fixture
def introspection_path() -> Path:
    assert INTROSPECTION_FILE.exists(), f"Missing test file: {INTROSPECTION_FILE}"
    return INTROSPECTION_FILE


@pytest.fixture
def introspection_text(introspection_path: Path) -> str:
    return introspection_path.read_text(encoding="utf-8")


@pytest.fixture
def schema(introspection_text: str) -> Schema:
    return Schema.from_str(introspection_text)
