from pathlib import Path

import yaml

from gql_schema_explorer import config


def test_defaults_when_missing(isolated_config: Path) -> None:
    cfg = config.load()
    assert cfg.default_url is None
    assert cfg.headers == []


def test_env_var_selects_path(isolated_config: Path) -> None:
    assert config.get_default_config_path() == str(isolated_config)


def test_load_values(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text(
        yaml.dump({"default_url": "https://example.com/graphql", "headers": ["X-Api-Key: k"]}),
        encoding="utf-8",
    )
    cfg = config.load(str(path))
    assert cfg.default_url == "https://example.com/graphql"
    assert cfg.headers == ["X-Api-Key: k"]


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert config.load(str(path)) == config.Config()


def test_example_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.yaml"
    written = config.create_example_config(str(path))
    assert written == str(path)
    cfg = config.load(written)
    assert cfg.default_url == "https://example.com/graphql"
    assert cfg.headers == ["Authorization: Bearer YOUR_TOKEN"]
