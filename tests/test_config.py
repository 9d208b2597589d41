from __future__ import annotations

from pathlib import Path

import pytest

from graphpoet.core.config import Config
from graphpoet.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    monkeypatch.delenv("GRAPHPOET_REPRESENTATION", raising=False)
    monkeypatch.delenv("GRAPHPOET_LOG_LEVEL", raising=False)


def test_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = Config()
    assert config.representation == "vertices"
    assert config.get("logging.level") == "WARNING"
    assert config.get("missing.key", "fallback") == "fallback"


def test_yaml_file_overrides_defaults(tmp_path: Path) -> None:
    path = tmp_path / "poet.yaml"
    path.write_text("graph:\n  representation: edges\n", encoding="utf-8")
    config = Config(str(path))
    assert config.representation == "edges"
    assert config.logging_settings["format"].startswith("%(asctime)s")


def test_environment_config_dir(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "test.yaml").write_text("logging:\n  level: DEBUG\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    config = Config(environment="test")
    assert config.get("logging.level") == "DEBUG"


def test_env_vars_win(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "poet.yaml"
    path.write_text("graph:\n  representation: vertices\n", encoding="utf-8")
    monkeypatch.setenv("GRAPHPOET_REPRESENTATION", "edges")
    monkeypatch.setenv("GRAPHPOET_LOG_LEVEL", "INFO")
    config = Config(str(path))
    assert config.representation == "edges"
    assert config.graph_settings == {"representation": "edges"}
    assert config.get("logging.level") == "INFO"


def test_set_with_dot_notation(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = Config()
    config.set("graph.representation", "edges")
    config.set("extra.nested.value", 3)
    assert config.representation == "edges"
    assert config.to_dict()["extra"] == {"nested": {"value": 3}}


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("graph: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        Config(str(tmp_path / "absent.yaml"))


@pytest.mark.parametrize("body", ["graph:\n", "graph: edges\n", "logging:\n"])
def test_non_mapping_section_raises(tmp_path: Path, monkeypatch, body: str) -> None:
    path = tmp_path / "poet.yaml"
    path.write_text(body, encoding="utf-8")
    monkeypatch.setenv("GRAPHPOET_REPRESENTATION", "edges")
    monkeypatch.setenv("GRAPHPOET_LOG_LEVEL", "INFO")
    with pytest.raises(ConfigurationError):
        Config(str(path))
