"""Tests for config file loading."""

import json

from browsergate.config import find_config_file, load_config


def test_yaml_section(tmp_path):
    path = tmp_path / "settings.yml"
    path.write_text("browsergate:\n  ignoreMinor: true\n  browsers:\n    - last 2 versions\nother: 1\n", encoding="utf-8")
    assert load_config(str(path)) == {"ignoreMinor": True, "browsers": ["last 2 versions"]}


def test_yaml_without_section(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("env: production\n", encoding="utf-8")
    assert load_config(str(path)) == {"env": "production"}


def test_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"browsergate": {"allow_higher_versions": True}}), encoding="utf-8")
    assert load_config(str(path)) == {"allow_higher_versions": True}


def test_missing_file_returns_empty(tmp_path, caplog):
    assert load_config(str(tmp_path / "nope.yml")) == {}
    assert "Config file not found" in caplog.text


def test_invalid_yaml_returns_empty(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("browsergate: [unclosed\n", encoding="utf-8")
    assert load_config(str(path)) == {}


def test_non_mapping_returns_empty(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    assert load_config(str(path)) == {}


def test_default_location(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert find_config_file() is None
    assert load_config() == {}
    (tmp_path / ".browsergate.yml").write_text("ignorePatch: false\n", encoding="utf-8")
    assert load_config() == {"ignorePatch": False}
