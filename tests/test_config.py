"""Tests for config loading and root resolution."""

from pathlib import Path

import pytest

from repostat.config import (
    CONFIG_ENV_VAR,
    load_settings,
    resolve_root,
    resolve_root_with_source,
)
from repostat.errors import ConfigError


def test_resolve_root_first_non_empty_wins(tmp_path):
    assert resolve_root("/explicit", "/env", "/cfg") == Path("/explicit")
    assert resolve_root(None, "/env", "/cfg") == Path("/env")
    assert resolve_root("", "  ", "/cfg") == Path("/cfg")


def test_resolve_root_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root, source = resolve_root_with_source(None, None, None)
    assert root == tmp_path
    assert source == "cwd"


def test_load_settings_missing_file(tmp_path):
    s = load_settings(tmp_path / "absent.yaml")
    assert s.default_root is None
    assert s.git_timeout is None
    assert s.git_executable == "git"


def test_load_settings_from_yaml(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("default_root: ~/src\ngit_timeout: 10\n")
    s = load_settings(p)
    assert s.default_root == "~/src"
    assert s.git_timeout == 10.0


def test_load_settings_from_env_path(tmp_path, monkeypatch):
    p = tmp_path / "other.yaml"
    p.write_text("git_executable: /usr/local/bin/git\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
    assert load_settings().git_executable == "/usr/local/bin/git"


def test_load_settings_rejects_non_mapping(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_settings(p)


def test_load_settings_rejects_bad_timeout(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("git_timeout: soon\n")
    with pytest.raises(ConfigError):
        load_settings(p)


def test_load_settings_rejects_malformed_yaml(tmp_path):
    p = tmp_path / "config.yaml"
    p.write_text("default_root: [unclosed\n")
    with pytest.raises(ConfigError):
        load_settings(p)
