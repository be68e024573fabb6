"""Tests for the registry location config."""
from __future__ import annotations

import pytest

from servicectl.config import ServiceCtlConfig, load_config
from servicectl.errors import StorageError


def test_registry_path_under_home(home):
    config = load_config()
    assert config.config_dir == home / ".config" / "servicectl"
    assert config.registry_path == home / ".config" / "servicectl" / "cache.yaml"


def test_load_config_rereads_home(tmp_path, monkeypatch):
    first = tmp_path / "a"
    second = tmp_path / "b"
    monkeypatch.setenv("HOME", str(first))
    assert load_config().home == first
    monkeypatch.setenv("HOME", str(second))
    assert load_config().home == second


def test_ensure_config_dir_creates_directory(home):
    config = ServiceCtlConfig(home=home)
    assert not config.config_dir.exists()
    config.ensure_config_dir()
    assert config.config_dir.is_dir()
    # second call is a no-op
    config.ensure_config_dir()


def test_ensure_config_dir_failure(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    config = ServiceCtlConfig(home=blocker)
    with pytest.raises(StorageError):
        config.ensure_config_dir()
