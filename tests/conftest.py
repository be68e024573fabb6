"""Shared pytest fixtures."""
from __future__ import annotations

import os
import signal
from pathlib import Path

import pytest

from servicectl.config import ServiceCtlConfig
from servicectl.registry import RegistryStore


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at a fresh temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def store(home: Path) -> RegistryStore:
    return RegistryStore(ServiceCtlConfig(home=home))


@pytest.fixture
def sleeper(tmp_path: Path, store: RegistryStore):
    """An executable that sleeps, standing in for a long-running service.

    Any process still registered at teardown is killed.
    """
    script = tmp_path / "sleep-wrapper"
    script.write_text("#!/bin/sh\nexec sleep 30\n")
    script.chmod(0o755)
    yield str(script)
    for record in store.load():
        if record.pid:
            try:
                os.kill(record.pid, signal.SIGKILL)
            except OSError:
                pass
