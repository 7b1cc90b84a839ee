"""Shared fixtures for CLI tests.

Every CLI invocation gets an isolated preferences file and a fake spawn so
no real process is started.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.discovery.helpers import create_standard_layout


@pytest.fixture
def runner(prefs_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Click runner with preferences redirected into tmp_path."""
    monkeypatch.setenv("LOXSELECT_CONFIG", str(prefs_path))
    monkeypatch.delenv("LOXSELECT_BASE_PATH", raising=False)
    return CliRunner()


@pytest.fixture
def spawned(monkeypatch: pytest.MonkeyPatch) -> list[tuple[Path, Path]]:
    """Record spawn calls from launch and pick instead of starting processes."""
    calls: list[tuple[Path, Path]] = []

    def _fake_spawn(executable: Path, cwd: Path) -> None:
        calls.append((executable, cwd))

    monkeypatch.setattr("loxselect.cli.launch_cmd.spawn_detached", _fake_spawn)
    monkeypatch.setattr("loxselect.cli.pick_cmd.spawn_detached", _fake_spawn)
    return calls


@pytest.fixture
def installed(base_dir: Path) -> Path:
    """Vendor folder with LoxoneConfig16, LoxoneConfig15, and randomFolder."""
    create_standard_layout(base_dir)
    return base_dir
