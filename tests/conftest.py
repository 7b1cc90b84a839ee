"""Shared fixtures for loxselect tests."""

import pathlib

import pytest


@pytest.fixture
def base_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty vendor folder to hold fake installations."""
    base = tmp_path / "Loxone"
    base.mkdir()
    return base


@pytest.fixture
def prefs_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Location for a preferences file that does not exist yet."""
    return tmp_path / "appdata" / "preferences.json"
