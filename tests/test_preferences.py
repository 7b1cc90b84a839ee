"""Tests for preferences persistence and install-path validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from loxselect.exceptions import ConfigError
from loxselect.preferences import (
    Preferences,
    PreferencesStore,
    clear_install_path,
    is_filesystem_root,
    resolve_scan_root,
    set_install_path,
    validate_install_path,
    with_shortcut_preference,
)


class TestStore:
    """Load and atomic save."""

    def test_load_missing_returns_none(self, prefs_path: Path) -> None:
        assert PreferencesStore(prefs_path).load() is None

    def test_save_then_load(self, prefs_path: Path) -> None:
        store = PreferencesStore(prefs_path)
        prefs = Preferences(install_path="/opt/Loxone", shortcut_preference="desktop")
        store.save(prefs)
        assert store.load() == prefs

    def test_file_uses_camel_case_keys(self, prefs_path: Path) -> None:
        PreferencesStore(prefs_path).save(Preferences(install_path="/opt/Loxone"))
        data = json.loads(prefs_path.read_text(encoding="utf-8"))
        assert data["installPath"] == "/opt/Loxone"
        assert set(data) == {"installPath", "shortcutPreference", "lastUpdated"}

    def test_unknown_keys_preserved(self, prefs_path: Path) -> None:
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text(json.dumps({"installPath": None, "theme": "dark"}))
        store = PreferencesStore(prefs_path)
        loaded = store.load()
        assert loaded.extra == {"theme": "dark"}
        store.save(loaded)
        assert json.loads(prefs_path.read_text())["theme"] == "dark"

    def test_no_temp_files_left(self, prefs_path: Path) -> None:
        store = PreferencesStore(prefs_path)
        store.save(Preferences())
        store.save(Preferences(shortcut_preference="none"))
        assert [p.name for p in prefs_path.parent.iterdir()] == ["preferences.json"]

    def test_failed_save_keeps_original(
        self, prefs_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        store = PreferencesStore(prefs_path)
        store.save(Preferences(install_path="/first"))

        def _boom(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("loxselect.preferences.os.replace", _boom)
        with pytest.raises(OSError):
            store.save(Preferences(install_path="/second"))
        monkeypatch.undo()
        assert store.load().install_path == "/first"
        assert [p.name for p in prefs_path.parent.iterdir()] == ["preferences.json"]

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_malformed_file(self, prefs_path: Path, content: str) -> None:
        prefs_path.parent.mkdir(parents=True)
        prefs_path.write_text(content)
        with pytest.raises(ConfigError, match="Malformed"):
            PreferencesStore(prefs_path).load()


class TestValidateInstallPath:
    """Existing, non-root directories only."""

    def test_valid_directory(self, base_dir: Path) -> None:
        assert validate_install_path(str(base_dir)) == base_dir.resolve()

    def test_strips_quotes(self, base_dir: Path) -> None:
        assert validate_install_path(f'"{base_dir}"') == base_dir.resolve()

    def test_empty(self) -> None:
        with pytest.raises(ConfigError, match="empty"):
            validate_install_path("  ")

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="does not exist"):
            validate_install_path(tmp_path / "missing")

    def test_file(self, tmp_path: Path) -> None:
        target = tmp_path / "a.txt"
        target.write_text("x")
        with pytest.raises(ConfigError, match="not a directory"):
            validate_install_path(target)

    def test_root_rejected(self) -> None:
        root = Path(Path.cwd().anchor)
        assert is_filesystem_root(root)
        with pytest.raises(ConfigError, match="drive root"):
            validate_install_path(root)


class TestUpdates:
    """Updates return new values and stamp last_updated."""

    def test_set_install_path(self, base_dir: Path) -> None:
        original = Preferences(shortcut_preference="desktop")
        updated = set_install_path(original, base_dir)
        assert updated.install_path == str(base_dir.resolve())
        assert updated.shortcut_preference == "desktop"
        assert updated.last_updated is not None
        assert original.install_path is None

    def test_set_install_path_from_none(self, base_dir: Path) -> None:
        assert set_install_path(None, base_dir).install_path == str(base_dir.resolve())

    def test_set_install_path_invalid(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            set_install_path(Preferences(), tmp_path / "missing")

    def test_clear_install_path(self) -> None:
        assert clear_install_path(Preferences(install_path="/x")).install_path is None

    def test_shortcut(self) -> None:
        assert with_shortcut_preference(None, "none").shortcut_preference == "none"


class TestResolveScanRoot:
    """Override, then saved path, then default."""

    def test_override_wins(self) -> None:
        prefs = Preferences(install_path="/saved")
        assert resolve_scan_root("/cli", prefs, Path("/default")) == Path("/cli")

    def test_saved_path(self) -> None:
        prefs = Preferences(install_path="/saved")
        assert resolve_scan_root(None, prefs, Path("/default")) == Path("/saved")

    def test_default(self) -> None:
        assert resolve_scan_root(None, None, Path("/default")) == Path("/default")
        assert resolve_scan_root(None, Preferences(), Path("/default")) == Path("/default")

    def test_root_override_rejected(self) -> None:
        root = Path(Path.cwd().anchor)
        with pytest.raises(ConfigError, match="drive root"):
            resolve_scan_root(str(root), None, Path("/default"))

    def test_root_saved_path_rejected(self) -> None:
        prefs = Preferences(install_path=Path.cwd().anchor)
        with pytest.raises(ConfigError, match="drive root"):
            resolve_scan_root(None, prefs, Path("/default"))
