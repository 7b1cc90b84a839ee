"""Persisted launcher preferences.

Preferences are a plain value: operations that change them take the
current ``Preferences`` and return an updated copy, and only
``PreferencesStore.save`` touches disk. The file is JSON::

    {
      "installPath": "D:\\Apps\\Loxone",
      "lastUpdated": "2026-10-18T09:12:44+00:00",
      "shortcutPreference": "desktop"
    }

Keys the launcher does not know are kept in ``extra`` and written back
unchanged. Saving writes a temporary file beside the target and renames it
over the original, so an interrupted save never leaves a truncated file.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import click

from loxselect.exceptions import ConfigError

APP_NAME = "loxselect"
PREFERENCES_FILENAME = "preferences.json"

_KEY_INSTALL_PATH = "installPath"
_KEY_SHORTCUT = "shortcutPreference"
_KEY_UPDATED = "lastUpdated"
_KNOWN_KEYS = {_KEY_INSTALL_PATH, _KEY_SHORTCUT, _KEY_UPDATED}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def default_preferences_path() -> Path:
    """Per-user preferences file in the platform's app-data folder."""
    return Path(click.get_app_dir(APP_NAME)) / PREFERENCES_FILENAME


@dataclass(frozen=True)
class Preferences:
    """User preferences.

    Attributes:
        install_path: Scan-root override, or None to use the default.
        shortcut_preference: Opaque shortcut choice, passed through.
        last_updated: ISO-8601 UTC timestamp of the last change.
        extra: Unrecognized keys from the file, preserved on save.
    """

    install_path: str | None = None
    shortcut_preference: str | None = None
    last_updated: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data[_KEY_INSTALL_PATH] = self.install_path
        data[_KEY_SHORTCUT] = self.shortcut_preference
        data[_KEY_UPDATED] = self.last_updated
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Preferences:
        """Build preferences from parsed JSON; missing keys default to None."""
        return cls(
            install_path=data.get(_KEY_INSTALL_PATH),
            shortcut_preference=data.get(_KEY_SHORTCUT),
            last_updated=data.get(_KEY_UPDATED),
            extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
        )


class PreferencesStore:
    """Loads and saves ``Preferences`` at a fixed path."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path if path is not None else default_preferences_path()

    def load(self) -> Preferences | None:
        """Read preferences from disk.

        Returns:
            The stored preferences, or None if no file exists yet.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise ConfigError(f"Cannot read preferences {self.path}: {exc}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Malformed preferences {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Malformed preferences {self.path}: expected an object")
        return Preferences.from_dict(data)

    def save(self, prefs: Preferences) -> None:
        """Atomically write preferences as JSON.

        Creates parent directories if they do not exist.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(prefs.to_dict(), indent=2, sort_keys=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def is_filesystem_root(path: Path) -> bool:
    """True for ``/``, ``C:\\`` and other drive or share roots."""
    resolved = path.resolve()
    return resolved.parent == resolved


def validate_install_path(path: str | Path) -> Path:
    """Check that ``path`` is usable as an installation scan root.

    Returns:
        The absolute, resolved directory path.

    Raises:
        ConfigError: If the path is empty, missing, not a directory, or a
            filesystem/drive root.
    """
    text = str(path).strip().strip('"')
    if not text:
        raise ConfigError("Install path is empty")
    candidate = Path(text).expanduser()
    if not candidate.exists():
        raise ConfigError(f"Install path does not exist: {candidate}")
    if not candidate.is_dir():
        raise ConfigError(f"Install path is not a directory: {candidate}")
    if is_filesystem_root(candidate):
        raise ConfigError(
            f"Install path must not be a drive root: {candidate}. "
            "Choose the folder that contains the versioned installations."
        )
    return candidate.resolve()


def set_install_path(prefs: Preferences | None, path: str | Path) -> Preferences:
    """Return preferences with a validated ``install_path``.

    Raises:
        ConfigError: If ``path`` fails ``validate_install_path``.
    """
    base = prefs if prefs is not None else Preferences()
    validated = validate_install_path(path)
    return replace(base, install_path=str(validated), last_updated=_now_iso())


def clear_install_path(prefs: Preferences | None) -> Preferences:
    """Return preferences with the scan-root override removed."""
    base = prefs if prefs is not None else Preferences()
    return replace(base, install_path=None, last_updated=_now_iso())


def with_shortcut_preference(prefs: Preferences | None, value: str) -> Preferences:
    """Return preferences with an updated shortcut choice."""
    base = prefs if prefs is not None else Preferences()
    return replace(base, shortcut_preference=value, last_updated=_now_iso())


def resolve_scan_root(
    override: str | Path | None,
    prefs: Preferences | None,
    default: Path,
) -> Path:
    """Pick the scan root: explicit override, then saved path, then default.

    Raises:
        ConfigError: If the chosen root is a filesystem or drive root.
    """
    if override:
        root = Path(override)
    elif prefs is not None and prefs.install_path:
        root = Path(prefs.install_path)
    else:
        root = default
    if is_filesystem_root(root):
        raise ConfigError(
            f"Install path must not be a drive root: {root}. "
            "Choose the folder that contains the versioned installations."
        )
    return root
