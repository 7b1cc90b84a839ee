"""Shared plumbing for CLI commands.

Loads preferences, resolves the scan root, and builds the catalog,
translating library errors into CLI messages and exit codes:

    1 -- Discovery, configuration, or launch failure.
    2 -- No launchable installations found.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from loxselect.core.models import Catalog
from loxselect.discovery import DEFAULT_PROFILE, discover_catalog
from loxselect.exceptions import ConfigError, LoxSelectError
from loxselect.preferences import Preferences, PreferencesStore, resolve_scan_root

EXIT_ERROR = 1
EXIT_NO_INSTALLATIONS = 2


def fail(message: str, code: int = EXIT_ERROR) -> NoReturn:
    """Print ``message`` to stderr and exit with ``code``."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)


def get_store(ctx: click.Context) -> PreferencesStore:
    """Preferences store for the path chosen on the command group."""
    obj = ctx.find_root().obj or {}
    path = obj.get("config_path")
    return PreferencesStore(Path(path) if path else None)


def load_preferences(store: PreferencesStore) -> Preferences | None:
    """Load preferences, exiting on a malformed file."""
    try:
        return store.load()
    except ConfigError as exc:
        fail(str(exc))


def scan_root(base_path: str | None, prefs: Preferences | None) -> Path:
    """Resolve the folder to scan for installations, exiting on a drive root."""
    try:
        return resolve_scan_root(base_path, prefs, DEFAULT_PROFILE.default_base_path())
    except ConfigError as exc:
        fail(str(exc))


def build_catalog(root: Path) -> Catalog:
    """Discover and rank installations under ``root``, exiting on failure."""
    try:
        return discover_catalog(root, DEFAULT_PROFILE)
    except LoxSelectError as exc:
        fail(str(exc))
    return Catalog()


base_path_option = click.option(
    "--base-path",
    type=click.Path(file_okay=False),
    envvar="LOXSELECT_BASE_PATH",
    default=None,
    help="Folder holding the versioned installations (overrides saved path).",
)
