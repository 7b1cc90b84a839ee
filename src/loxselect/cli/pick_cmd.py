"""``loxselect pick`` -- Interactive version menu (the default command).

Shows the ranked catalog and reads one line at a time:

    <Enter>   launch the newest installation
    1..N      launch that installation
    c         change the installation folder (saved to preferences)
    q         quit without launching

An invalid or empty scan folder does not end the session; the menu stays
open so the user can point it somewhere else.
"""

from __future__ import annotations

from pathlib import Path

import click

from loxselect.cli.output import print_catalog
from loxselect.cli.session import base_path_option, fail, get_store, load_preferences, scan_root
from loxselect.core.models import Catalog
from loxselect.discovery import DEFAULT_PROFILE, discover_catalog
from loxselect.exceptions import ConfigError, DiscoveryError, LaunchError, ProbeEnumerationError
from loxselect.launcher import Launcher, spawn_detached
from loxselect.preferences import Preferences, PreferencesStore, set_install_path
from loxselect.selection import (
    Configure,
    Invalid,
    Quit,
    classify_selection,
    resolve_selection,
)

_PROMPT = "Select [Enter = latest, number, c = change folder, q = quit]"


def _discover(root: Path) -> Catalog:
    """Build the catalog, reporting a bad root instead of exiting."""
    try:
        return discover_catalog(root, DEFAULT_PROFILE)
    except DiscoveryError as exc:
        click.echo(f"Error: {exc}", err=True)
    except ProbeEnumerationError as exc:
        fail(str(exc))
    return Catalog()


def _prompt_install_path(
    store: PreferencesStore, prefs: Preferences | None,
) -> tuple[Preferences | None, Path | None]:
    """Ask for a new installation folder until a valid one is given.

    Returns:
        Updated preferences and the new root, or ``(prefs, None)`` if the
        user cancelled with an empty answer.
    """
    while True:
        answer = click.prompt(
            "Installation folder (empty to cancel)", default="", show_default=False,
        )
        if not answer.strip():
            return prefs, None
        try:
            updated = set_install_path(prefs, answer)
        except ConfigError as exc:
            click.echo(f"Error: {exc}", err=True)
            continue
        store.save(updated)
        click.echo(f"Saved installation folder: {updated.install_path}")
        return updated, Path(updated.install_path)


@click.command("pick")
@base_path_option
@click.pass_context
def pick_command(ctx: click.Context, base_path: str | None) -> None:
    """Choose an installation from a numbered menu and launch it."""
    store = get_store(ctx)
    prefs = load_preferences(store)
    root = scan_root(base_path, prefs)

    while True:
        click.echo(f"Scanning {root}")
        catalog = _discover(root)
        print_catalog(catalog)

        while True:
            raw = click.prompt(_PROMPT, default="", show_default=False)
            selection = classify_selection(raw, len(catalog))
            if not isinstance(selection, Invalid):
                break
            if catalog:
                click.echo(f"Invalid choice {selection.raw!r}; enter 1-{len(catalog)}, c, or q.")
            else:
                click.echo("Nothing to launch here; enter c to change folder or q to quit.")

        if isinstance(selection, Quit):
            return
        if isinstance(selection, Configure):
            prefs, new_root = _prompt_install_path(store, prefs)
            if new_root is not None:
                root = new_root
            continue

        record = resolve_selection(selection, catalog)
        try:
            Launcher(spawn=spawn_detached).launch(record)
        except LaunchError as exc:
            fail(str(exc))
        click.echo(f"Started {record.folder_name} ({record.version_display})")
        return
