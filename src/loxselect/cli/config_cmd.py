"""``loxselect config`` -- Inspect and change saved preferences.

Subcommands:
    show           -- Print the preferences file and its values.
    set-path PATH  -- Save the installation folder to scan.
    clear-path     -- Forget the saved folder and use the default.
    set-shortcut   -- Record the shortcut preference.

Drive and filesystem roots are rejected as installation folders.
"""

from __future__ import annotations

import click

from loxselect.cli.output import print_preferences
from loxselect.cli.session import fail, get_store, load_preferences
from loxselect.exceptions import ConfigError
from loxselect.preferences import (
    clear_install_path,
    set_install_path,
    with_shortcut_preference,
)


@click.group("config")
def config_group() -> None:
    """View or change saved launcher preferences."""


@config_group.command("show")
@click.pass_context
def show_command(ctx: click.Context) -> None:
    """Show saved preferences."""
    store = get_store(ctx)
    print_preferences(load_preferences(store), str(store.path))


@config_group.command("set-path")
@click.argument("path")
@click.pass_context
def set_path_command(ctx: click.Context, path: str) -> None:
    """Save PATH as the installation folder to scan."""
    store = get_store(ctx)
    prefs = load_preferences(store)
    try:
        updated = set_install_path(prefs, path)
    except ConfigError as exc:
        fail(str(exc))
    store.save(updated)
    click.echo(f"Installation folder set to {updated.install_path}")


@config_group.command("clear-path")
@click.pass_context
def clear_path_command(ctx: click.Context) -> None:
    """Forget the saved installation folder."""
    store = get_store(ctx)
    store.save(clear_install_path(load_preferences(store)))
    click.echo("Installation folder reset to default")


@config_group.command("set-shortcut")
@click.argument("value", type=click.Choice(["desktop", "startmenu", "none"]))
@click.pass_context
def set_shortcut_command(ctx: click.Context, value: str) -> None:
    """Record the shortcut preference (desktop, startmenu, or none)."""
    store = get_store(ctx)
    store.save(with_shortcut_preference(load_preferences(store), value))
    click.echo(f"Shortcut preference set to {value}")
