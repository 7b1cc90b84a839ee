"""``loxselect launch [ORDINAL]`` -- Start an installation without the menu.

ORDINAL is the 1-based catalog position shown by ``loxselect list``;
omitting it launches the newest installation.

Exit Codes:
    0 -- The process was started.
    1 -- Discovery failed, the ordinal is out of range, or the OS refused
         to start the executable.
    2 -- No launchable installations were found.
"""

from __future__ import annotations

import click

from loxselect.cli.session import (
    EXIT_NO_INSTALLATIONS,
    base_path_option,
    build_catalog,
    fail,
    get_store,
    load_preferences,
    scan_root,
)
from loxselect.exceptions import LaunchError
from loxselect.launcher import Launcher, spawn_detached


@click.command("launch")
@click.argument("ordinal", type=int, required=False, default=1)
@base_path_option
@click.pass_context
def launch_command(ctx: click.Context, ordinal: int, base_path: str | None) -> None:
    """Launch the installation at ORDINAL (default: 1, the newest)."""
    prefs = load_preferences(get_store(ctx))
    root = scan_root(base_path, prefs)
    catalog = build_catalog(root)

    if not catalog:
        fail(f"No launchable installations found in {root}", EXIT_NO_INSTALLATIONS)

    record = catalog.by_ordinal(ordinal)
    if record is None:
        fail(f"No installation #{ordinal}; choose 1-{len(catalog)}")

    try:
        Launcher(spawn=spawn_detached).launch(record)
    except LaunchError as exc:
        fail(str(exc))
    click.echo(f"Started {record.folder_name} ({record.version_display})")
