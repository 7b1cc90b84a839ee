"""loxselect CLI -- Pick and launch one of several installed Loxone Config versions.

Entry point for the ``loxselect`` command-line tool. Registers all
subcommands under a single Click group; running ``loxselect`` with no
subcommand opens the interactive menu.

Commands:
    pick    -- Interactive menu (default).
    list    -- Show discovered installations, newest first.
    launch  -- Start an installation by ordinal.
    config  -- Inspect and change saved preferences.

Usage::

    loxselect                              # Interactive menu
    loxselect list --format json
    loxselect launch                       # Newest version
    loxselect launch 2 --base-path "D:\\Apps\\Loxone"
    loxselect config set-path "D:\\Apps\\Loxone"
"""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from loxselect import __version__
from loxselect.cli.config_cmd import config_group
from loxselect.cli.launch_cmd import launch_command
from loxselect.cli.list_cmd import list_command
from loxselect.cli.pick_cmd import pick_command


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    envvar="LOXSELECT_CONFIG",
    default=None,
    help="Preferences file (default: per-user app-data folder).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """loxselect: Launch a chosen version of Loxone Config.

    Scans the installation folder for side-by-side Loxone Config versions,
    ranks them newest first, and starts the one you pick.
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        # invoke() fills defaults without consulting envvars
        ctx.invoke(pick_command, base_path=os.environ.get("LOXSELECT_BASE_PATH") or None)


# Register all subcommands
cli.add_command(pick_command)
cli.add_command(list_command)
cli.add_command(launch_command)
cli.add_command(config_group)
