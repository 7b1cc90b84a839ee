"""``loxselect list`` -- Show discovered installations, newest first.

Exit Codes:
    0 -- At least one launchable installation was found.
    1 -- The scan root is invalid or unreadable.
    2 -- No launchable installations were found.
"""

from __future__ import annotations

import json
import sys

import click

from loxselect.cli.session import (
    EXIT_NO_INSTALLATIONS,
    base_path_option,
    build_catalog,
    get_store,
    load_preferences,
    scan_root,
)


@click.command("list")
@base_path_option
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.pass_context
def list_command(ctx: click.Context, base_path: str | None, output_format: str) -> None:
    """List launchable installations in ranked order."""
    prefs = load_preferences(get_store(ctx))
    root = scan_root(base_path, prefs)
    catalog = build_catalog(root)

    if output_format == "json":
        data = catalog.to_dict()
        data["base_path"] = str(root)
        click.echo(json.dumps(data, indent=2))
    else:
        from loxselect.cli.output import print_catalog
        click.echo(f"Scanning {root}")
        print_catalog(catalog)

    if not catalog:
        sys.exit(EXIT_NO_INSTALLATIONS)
