"""Rich output formatting helpers for the loxselect CLI.

Provides the catalog table shown by ``list`` and the interactive menu, and
the preferences panel shown by ``config show``. Unknown versions are dimmed
so the reader sees at a glance which entries sort last for lack of data.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from loxselect.core.models import Catalog
from loxselect.preferences import Preferences

console = Console()


def print_catalog(catalog: Catalog, title: str = "Installed Versions") -> None:
    """Print the numbered catalog table.

    Args:
        catalog: Ranked installations; ordinal 1 is flagged as latest.
        title: Table heading.
    """
    if not catalog:
        console.print("[dim]No launchable installations found.[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="bold")
    table.add_column("Version")
    table.add_column("Folder")
    table.add_column("Executable", style="dim", overflow="fold")

    for record in catalog:
        if record.is_version_known:
            version = Text(record.version_display, style="bold green" if record.ordinal == 1 else "")
        else:
            version = Text(record.version_display, style="dim")
        if record.ordinal == 1:
            version.append("  (latest)", style="cyan")
        table.add_row(
            str(record.ordinal),
            version,
            Text(record.folder_name),
            Text(str(record.executable_path)),
        )

    console.print(table)


def print_preferences(prefs: Preferences | None, path: str) -> None:
    """Print stored preferences.

    Args:
        prefs: Loaded preferences, or None when nothing is saved yet.
        path: Location of the preferences file.
    """
    console.print(Panel(Text(path, style="bold"), title="Preferences File"))
    if prefs is None:
        console.print("[dim]No preferences saved yet.[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Install path", Text(prefs.install_path or "(default)"))
    table.add_row("Shortcut", Text(prefs.shortcut_preference or "-"))
    table.add_row("Last updated", Text(prefs.last_updated or "-"))
    for key in sorted(prefs.extra):
        table.add_row(Text(key), Text(str(prefs.extra[key])))
    console.print(table)

