"""Shared test helpers for creating fake installation folders.

Each helper creates a minimal but realistic layout of a Loxone Config
installation: an executable entry point and an Inno Setup uninstall log
(``unins000.dat``) whose header embeds the product name and version.
"""

from __future__ import annotations

from pathlib import Path


def uninstall_log(version: str, product: str = "Loxone Config") -> bytes:
    """Build bytes resembling an Inno Setup uninstall log header."""
    return (
        b"Inno Setup Uninstall Log (b)\x00\x00\x00\x00"
        + b"{E4E2C5D2-1F2B-4B0C-9A3F-7D1C0B5E2A61}\x00"
        + f"{product} {version}\x00".encode("latin-1")
        + b"\x01\x02\x03 C:\\Program Files (x86)\\Loxone\x00"
    )


def create_installation(
    base: Path,
    folder: str,
    version: str | None = None,
    metadata: bytes | None = None,
    executable: str | None = "LoxoneConfig.exe",
) -> Path:
    """Create one installation folder under ``base``.

    Args:
        base: Vendor folder.
        folder: Installation folder name (e.g. "LoxoneConfig16").
        version: Version to embed in a generated uninstall log.
        metadata: Raw uninstall-log bytes; overrides ``version``.
        executable: Entry point filename, or None for no executable.

    Returns:
        The created installation folder.
    """
    install = base / folder
    install.mkdir(parents=True, exist_ok=True)
    if metadata is None and version is not None:
        metadata = uninstall_log(version)
    if metadata is not None:
        (install / "unins000.dat").write_bytes(metadata)
    if executable is not None:
        (install / executable).write_bytes(b"MZ\x90\x00")
    return install


def create_standard_layout(base: Path) -> None:
    """Two real installations and one unrelated folder."""
    create_installation(base, "LoxoneConfig16", version="16.0.6.10")
    create_installation(base, "LoxoneConfig15", version="15.5.3.4")
    unrelated = base / "randomFolder"
    unrelated.mkdir()
    (unrelated / "LoxoneConfig.exe").write_bytes(b"MZ")
