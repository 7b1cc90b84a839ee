"""Static description of a product family's on-disk installation layout.

A ``ProductProfile`` tells the scanner which folders are candidates and the
probe where to find version metadata and the executable. Loxone Config
installs each major version side by side under a common vendor folder::

    C:\\Program Files (x86)\\Loxone\\
        LoxoneConfig\\          (current)
        LoxoneConfig 15\\
        Loxone Config 14.2\\

Each installation carries an Inno Setup uninstall log (``unins000.dat``)
whose header embeds the product name and full version.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class ProductProfile:
    """Describes where a product's installations live and what they contain.

    Attributes:
        name: Human-readable product name (e.g., "Loxone Config").
        folder_markers: Case-insensitive substrings; a subdirectory of the
            base path is a candidate if its name contains any of them.
        metadata_filename: Uninstall-metadata file inside each installation.
        version_marker: Product-name marker anchoring version extraction.
        executable_names: Conventional entry points, checked in order
            directly inside the installation folder.
        executable_token: Case-insensitive token (spaces ignored) a nested
            executable's filename must contain to be accepted.
        executable_suffixes: File suffixes considered executable.
        vendor_folder: Folder under Program Files holding installations.
    """

    name: str
    folder_markers: tuple[str, ...]
    metadata_filename: str
    version_marker: str
    executable_names: tuple[str, ...] = field(default_factory=tuple)
    executable_token: str = ""
    executable_suffixes: tuple[str, ...] = (".exe",)
    vendor_folder: str = ""

    def matches_folder(self, folder_name: str) -> bool:
        """Check whether a directory name identifies this product family."""
        lowered = folder_name.lower()
        return any(marker.lower() in lowered for marker in self.folder_markers)

    def matches_executable(self, filename: str) -> bool:
        """Loose filename match used for the nested executable search."""
        lowered = filename.lower()
        if not lowered.endswith(tuple(s.lower() for s in self.executable_suffixes)):
            return False
        token = self.executable_token.replace(" ", "").lower()
        return token in lowered.replace(" ", "")

    def default_base_path(self) -> Path:
        """Resolve the conventional vendor folder under Program Files.

        Prefers ``%ProgramFiles(x86)%`` (the 32-bit installer's target),
        then ``%ProgramFiles%``, then the literal default drive layout.
        """
        for var in ("ProgramFiles(x86)", "ProgramFiles"):
            root = os.environ.get(var)
            if root:
                return Path(root) / self.vendor_folder
        return Path(r"C:\Program Files (x86)") / self.vendor_folder


LOXONE_CONFIG = ProductProfile(
    name="Loxone Config",
    folder_markers=("loxoneconfig", "loxone config"),
    metadata_filename="unins000.dat",
    version_marker="Loxone Config",
    executable_names=("LoxoneConfig.exe", "Loxone Config.exe"),
    executable_token="loxoneconfig",
    executable_suffixes=(".exe",),
    vendor_folder="Loxone",
)

DEFAULT_PROFILE = LOXONE_CONFIG
