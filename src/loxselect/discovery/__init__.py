"""Discovery pipeline for side-by-side application installations.

Scans a base folder for version-named installation directories, probes
each for its version and executable, and ranks the survivors.

Public API::

    from loxselect.discovery import discover_catalog

    catalog = discover_catalog(Path(r"C:\\Program Files (x86)\\Loxone"))
    for record in catalog:
        print(f"{record.ordinal}. {record.version_display}")
"""

from __future__ import annotations

from loxselect.discovery.catalog import CatalogBuilder, discover_catalog
from loxselect.discovery.probe import (
    InstallationProbe,
    MetadataAbsent,
    MetadataFound,
    MetadataRead,
    MetadataUnreadable,
)
from loxselect.discovery.product import DEFAULT_PROFILE, LOXONE_CONFIG, ProductProfile
from loxselect.discovery.scanner import CandidateDirectories, DirectoryScanner

__all__ = [
    "CandidateDirectories",
    "CatalogBuilder",
    "DEFAULT_PROFILE",
    "DirectoryScanner",
    "InstallationProbe",
    "LOXONE_CONFIG",
    "MetadataAbsent",
    "MetadataFound",
    "MetadataRead",
    "MetadataUnreadable",
    "ProductProfile",
    "discover_catalog",
]
