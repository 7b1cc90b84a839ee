"""Data models for discovered installations.

``InstallationRecord`` describes one launchable copy of the application.
``Catalog`` is the final ordered, numbered sequence of records. Both are
frozen: a record's ordinal is assigned once, by ``CatalogBuilder``, through
``with_ordinal`` which returns a new record.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterator

from loxselect.core.version import UNKNOWN_TUPLE, VersionTuple, format_version


@dataclass(frozen=True)
class InstallationRecord:
    """A single discovered, launchable installation.

    Attributes:
        folder_name: Base name of the installation directory.
        version_display: Version as extracted from the metadata artifact,
            or ``"Unknown"``.
        version_tuple: Normalized (major, minor, build, revision) used for
            ordering. ``(0, 0, 0, 0)`` when the version is unknown.
        install_path: Absolute path of the installation directory.
        executable_path: Absolute path of the entry point inside
            ``install_path``.
        ordinal: 1-based catalog position. None until the record is placed
            in a catalog.
    """

    folder_name: str
    version_display: str
    version_tuple: VersionTuple
    install_path: Path
    executable_path: Path
    ordinal: int | None = None

    @property
    def is_version_known(self) -> bool:
        """True unless the version fell back to the unknown sentinel."""
        return self.version_tuple != UNKNOWN_TUPLE

    def with_ordinal(self, ordinal: int) -> InstallationRecord:
        """Return a copy of this record numbered at ``ordinal``.

        Raises:
            ValueError: If the record already has an ordinal, or
                ``ordinal`` is not positive.
        """
        if self.ordinal is not None:
            raise ValueError(
                f"{self.folder_name} already has ordinal {self.ordinal}"
            )
        if ordinal < 1:
            raise ValueError(f"Ordinals are 1-based, got {ordinal}")
        return replace(self, ordinal=ordinal)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return {
            "ordinal": self.ordinal,
            "folder_name": self.folder_name,
            "version": self.version_display,
            "version_tuple": format_version(self.version_tuple),
            "install_path": str(self.install_path),
            "executable_path": str(self.executable_path),
        }


@dataclass(frozen=True)
class Catalog:
    """Ordered, numbered installations: newest version first.

    Ties between equal versions keep their scan order. An empty catalog is
    a valid result meaning "no launchable installations".
    """

    records: tuple[InstallationRecord, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[InstallationRecord]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    @property
    def latest(self) -> InstallationRecord | None:
        """The record at ordinal 1, or None for an empty catalog."""
        return self.records[0] if self.records else None

    def by_ordinal(self, ordinal: int) -> InstallationRecord | None:
        """Look up a record by its 1-based ordinal.

        Returns:
            The record, or None when ``ordinal`` is outside 1..N.
        """
        if 1 <= ordinal <= len(self.records):
            return self.records[ordinal - 1]
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the catalog for JSON output."""
        return {
            "count": len(self.records),
            "installations": [r.to_dict() for r in self.records],
        }
