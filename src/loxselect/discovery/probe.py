"""Installation probe: version metadata and executable resolution.

Given one candidate folder, the probe decides whether it is a launchable
installation and, if so, builds its ``InstallationRecord`` (without an
ordinal). Only a missing executable disqualifies a candidate; missing or
unreadable version metadata merely demotes it to version ``"Unknown"``.

Metadata reads distinguish three outcomes:

- ``MetadataFound``: the artifact was read; its decoded text is attached.
- ``MetadataAbsent``: no artifact exists in the folder.
- ``MetadataUnreadable``: the artifact exists but reading it failed. The
  error is logged and recovered from, never raised.

Executable resolution first checks the profile's conventional filenames
directly inside the folder, then walks descendants top-down (entries sorted
by name within each directory) for a loosely matching executable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from loxselect.core.models import InstallationRecord
from loxselect.core.version import UNKNOWN_VERSION, extract_version_from_views, normalize
from loxselect.discovery.product import DEFAULT_PROFILE, ProductProfile
from loxselect.exceptions import ProbeEnumerationError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metadata read outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MetadataFound:
    """The metadata artifact was read successfully."""

    path: Path
    data: bytes


@dataclass(frozen=True)
class MetadataAbsent:
    """No metadata artifact exists in the candidate folder."""

    path: Path


@dataclass(frozen=True)
class MetadataUnreadable:
    """The metadata artifact exists but could not be read."""

    path: Path
    error: OSError


MetadataRead = Union[MetadataFound, MetadataAbsent, MetadataUnreadable]


def _decodings(data: bytes) -> list[str]:
    """Text views of an installer artifact, narrow strings first."""
    views = [data.decode("latin-1")]
    # Inno Setup stores some strings as UTF-16-LE; NULs interleave the
    # narrow view, so search a wide decode too.
    if b"\x00" in data:
        views.append(data.decode("utf-16-le", errors="ignore"))
    return views


class InstallationProbe:
    """Determines whether a candidate folder is a launchable installation.

    Usage::

        probe = InstallationProbe()
        record = probe.probe(Path(r"C:\\Program Files (x86)\\Loxone\\LoxoneConfig"))
        if record is not None:
            print(record.version_display, record.executable_path)
    """

    def __init__(self, profile: ProductProfile = DEFAULT_PROFILE) -> None:
        self.profile = profile

    # -- Version metadata ---------------------------------------------------

    def read_metadata(self, candidate_dir: Path) -> MetadataRead:
        """Read the uninstall-metadata artifact of a candidate folder."""
        path = candidate_dir / self.profile.metadata_filename
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            return MetadataAbsent(path)
        except OSError as exc:
            logger.warning("Cannot read version metadata %s: %s", path, exc)
            return MetadataUnreadable(path, exc)
        return MetadataFound(path, data)

    def read_version(self, candidate_dir: Path) -> str:
        """Extract the display version for a candidate, or ``"Unknown"``."""
        result = self.read_metadata(candidate_dir)
        if not isinstance(result, MetadataFound):
            return UNKNOWN_VERSION
        views = _decodings(result.data)
        version = extract_version_from_views(views, marker=self.profile.version_marker)
        if version == UNKNOWN_VERSION:
            logger.debug("No version found in %s", result.path)
        return version

    # -- Executable resolution ----------------------------------------------

    def find_executable(self, candidate_dir: Path) -> Path | None:
        """Locate the installation's entry point.

        Raises:
            ProbeEnumerationError: If ``candidate_dir`` itself cannot be
                listed.
        """
        try:
            top_level = sorted(os.scandir(candidate_dir), key=lambda e: e.name)
        except OSError as exc:
            raise ProbeEnumerationError(candidate_dir, exc) from exc

        by_name = {e.name.lower(): e for e in top_level}
        for name in self.profile.executable_names:
            entry = by_name.get(name.lower())
            if entry is not None and self._is_file(entry):
                return Path(entry.path)

        return self._search_nested(candidate_dir)

    def _search_nested(self, candidate_dir: Path) -> Path | None:
        """Walk descendants for a file loosely matching the product name."""

        def _on_error(exc: OSError) -> None:
            logger.warning("Skipping unreadable folder %s: %s", exc.filename, exc)

        for dirpath, dirnames, filenames in os.walk(candidate_dir, onerror=_on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if self.profile.matches_executable(filename):
                    return Path(dirpath) / filename
        return None

    @staticmethod
    def _is_file(entry: os.DirEntry) -> bool:
        try:
            return entry.is_file()
        except OSError:
            return False

    # -- Probe --------------------------------------------------------------

    def probe(self, candidate_dir: Path) -> InstallationRecord | None:
        """Probe one candidate folder.

        Args:
            candidate_dir: Directory that passed the scanner's name filter.

        Returns:
            An ``InstallationRecord`` without ordinal, or None when the
            folder holds no executable.

        Raises:
            ProbeEnumerationError: If the folder's contents cannot be listed.
        """
        install_path = Path(candidate_dir).absolute()
        executable = self.find_executable(install_path)
        if executable is None:
            logger.debug("No executable in %s, skipping", install_path)
            return None

        version = self.read_version(install_path)
        return InstallationRecord(
            folder_name=install_path.name,
            version_display=version,
            version_tuple=normalize(version),
            install_path=install_path,
            executable_path=executable,
        )
