"""Candidate discovery: immediate subdirectories matching the product name.

The scanner validates the base path up front and then hands back a lazy,
restartable view of the matching subdirectories. Each iteration re-lists
the base path, so callers always see the current filesystem state. Order
is whatever the platform's directory listing produces; nothing downstream
may rely on it beyond tie-breaking.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from loxselect.discovery.product import DEFAULT_PROFILE, ProductProfile
from loxselect.exceptions import DiscoveryError

logger = logging.getLogger(__name__)


class CandidateDirectories:
    """Restartable iterable of candidate installation directories."""

    def __init__(self, base_path: Path, profile: ProductProfile) -> None:
        self.base_path = base_path
        self.profile = profile

    def __iter__(self) -> Iterator[Path]:
        try:
            with os.scandir(self.base_path) as entries:
                for entry in entries:
                    if not self.profile.matches_folder(entry.name):
                        continue
                    try:
                        is_dir = entry.is_dir()
                    except OSError:
                        logger.warning("Cannot stat %s, skipping", entry.path)
                        continue
                    if is_dir:
                        yield Path(entry.path)
        except OSError as exc:
            raise DiscoveryError(self.base_path, exc.strerror or str(exc)) from exc

    def __repr__(self) -> str:
        return f"CandidateDirectories({str(self.base_path)!r})"


class DirectoryScanner:
    """Enumerates candidate installation folders under a base path.

    Usage::

        scanner = DirectoryScanner()
        for candidate in scanner.scan(Path(r"C:\\Program Files (x86)\\Loxone")):
            print(candidate.name)
    """

    def __init__(self, profile: ProductProfile = DEFAULT_PROFILE) -> None:
        self.profile = profile

    def scan(self, base_path: Path) -> CandidateDirectories:
        """List subdirectories of ``base_path`` whose names match the product.

        Args:
            base_path: Directory holding side-by-side installations.

        Returns:
            A lazy, restartable iterable of absolute candidate paths.
            Zero matches is a valid, empty result.

        Raises:
            DiscoveryError: If ``base_path`` does not exist, is not a
                directory, or cannot be listed.
        """
        base = Path(base_path).absolute()
        if not base.exists():
            raise DiscoveryError(base, "path does not exist")
        if not base.is_dir():
            raise DiscoveryError(base, "not a directory")
        try:
            with os.scandir(base):
                pass
        except OSError as exc:
            raise DiscoveryError(base, exc.strerror or str(exc)) from exc

        logger.debug("Scanning %s for %s installations", base, self.profile.name)
        return CandidateDirectories(base, self.profile)
