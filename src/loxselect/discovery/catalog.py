"""Catalog building: probe candidates, rank by version, number the result.

Sorting is stable and descending on the normalized version tuple, so two
installations reporting the same version keep their scan order and
repeated runs over an unchanged folder produce identical catalogs. Unknown
versions normalize to ``(0, 0, 0, 0)`` and therefore land at the bottom.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from loxselect.core.models import Catalog, InstallationRecord
from loxselect.discovery.probe import InstallationProbe
from loxselect.discovery.product import DEFAULT_PROFILE, ProductProfile
from loxselect.discovery.scanner import DirectoryScanner

logger = logging.getLogger(__name__)


class CatalogBuilder:
    """Combines probe results into an ordered, numbered ``Catalog``."""

    def __init__(self, probe: InstallationProbe | None = None) -> None:
        self.probe = probe if probe is not None else InstallationProbe()

    def build(self, candidates: Iterable[Path]) -> Catalog:
        """Probe each candidate and return the ranked catalog.

        Args:
            candidates: Candidate folders in scan order.

        Returns:
            Records sorted newest-first with ordinals 1..N. Empty when no
            candidate is launchable.

        Raises:
            ProbeEnumerationError: If a candidate folder cannot be listed.
        """
        found: list[InstallationRecord] = []
        for candidate in candidates:
            record = self.probe.probe(candidate)
            if record is not None:
                found.append(record)

        ranked = sorted(found, key=lambda r: r.version_tuple, reverse=True)
        records = tuple(
            record.with_ordinal(idx) for idx, record in enumerate(ranked, start=1)
        )
        logger.debug("Catalog built with %d installation(s)", len(records))
        return Catalog(records=records)


def discover_catalog(
    base_path: Path,
    profile: ProductProfile = DEFAULT_PROFILE,
) -> Catalog:
    """Scan ``base_path`` and build the catalog in one step.

    Raises:
        DiscoveryError: If ``base_path`` is not a usable scan root.
        ProbeEnumerationError: If a candidate folder cannot be listed.
    """
    scanner = DirectoryScanner(profile)
    builder = CatalogBuilder(InstallationProbe(profile))
    return builder.build(scanner.scan(base_path))
