"""Core value types for installation discovery and ranking.

- ``version``: version extraction from raw artifact text and normalization
  into comparable four-component tuples.
- ``models``: ``InstallationRecord`` and the ordered ``Catalog``.
"""

from __future__ import annotations

from loxselect.core.models import Catalog, InstallationRecord
from loxselect.core.version import (
    UNKNOWN_TUPLE,
    UNKNOWN_VERSION,
    VersionTuple,
    extract_version,
    extract_version_from_views,
    format_version,
    normalize,
)

__all__ = [
    "Catalog",
    "InstallationRecord",
    "UNKNOWN_TUPLE",
    "UNKNOWN_VERSION",
    "VersionTuple",
    "extract_version",
    "extract_version_from_views",
    "format_version",
    "normalize",
]
