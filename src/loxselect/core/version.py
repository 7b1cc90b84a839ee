"""Version extraction and normalization for installation ranking.

Installer metadata embeds the product version in loosely structured text
that drifts between releases. Extraction is two-tier:

1. **Anchored:** a version that follows the product-name marker
   (e.g. ``Loxone Config 16.0.6.10``).
2. **Bare:** the first version-shaped substring anywhere in the text.

A version-shaped substring is 2 to 4 dot-separated non-negative integer
groups (``15.5.3``, ``16.0.6.10``). When neither tier matches, the literal
``"Unknown"`` is returned.

Normalization turns a display string into a fixed-width
(major, minor, build, revision) tuple. Malformed input never raises; it maps
to the all-zero tuple, which sorts last in a descending catalog.
"""

from __future__ import annotations

import re

VersionTuple = tuple[int, int, int, int]

UNKNOWN_VERSION = "Unknown"
UNKNOWN_TUPLE: VersionTuple = (0, 0, 0, 0)

DEFAULT_MARKER = "Loxone Config"

_COMPONENTS = 4

# 2-4 dotted ASCII integer groups, not glued to surrounding digits.
_VERSION_PATTERN = r"(?<![0-9])([0-9]+(?:\.[0-9]+){1,3})(?![0-9])"
_BARE_RE = re.compile(_VERSION_PATTERN)

_marker_cache: dict[str, re.Pattern[str]] = {}


def _anchored_re(marker: str) -> re.Pattern[str]:
    """Compile (and cache) the marker-anchored version pattern.

    Words of the marker may be separated by any amount of whitespace,
    including none, so ``LoxoneConfig`` and ``Loxone  Config`` both match
    the ``Loxone Config`` marker. Up to 24 non-digit characters may sit
    between the marker and the version (``Loxone Config Version 15.5``).
    """
    pattern = _marker_cache.get(marker)
    if pattern is None:
        words = [re.escape(w) for w in marker.split()]
        anchor = r"\s*".join(words)
        pattern = re.compile(
            anchor + r"[^\d\r\n]{0,24}?" + _VERSION_PATTERN,
            re.IGNORECASE,
        )
        _marker_cache[marker] = pattern
    return pattern


def find_anchored_version(text: str, marker: str = DEFAULT_MARKER) -> str | None:
    """Return the first version following ``marker`` in ``text``, if any."""
    if not text or not marker:
        return None
    m = _anchored_re(marker).search(text)
    return m.group(1) if m else None


def find_bare_version(text: str) -> str | None:
    """Return the first version-shaped substring in ``text``, if any."""
    if not text:
        return None
    m = _BARE_RE.search(text)
    return m.group(1) if m else None


def extract_version(raw_text: str | None, marker: str = DEFAULT_MARKER) -> str:
    """Extract a version string from raw artifact text.

    Args:
        raw_text: Decoded contents of the metadata artifact, or None if the
            artifact was absent or unreadable.
        marker: Product-name marker the preferred match must follow.

    Returns:
        The version substring exactly as found (e.g. ``"16.0.6.10"``), or
        ``"Unknown"`` when nothing version-shaped exists.
    """
    return extract_version_from_views([raw_text or ""], marker)


def extract_version_from_views(views: list[str], marker: str = DEFAULT_MARKER) -> str:
    """Two-tier extraction over several decodings of the same artifact.

    The anchored tier runs over every view before the bare tier runs over
    any, so a stray dotted number in one decoding never beats a
    product-anchored version stored in another.
    """
    for text in views:
        version = find_anchored_version(text, marker)
        if version is not None:
            return version
    for text in views:
        version = find_bare_version(text)
        if version is not None:
            return version
    return UNKNOWN_VERSION


def normalize(version_display: str) -> VersionTuple:
    """Normalize a dotted version string into a 4-component tuple.

    Missing trailing components are padded with zeros. Anything that is not
    1 to 4 dot-separated unsigned integers yields ``(0, 0, 0, 0)``.

    >>> normalize("15.5.3")
    (15, 5, 3, 0)
    >>> normalize("Unknown")
    (0, 0, 0, 0)
    """
    if not version_display or version_display == UNKNOWN_VERSION:
        return UNKNOWN_TUPLE

    parts = version_display.strip().split(".")
    if len(parts) > _COMPONENTS:
        return UNKNOWN_TUPLE

    values: list[int] = []
    for part in parts:
        # isdigit() rejects signs, whitespace, and empty groups
        if not part.isascii() or not part.isdigit():
            return UNKNOWN_TUPLE
        values.append(int(part))

    values.extend([0] * (_COMPONENTS - len(values)))
    return (values[0], values[1], values[2], values[3])


def format_version(version: VersionTuple) -> str:
    """Render a version tuple as a dotted string (``"16.0.6.10"``)."""
    return ".".join(str(c) for c in version)
