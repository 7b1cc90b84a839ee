"""Classify menu input into a closed set of selection actions.

The menu protocol is:

- empty input selects the newest installation (ordinal 1);
- an integer 1..N selects that ordinal;
- ``q`` / ``quit`` / ``exit`` quits;
- ``c`` / ``config`` / ``p`` / ``path`` opens install-path configuration;
- anything else is invalid and the caller re-prompts.

``classify_selection`` is the only place raw input is interpreted; callers
dispatch on the returned variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from loxselect.core.models import Catalog, InstallationRecord

QUIT_WORDS = frozenset({"q", "quit", "exit"})
CONFIGURE_WORDS = frozenset({"c", "config", "p", "path"})


@dataclass(frozen=True)
class Latest:
    """Launch the newest installation."""


@dataclass(frozen=True)
class Quit:
    """Leave without launching."""


@dataclass(frozen=True)
class Configure:
    """Change the installation base path."""


@dataclass(frozen=True)
class SelectOrdinal:
    """Launch the installation at a 1-based ordinal."""

    ordinal: int


@dataclass(frozen=True)
class Invalid:
    """Unrecognized input."""

    raw: str


Selection = Union[Latest, Quit, Configure, SelectOrdinal, Invalid]


def classify_selection(raw: str | None, catalog_size: int) -> Selection:
    """Turn one line of user input into a ``Selection``.

    Args:
        raw: The text entered at the prompt (None is treated as empty).
        catalog_size: Number of entries currently offered.

    Returns:
        The matching variant. Ordinals outside 1..catalog_size, and empty
        input against an empty catalog, are ``Invalid``.
    """
    text = (raw or "").strip()
    if not text:
        return Latest() if catalog_size >= 1 else Invalid(raw or "")

    lowered = text.lower()
    if lowered in QUIT_WORDS:
        return Quit()
    if lowered in CONFIGURE_WORDS:
        return Configure()
    if text.isascii() and text.isdigit():
        ordinal = int(text)
        if 1 <= ordinal <= catalog_size:
            return SelectOrdinal(ordinal)
    return Invalid(text)


def resolve_selection(
    selection: Selection, catalog: Catalog,
) -> InstallationRecord | None:
    """Map a launching selection to its catalog record.

    Returns:
        The record for ``Latest`` or ``SelectOrdinal``; None for every
        non-launching variant.
    """
    if isinstance(selection, Latest):
        return catalog.latest
    if isinstance(selection, SelectOrdinal):
        return catalog.by_ordinal(selection.ordinal)
    return None
