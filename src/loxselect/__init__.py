"""loxselect: Discover, rank, and launch side-by-side Loxone Config installations."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
