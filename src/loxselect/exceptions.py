"""loxselect exception hierarchy.

All public exceptions inherit from LoxSelectError, giving callers a single
base class to catch when they want to handle any loxselect-specific failure
without swallowing unrelated errors.

Failures that only make one candidate unusable (an unreadable metadata file,
a folder without an executable) never surface as exceptions; they are
absorbed by the probe and the candidate is demoted or skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxselect.core.models import InstallationRecord


class LoxSelectError(Exception):
    """Base exception for all loxselect errors."""


class DiscoveryError(LoxSelectError):
    """Raised when the scan root cannot be used.

    Covers a base path that does not exist, is not a directory, or whose
    entries cannot be listed. Distinct from a scan with zero matches,
    which is a valid empty result.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot scan {path}: {reason}")
        self.path = path
        self.reason = reason


class ProbeEnumerationError(LoxSelectError):
    """Raised when a candidate directory's contents cannot be listed.

    Signals a structural problem with the candidate (permissions, a
    vanished mount) rather than the benign "no executable found" case.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Cannot list installation folder {path}: {cause}")
        self.path = path
        self.cause = cause


class LaunchError(LoxSelectError):
    """Raised when the operating system refuses to start an executable.

    The message carries the underlying OS error text verbatim.
    """

    def __init__(self, record: InstallationRecord, cause: OSError) -> None:
        os_text = cause.strerror or str(cause)
        super().__init__(
            f"Failed to launch {record.executable_path}: {os_text}"
        )
        self.record = record
        self.cause = cause
        self.os_error_text = os_text


class ConfigError(LoxSelectError):
    """Raised for invalid preferences or install-path settings.

    Covers malformed preference files and install paths that do not
    exist, are not directories, or point at a filesystem root.
    """
