"""Start a chosen installation as a detached child process.

The spawn step is a small collaborator so callers (and tests) can swap in
their own process creation. The default detaches the child from the
launcher: a new process group on Windows, a new session elsewhere. Launch
failures are terminal; there is no retry and no substitute executable.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Any, Callable

from loxselect.core.models import InstallationRecord
from loxselect.exceptions import LaunchError

logger = logging.getLogger(__name__)

SpawnFn = Callable[[Path, Path], Any]


def spawn_detached(executable: Path, working_directory: Path) -> subprocess.Popen:
    """Start ``executable`` in ``working_directory`` without waiting on it.

    Raises:
        OSError: If the operating system refuses to start the process.
    """
    cmd = [str(executable)]
    if os.name == "nt":
        creationflags = subprocess.CREATE_NEW_PROCESS_GROUP | subprocess.DETACHED_PROCESS
        return subprocess.Popen(cmd, cwd=str(working_directory), creationflags=creationflags)
    return subprocess.Popen(cmd, cwd=str(working_directory), start_new_session=True)


class Launcher:
    """Launches ``InstallationRecord`` entries."""

    def __init__(self, spawn: SpawnFn = spawn_detached) -> None:
        self._spawn = spawn

    def launch(self, record: InstallationRecord) -> Any:
        """Start the record's executable with its install folder as cwd.

        Args:
            record: The installation to start.

        Returns:
            Whatever handle the spawn collaborator returns (a ``Popen`` for
            the default).

        Raises:
            LaunchError: If the OS refuses to start the process (missing
                file, permission denied, malformed executable).
        """
        logger.info(
            "Launching %s %s from %s",
            record.folder_name, record.version_display, record.executable_path,
        )
        try:
            return self._spawn(record.executable_path, record.install_path)
        except OSError as exc:
            logger.error("Launch of %s failed: %s", record.executable_path, exc)
            raise LaunchError(record, exc) from exc
