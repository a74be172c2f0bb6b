"""
VSD tool launcher.

Builds the VSD command line from a resolved ArchiveFileSet, starts the
viewer, and blocks until its standard error closes and the process exits.

Design rules:
- Tool path derived once from the installation root, platform suffix included
- Existence checked before any spawn
- Argument vector is [tool, archive_1, ..., archive_n] in set order
- Non-zero exit code is NOT a failure; only spawn-time errors are
- No timeout: an unresponsive viewer blocks the caller
"""

import logging
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import EnvironmentNotConfiguredError, ToolLaunchError, ToolNotFoundError
from .process_streams import wait_and_capture_stderr
from .results import ExternalProcessOutcome

logger = logging.getLogger(__name__)

VSD_RELATIVE_PATH = ("tools", "vsd", "bin", "vsd")
WINDOWS_SCRIPT_SUFFIX = ".bat"

GEODE_HOME_NOT_FOUND_MESSAGE = (
    "The GEODE_HOME environment variable must be set to the installation "
    "directory to start VSD."
)
VSD_NOT_FOUND_MESSAGE = (
    "The location of VSD could not be found.  Please ensure VSD was properly "
    "installed under Geode home ({})."
)


def get_path_to_vsd(geode_home: Optional[str], platform: Optional[str] = None) -> str:
    """
    Resolve the VSD executable path under the installation root.

    Args:
        geode_home: Installation root. Blank or None is an error.
        platform: sys.platform value to resolve for (defaults to the host)

    Raises:
        EnvironmentNotConfiguredError: If geode_home is absent or blank
    """
    if geode_home is None or not geode_home.strip():
        raise EnvironmentNotConfiguredError(GEODE_HOME_NOT_FOUND_MESSAGE)

    vsd_path = os.path.join(geode_home, *VSD_RELATIVE_PATH)

    if (platform or sys.platform) == "win32":
        vsd_path += WINDOWS_SCRIPT_SUFFIX

    return vsd_path


class ToolLauncher:
    """
    Launches an external tool over a list of archive files.

    One process per launch. Standard output is discarded; standard error is
    captured in full.
    """

    def __init__(self, tool_path: str, install_root: Optional[str] = None):
        self.tool_path = tool_path
        self.install_root = install_root

    @classmethod
    def for_vsd(cls, geode_home: Optional[str]) -> "ToolLauncher":
        return cls(get_path_to_vsd(geode_home), install_root=geode_home)

    def check_tool(self) -> None:
        """
        Raises:
            ToolNotFoundError: If the tool path does not exist
        """
        if not Path(self.tool_path).exists():
            raise ToolNotFoundError(
                VSD_NOT_FOUND_MESSAGE.format(self.install_root or self.tool_path),
                self.tool_path,
            )

    def create_command_line(self, archive_files: Iterable[str]) -> List[str]:
        """Build [tool_path, *archive_files], preserving the given order."""
        command_line = [self.tool_path]
        command_line.extend(archive_files)
        return command_line

    def run(self, archive_files: Iterable[str]) -> ExternalProcessOutcome:
        """
        Start the tool and wait for it to finish.

        Returns an outcome for any process that launched, whatever its exit
        code. Spawn-time OS errors are recorded in `launch_error`.

        Raises:
            ToolNotFoundError: If the tool does not exist (nothing is spawned)
        """
        self.check_tool()

        command_line = self.create_command_line(archive_files)
        started_at = datetime.now()
        logger.info(f"[VSD] Executing: {' '.join(command_line)}")

        try:
            process = subprocess.Popen(
                command_line,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.error(f"[VSD] Failed to start {self.tool_path}: {e}")
            return ExternalProcessOutcome(
                command_line=command_line,
                launch_error=str(e),
                started_at=started_at,
                completed_at=datetime.now(),
            )

        logger.info(f"[VSD] Started PID {process.pid}")

        stderr = wait_and_capture_stderr(process)

        logger.info(f"[VSD] PID {process.pid} exited with code {process.returncode}")

        return ExternalProcessOutcome(
            command_line=command_line,
            stderr=stderr,
            exit_code=process.returncode,
            pid=process.pid,
            started_at=started_at,
            completed_at=datetime.now(),
        )

    def launch(self, archive_files: Iterable[str]) -> ExternalProcessOutcome:
        """
        Like run(), but spawn-time failures raise.

        Raises:
            ToolNotFoundError: If the tool does not exist
            ToolLaunchError: If the process could not be started
        """
        outcome = self.run(archive_files)
        if not outcome.succeeded:
            raise ToolLaunchError(
                f"Unable to start {self.tool_path}: {outcome.launch_error}"
            )
        return outcome
