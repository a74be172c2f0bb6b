"""
start vsd: launch the Visual Statistics Display over archive files.

Shell-only command. Resolves the user's files and directories to .gfs
archives, starts VSD, and waits for it to exit. Anything VSD writes to
standard error is returned as info lines.

Error boundary:
- Resolution and launch precondition failures -> shell client error result
- MemoryError / RecursionError -> logged and re-raised
- Anything else -> error result with the rendered exception
"""

import logging
import os
from typing import Callable, Iterable, Mapping, Optional

from ..archives import ArchiveResolutionError, resolve_archive_files
from ..config import ShellSettings
from ..execution import ToolLauncher, ToolLaunchError
from ..response import CommandExecutionContext
from ..results import (
    CommandResult,
    InfoResultData,
    create_shell_client_error_result,
)

logger = logging.getLogger(__name__)

START_VSD_COMMAND = "start vsd"
START_VSD_FILE_OPTION = "file"

START_VSD_RUN_MESSAGE = "Launched Visual Statistics Display (VSD); waiting for it to exit..."
START_VSD_ERROR_MESSAGE = "An error occurred while launching VSD: {}"


def start_vsd(
    archive_pathnames: Optional[Iterable[str]],
    settings: ShellSettings,
    output: Callable[[str], None] = print,
    launcher: Optional[ToolLauncher] = None,
) -> CommandResult:
    """
    Launch VSD over the given statistics archive files.

    Args:
        archive_pathnames: .gfs files and/or directories to search
        settings: Shell settings (installation root, debug flag)
        output: Shell output writer for progress messages
        launcher: Pre-built launcher; derived from settings when omitted

    Returns:
        Info result carrying VSD's standard error, or an error result.
    """
    try:
        launcher = launcher or ToolLauncher.for_vsd(settings.geode_home)
        launcher.check_tool()

        resolution = resolve_archive_files(archive_pathnames)
        if not resolution.ok:
            return create_shell_client_error_result(resolution.failure.message)

        command_line = launcher.create_command_line(resolution.files)
        _trace_command_line(command_line, settings, output)

        output(START_VSD_RUN_MESSAGE)

        outcome = launcher.launch(resolution.files)

        info = InfoResultData()
        if outcome.stderr.strip():
            info.add_line(os.linesep)
            info.add_line(outcome.stderr)
        return info.build()

    except (ToolLaunchError, ArchiveResolutionError) as e:
        return create_shell_client_error_result(str(e))
    except (MemoryError, RecursionError):
        logger.critical("[Commands] Unrecoverable failure while launching VSD")
        raise
    except Exception as e:
        logger.exception(f"[Commands] start vsd failed: {e}")
        return create_shell_client_error_result(
            START_VSD_ERROR_MESSAGE.format(f"{type(e).__name__}: {e}")
        )


def start_vsd_handler(options: Mapping[str, object], settings: ShellSettings) -> CommandResult:
    """Registry adapter: reads the `file` option (string or list of strings)."""
    files = options.get(START_VSD_FILE_OPTION)
    if isinstance(files, str):
        files = [files]
    return start_vsd(files, settings, output=logger.info)


def _trace_command_line(command_line, settings: ShellSettings, output) -> None:
    line = f"VSD command-line ({command_line})"
    if settings.debug:
        output(line)
    writer = CommandExecutionContext.get_response_writer()
    if writer is not None:
        writer.write_line(line)
