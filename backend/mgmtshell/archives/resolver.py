"""
Statistics archive resolver.

Turns user-supplied file and directory paths into an ArchiveFileSet.

Validation is deliberately asymmetric:
- Explicit top-level files must exist and end with .gfs, or resolution fails
- Files discovered by directory descent are filtered silently

Explicit files keep their literal input form. Discovered files are added in
absolute form: the working directory joined to the path as typed, without
normalization. Deduplication is by exact string, never by file identity.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Set

from .filters import is_archive_file, is_archive_file_or_directory
from .models import ArchiveFileSet, ResolutionFailureKind, ResolutionResult

logger = logging.getLogger(__name__)

PATH_NOT_FOUND_MESSAGE = (
    "The pathname ({}) does not exist.  Please check the path and try again."
)
INVALID_EXTENSION_MESSAGE = (
    "A Statistics Archive File must end with a .gfs file extension."
)


def resolve_archive_files(pathnames: Optional[Iterable[str]]) -> ResolutionResult:
    """
    Resolve user paths into a validated, sorted set of archive files.

    Args:
        pathnames: File or directory paths as typed by the user. None or
            empty yields an empty set.

    Returns:
        ResolutionResult holding the set, or the first failure encountered.
        Resolution stops at the first bad top-level path.
    """
    archive_files: Set[str] = set()

    for pathname in pathnames or ():
        # Path("") means the current directory; an empty name never exists
        if not pathname or not Path(pathname).exists():
            absolute = absolute_form(pathname)
            logger.info(f"[Archives] Path not found: {absolute}")
            return ResolutionResult.failed(
                ResolutionFailureKind.PATH_NOT_FOUND,
                PATH_NOT_FOUND_MESSAGE.format(absolute),
                absolute,
            )

        path = Path(pathname)

        if path.is_file():
            if not is_archive_file(path):
                logger.info(f"[Archives] Rejected non-archive file: {pathname}")
                return ResolutionResult.failed(
                    ResolutionFailureKind.INVALID_FILE_EXTENSION,
                    INVALID_EXTENSION_MESSAGE,
                    pathname,
                )
            archive_files.add(pathname)
        else:
            collect_archive_files(absolute_form(pathname), archive_files)

    files = ArchiveFileSet.from_paths(archive_files)
    logger.debug(f"[Archives] Resolved {len(files)} archive file(s)")
    return ResolutionResult.success(files)


def absolute_form(pathname: str) -> str:
    """
    Absolute string form of a user path, without normalization.

    Relative paths are joined to the working directory as typed, so "./data"
    becomes "<cwd>/./data". Dot components and symlinks are kept.
    """
    if not pathname:
        return os.getcwd()
    if os.path.isabs(pathname):
        return pathname
    return os.path.join(os.getcwd(), pathname)


def collect_archive_files(directory: str, archive_files: Set[str]) -> None:
    """
    Depth-first walk adding every .gfs file under `directory`.

    Discovered paths extend `directory` as given, so an absolute directory
    yields absolute file paths. Non-archive files are skipped without error.
    Paths that are neither directories nor regular files are ignored.
    """
    if not os.path.isdir(directory):
        return

    for entry in Path(directory).iterdir():
        if not is_archive_file_or_directory(entry):
            continue
        entry_path = os.path.join(directory, entry.name)
        if entry.is_dir():
            collect_archive_files(entry_path, archive_files)
        else:
            archive_files.add(entry_path)
