"""
Statistics archive (.gfs) discovery and validation.
"""

from .errors import ArchiveResolutionError, InvalidFileExtensionError, PathNotFoundError
from .filters import ARCHIVE_EXTENSION, is_archive_file, is_archive_file_or_directory
from .models import (
    ArchiveFileSet,
    ResolutionFailure,
    ResolutionFailureKind,
    ResolutionResult,
)
from .resolver import absolute_form, collect_archive_files, resolve_archive_files

__all__ = [
    "ARCHIVE_EXTENSION",
    "ArchiveFileSet",
    "ArchiveResolutionError",
    "InvalidFileExtensionError",
    "PathNotFoundError",
    "ResolutionFailure",
    "ResolutionFailureKind",
    "ResolutionResult",
    "absolute_form",
    "collect_archive_files",
    "is_archive_file",
    "is_archive_file_or_directory",
    "resolve_archive_files",
]
