"""
Path predicates for statistics archive discovery.
"""

from pathlib import Path

# Case-sensitive; compared against the end of the path string so that a
# file named exactly ".gfs" still qualifies.
ARCHIVE_EXTENSION = ".gfs"


def is_archive_file(path: Path) -> bool:
    """True for an existing regular file whose path ends with .gfs."""
    return path.is_file() and str(path.absolute()).endswith(ARCHIVE_EXTENSION)


def is_archive_file_or_directory(path: Path) -> bool:
    """True for directories (candidates for descent) and archive files."""
    return path.is_dir() or is_archive_file(path)
