"""
Archive resolution models.

ArchiveFileSet is the validated, ordered input to VSD command-line
construction. ResolutionResult distinguishes a resolved set from a tagged
failure so callers handle both outcomes explicitly.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from .errors import (
    ArchiveResolutionError,
    InvalidFileExtensionError,
    PathNotFoundError,
)


@dataclass(frozen=True)
class ArchiveFileSet:
    """
    Sorted, string-unique set of statistics archive paths.

    Uniqueness is by exact string. "stats/a.gfs" and "/home/x/stats/a.gfs"
    are two entries even when they name the same file.
    """

    files: Tuple[str, ...] = ()

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "ArchiveFileSet":
        return cls(files=tuple(sorted(set(paths))))

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, path: object) -> bool:
        return path in self.files


class ResolutionFailureKind(str, Enum):
    """
    Why resolution stopped.

    PATH_NOT_FOUND: A top-level path does not exist
    INVALID_FILE_EXTENSION: A top-level file is not a .gfs archive
    """

    PATH_NOT_FOUND = "path_not_found"
    INVALID_FILE_EXTENSION = "invalid_file_extension"


_FAILURE_ERRORS = {
    ResolutionFailureKind.PATH_NOT_FOUND: PathNotFoundError,
    ResolutionFailureKind.INVALID_FILE_EXTENSION: InvalidFileExtensionError,
}


@dataclass(frozen=True)
class ResolutionFailure:
    kind: ResolutionFailureKind
    message: str
    path: str

    def to_error(self) -> ArchiveResolutionError:
        return _FAILURE_ERRORS[self.kind](self.message, self.path)


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of resolving user paths into an ArchiveFileSet.

    Exactly one of `files` (on success) or `failure` is meaningful. A failed
    result never carries a partial set.
    """

    files: ArchiveFileSet = field(default_factory=ArchiveFileSet)
    failure: Optional[ResolutionFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, files: ArchiveFileSet) -> "ResolutionResult":
        return cls(files=files)

    @classmethod
    def failed(
        cls, kind: ResolutionFailureKind, message: str, path: str
    ) -> "ResolutionResult":
        return cls(failure=ResolutionFailure(kind=kind, message=message, path=path))

    def unwrap(self) -> ArchiveFileSet:
        """
        Return the resolved set.

        Raises:
            PathNotFoundError: A top-level path did not exist
            InvalidFileExtensionError: A top-level file had the wrong extension
        """
        if self.failure is not None:
            raise self.failure.to_error()
        return self.files
