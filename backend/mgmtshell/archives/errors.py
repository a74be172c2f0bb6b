"""
Archive resolution errors.

Raised only when a ResolutionResult is unwrapped. The resolver itself
reports failures as tagged results.
"""


class ArchiveResolutionError(Exception):
    """Base exception for statistics archive resolution failures."""

    def __init__(self, message: str, path: str):
        self.message = message
        self.path = path
        super().__init__(message)


class PathNotFoundError(ArchiveResolutionError):
    """A user-specified path does not exist."""

    pass


class InvalidFileExtensionError(ArchiveResolutionError):
    """A user-specified file does not end with the archive extension."""

    pass
