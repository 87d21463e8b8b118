"""
Exception hierarchy for the file manager.

Search failures carry the ``SearchStatus`` they are reported under so that
the search engine can turn any of them into a status line at its boundary.
"""

from typing import Optional

from .models.search import SearchStatus


class FileManagerError(Exception):
    """Base class for all file manager errors."""
    pass


class SearchError(FileManagerError):
    """Raised when a search cannot start or has to stop."""

    status: SearchStatus = SearchStatus.UNKNOWN_ERROR

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidPathError(SearchError):
    """The search root does not exist or is not a directory."""

    status = SearchStatus.INVALID_PATH


class PatternError(SearchError):
    """The regular expression built from a mask was rejected."""

    status = SearchStatus.PATTERN_ERROR


class FilesystemError(SearchError):
    """An I/O or permission failure while enumerating entries."""

    status = SearchStatus.FILESYSTEM_ERROR


class OperationError(FileManagerError):
    """Raised when a file operation cannot be carried out."""
    pass
