"""
Filesystem providers for the file manager.

The search engine only needs four capabilities from the filesystem: checking
existence, checking for a directory, listing a tree lazily in pre-order and
reading a file size. ``FilesystemProvider`` defines that contract and
``LocalFilesystem`` implements it for the local disk.
"""

import abc
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FsEntry:
    """
    One entry produced by a recursive listing.

    Attributes:
        path: Full path of the entry, built from the listing root
        name: Final path component
        is_dir: Whether the entry is a directory
    """
    path: str
    name: str
    is_dir: bool = False


class FilesystemProvider(abc.ABC):
    """Abstract Base Class for the filesystem capabilities used by search."""

    @abc.abstractmethod
    def exists(self, path: PathLike) -> bool:
        """Check whether a path exists."""
        pass

    @abc.abstractmethod
    def is_directory(self, path: PathLike) -> bool:
        """Check whether a path is a directory."""
        pass

    @abc.abstractmethod
    def list_recursive(self, path: PathLike) -> Iterator[FsEntry]:
        """Lazily yield every entry below a directory in pre-order.

        Args:
            path: Directory to list.

        Yields:
            FsEntry objects; a directory is yielded before its children.

        Raises:
            OSError: At any point while the sequence is being produced.
        """
        pass

    @abc.abstractmethod
    def file_size(self, path: PathLike) -> int:
        """Size of a file in bytes.

        Raises:
            OSError: If the file cannot be inspected.
        """
        pass


class LocalFilesystem(FilesystemProvider):
    """
    Filesystem provider backed by ``os.scandir``.

    Children are listed in the order the operating system returns them.
    Symlinked directories are reported as entries but not descended into
    unless ``follow_symlinks`` is set.
    """

    def __init__(self, follow_symlinks: bool = False):
        self.follow_symlinks = follow_symlinks

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: PathLike) -> bool:
        return os.path.isdir(path)

    def list_recursive(self, path: PathLike) -> Iterator[FsEntry]:
        logger.debug(f"Listing directory tree: {path}")
        yield from self._scan(os.fspath(path))

    def _scan(self, directory: str) -> Iterator[FsEntry]:
        with os.scandir(directory) as it:
            for dir_entry in it:
                is_dir = dir_entry.is_dir(follow_symlinks=True)
                yield FsEntry(path=dir_entry.path, name=dir_entry.name, is_dir=is_dir)

                if is_dir and (self.follow_symlinks or not dir_entry.is_symlink()):
                    yield from self._scan(dir_entry.path)

    def file_size(self, path: PathLike) -> int:
        return os.path.getsize(path)
