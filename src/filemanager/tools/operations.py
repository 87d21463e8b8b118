"""
File and folder operations for the file manager.

Each operation logs what it did and returns the message shown to the user.
Operations that cannot proceed raise ``OperationError``.
"""

import os
import shutil
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..errors import OperationError
from ..models.entries import DirectoryEntry, FileEntry, entry_name, entry_size
from .fs_provider import FilesystemProvider, LocalFilesystem


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileOperations:
    """
    Create, delete, rename, copy, move, size and list filesystem items.

    Relative names are resolved against ``base_dir`` when one is given,
    otherwise against the process working directory.
    """

    def __init__(self, base_dir: Optional[PathLike] = None,
                 provider: Optional[FilesystemProvider] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.provider = provider or LocalFilesystem()

    def _resolve(self, name: PathLike) -> Path:
        path = Path(name).expanduser()
        if self.base_dir is not None and not path.is_absolute():
            return self.base_dir / path
        return path

    def create_file(self, name: PathLike) -> str:
        """Create an empty file, truncating it if it already exists."""
        path = self._resolve(name)
        try:
            with open(path, 'w', encoding='utf-8'):
                pass
        except (OSError, ValueError) as e:
            raise OperationError(f"Cannot create file {name}: {e}") from e

        logger.info(f"Created file {path}")
        return f"File created: {name}"

    def create_folder(self, name: PathLike) -> str:
        """Create a single directory."""
        path = self._resolve(name)
        try:
            path.mkdir()
        except FileExistsError as e:
            raise OperationError(f"Item already exists: {name}") from e
        except (OSError, ValueError) as e:
            raise OperationError(f"Cannot create folder {name}: {e}") from e

        logger.info(f"Created folder {path}")
        return f"Folder created: {name}"

    def delete_item(self, name: PathLike) -> str:
        """Delete a file or a whole directory tree."""
        path = self._resolve(name)
        if not os.path.lexists(path):
            raise OperationError(f"Item not found: {name}")

        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except (OSError, ValueError) as e:
            raise OperationError(f"Cannot delete {name}: {e}") from e

        logger.info(f"Deleted {path}")
        return f"Item deleted: {name}"

    def rename_item(self, old_name: PathLike, new_name: PathLike) -> str:
        """Rename a file or directory."""
        old_path = self._resolve(old_name)
        if not os.path.lexists(old_path):
            raise OperationError(f"Item not found: {old_name}")

        try:
            os.rename(old_path, self._resolve(new_name))
        except (OSError, ValueError) as e:
            raise OperationError(f"Cannot rename {old_name}: {e}") from e

        logger.info(f"Renamed {old_path} to {new_name}")
        return f"Item renamed from {old_name} to {new_name}"

    def copy_item(self, source: PathLike, destination: PathLike) -> str:
        """
        Copy a file or directory tree.

        If ``destination`` is an existing directory the item is copied into it
        under its own name.
        """
        src_path = self._resolve(source)
        if not src_path.exists():
            raise OperationError(f"Source not found: {source}")

        dest_path = self._target_path(src_path, destination)
        try:
            if src_path.is_dir():
                shutil.copytree(src_path, dest_path)
            else:
                shutil.copy2(src_path, dest_path)
        except (OSError, ValueError, shutil.Error) as e:
            raise OperationError(f"Cannot copy {source}: {e}") from e

        logger.info(f"Copied {src_path} to {dest_path}")
        return f"Item copied from {source} to {dest_path}"

    def move_item(self, source: PathLike, destination: PathLike) -> str:
        """
        Move a file or directory.

        If ``destination`` is an existing directory the item is moved into it
        under its own name.
        """
        src_path = self._resolve(source)
        if not os.path.lexists(src_path):
            raise OperationError(f"Source not found: {source}")

        dest_path = self._target_path(src_path, destination)
        try:
            shutil.move(str(src_path), str(dest_path))
        except (OSError, ValueError, shutil.Error) as e:
            raise OperationError(f"Cannot move {source}: {e}") from e

        logger.info(f"Moved {src_path} to {dest_path}")
        return f"Item moved from {source} to {dest_path}"

    def _target_path(self, src_path: Path, destination: PathLike) -> Path:
        dest_path = self._resolve(destination)
        if dest_path.is_dir():
            return dest_path / src_path.name
        return dest_path

    def calc_size(self, name: PathLike) -> int:
        """
        Size in bytes of a file, or of all files below a directory.

        Symlinked files count at the size of their target. Symlinked
        directories below the item are not descended into.

        Raises:
            OperationError: If the item does not exist or cannot be read
        """
        return entry_size(self.build_tree(name))

    def display_contents(self, path: Optional[PathLike] = None) -> List[str]:
        """
        List the direct children of a directory.

        Args:
            path: Directory to list; defaults to ``base_dir`` or the working directory

        Returns:
            Child paths in the order the operating system returns them
        """
        directory = self._resolve(path) if path is not None else (self.base_dir or Path('.'))
        try:
            with os.scandir(directory) as it:
                return [entry.path for entry in it]
        except (OSError, ValueError) as e:
            raise OperationError(f"Cannot list {directory}: {e}") from e

    def build_tree(self, name: PathLike) -> Union[FileEntry, DirectoryEntry]:
        """
        Build a file/folder snapshot of an item for display and sizing.

        The item itself is followed if it is a symlink. Symlinked directories
        further down are recorded as files of size zero.
        """
        path = self._resolve(name)
        if not self.provider.exists(path):
            raise OperationError(f"Item not found: {name}")

        try:
            if self.provider.is_directory(path):
                return self._build_directory(path)
            return self._build_entry(path)
        except (OSError, ValueError) as e:
            raise OperationError(f"Cannot read {name}: {e}") from e

    def _build_directory(self, path: Path) -> DirectoryEntry:
        with os.scandir(path) as it:
            children = [self._build_entry(Path(entry.path)) for entry in it]
        return DirectoryEntry(name=entry_name(path), path=str(path), children=children)

    def _build_entry(self, path: Path) -> Union[FileEntry, DirectoryEntry]:
        if path.is_symlink() and path.is_dir():
            return FileEntry(name=entry_name(path), path=str(path), size=0)
        if path.is_dir():
            return self._build_directory(path)

        size = self.provider.file_size(path) if path.is_file() else 0
        return FileEntry(name=entry_name(path), path=str(path), size=size)
