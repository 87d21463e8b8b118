"""
Filesystem entry models for the file manager.

An entry is either a file with a size or a directory holding an ordered
sequence of child entries. Display and sizing are plain recursive functions
over the two variants.
"""

from typing import List, Literal, Union, Annotated
from pathlib import Path
from pydantic import BaseModel, Field


class FileEntry(BaseModel):
    """A regular file (or anything that is not a directory)."""

    kind: Literal['file'] = 'file'
    name: str = Field(..., description="Final path component")
    path: str = Field(..., description="Full path of the file")
    size: int = Field(0, ge=0, description="File size in bytes")


class DirectoryEntry(BaseModel):
    """A directory and its children in listing order."""

    kind: Literal['directory'] = 'directory'
    name: str = Field(..., description="Final path component")
    path: str = Field(..., description="Full path of the directory")
    children: List['Entry'] = Field(default_factory=list, description="Child entries")


Entry = Annotated[Union[FileEntry, DirectoryEntry], Field(discriminator='kind')]

DirectoryEntry.model_rebuild()


def entry_size(entry: Union[FileEntry, DirectoryEntry]) -> int:
    """Total size in bytes of a file or of every file below a directory."""
    if isinstance(entry, FileEntry):
        return entry.size
    return sum(entry_size(child) for child in entry.children)


def describe_entry(entry: Union[FileEntry, DirectoryEntry], indent: str = "  ", _depth: int = 0) -> List[str]:
    """
    Render an entry and its descendants as indented display lines.

    Args:
        entry: Entry to describe
        indent: String repeated once per nesting level

    Returns:
        Lines such as ``Folder: src`` followed by ``  File: main.py``
    """
    prefix = indent * _depth
    if isinstance(entry, FileEntry):
        return [f"{prefix}File: {entry.name}"]

    lines = [f"{prefix}Folder: {entry.name}"]
    for child in entry.children:
        lines.extend(describe_entry(child, indent, _depth + 1))
    return lines


def count_files(entry: Union[FileEntry, DirectoryEntry]) -> int:
    """Number of file leaves below (or at) an entry."""
    if isinstance(entry, FileEntry):
        return 1
    return sum(count_files(child) for child in entry.children)


def entry_name(path: Union[str, Path]) -> str:
    """Display name for a path, falling back to the path itself for roots."""
    path = Path(path)
    return path.name or str(path)
