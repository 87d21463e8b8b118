"""
File manager facade.

Bundles the file operations and the search engine behind one object so the
command-line front end has a single collaborator.
"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from .models.config import ManagerConfig
from .models.entries import count_files, describe_entry, entry_size
from .models.search import SearchOutcome
from .tools.operations import FileOperations
from .tools.search_engine import SearchEngine


class FileManager:
    """
    High-level file manager used by the interactive menu.

    Attributes:
        config: Application configuration
        operations: Plain file and folder operations
        engine: Mask search engine writing to ``stream``
    """

    def __init__(self, config: Optional[ManagerConfig] = None, stream: Optional[TextIO] = None):
        self.config = config or ManagerConfig()
        self.stream = stream if stream is not None else sys.stdout
        self.operations = FileOperations()
        self.engine = SearchEngine(stream=self.stream, config=self.config.search)

    def search(self, pattern: str, path: Union[str, Path]) -> SearchOutcome:
        """Search ``path`` for entries matching ``pattern``; blocks until finished."""
        return self.engine.search(pattern, path)

    def display_contents(self, path: Optional[Union[str, Path]] = None) -> List[str]:
        """List a directory, defaulting to the configured start directory."""
        return self.operations.display_contents(path if path is not None else self.config.display.start_directory)

    def describe(self, name: Union[str, Path]) -> List[str]:
        """
        Indented ``Folder:``/``File:`` lines for an item and its descendants,
        followed by a ``<n> files, <size> bytes`` summary line.
        """
        tree = self.operations.build_tree(name)
        lines = describe_entry(tree)
        lines.append(f"{count_files(tree)} files, {entry_size(tree)} bytes")
        return lines

    def create_file(self, name: str) -> str:
        return self.operations.create_file(name)

    def create_folder(self, name: str) -> str:
        return self.operations.create_folder(name)

    def delete_item(self, name: str) -> str:
        return self.operations.delete_item(name)

    def rename_item(self, old_name: str, new_name: str) -> str:
        return self.operations.rename_item(old_name, new_name)

    def copy_item(self, source: str, destination: str) -> str:
        return self.operations.copy_item(source, destination)

    def move_item(self, source: str, destination: str) -> str:
        return self.operations.move_item(source, destination)

    def calc_size(self, name: str) -> int:
        return self.operations.calc_size(name)
