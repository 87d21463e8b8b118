"""
Unit tests for file/folder entry models.

Tests the recursive size and description helpers over the two entry kinds.
"""

import pytest
from pydantic import ValidationError

from filemanager.models.entries import (
    DirectoryEntry,
    FileEntry,
    count_files,
    describe_entry,
    entry_name,
    entry_size
)


def _sample_tree() -> DirectoryEntry:
    return DirectoryEntry(
        name="project",
        path="/project",
        children=[
            FileEntry(name="setup.py", path="/project/setup.py", size=100),
            DirectoryEntry(
                name="src",
                path="/project/src",
                children=[FileEntry(name="main.py", path="/project/src/main.py", size=50)]
            ),
            DirectoryEntry(name="empty", path="/project/empty"),
        ]
    )


class TestEntries:
    """Test cases for entry helpers."""

    def test_entry_size(self):
        """Test that directory size is the sum of all descendant files."""
        tree = _sample_tree()
        assert entry_size(tree) == 150
        assert entry_size(tree.children[2]) == 0
        assert entry_size(tree.children[0]) == 100

    def test_describe_entry(self):
        """Test the indented Folder/File rendering."""
        assert describe_entry(_sample_tree()) == [
            "Folder: project",
            "  File: setup.py",
            "  Folder: src",
            "    File: main.py",
            "  Folder: empty",
        ]

    def test_count_files(self):
        """Test counting file leaves."""
        assert count_files(_sample_tree()) == 2

    def test_children_parsed_from_dicts(self):
        """Test that child kinds are selected by the kind field."""
        tree = DirectoryEntry.model_validate({
            'name': 'root',
            'path': '/root',
            'children': [
                {'kind': 'file', 'name': 'a', 'path': '/root/a', 'size': 3},
                {'kind': 'directory', 'name': 'b', 'path': '/root/b', 'children': []},
            ]
        })

        assert isinstance(tree.children[0], FileEntry)
        assert isinstance(tree.children[1], DirectoryEntry)
        assert entry_size(tree) == 3

    def test_negative_size_rejected(self):
        """Test that file sizes cannot be negative."""
        with pytest.raises(ValidationError):
            FileEntry(name="a", path="/a", size=-1)

    def test_entry_name(self):
        """Test display names for ordinary paths and roots."""
        assert entry_name("/tmp/data") == "data"
        assert entry_name("/") == "/"
