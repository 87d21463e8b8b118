"""
Unit tests for the command-line interface.

Tests the interactive menu dispatch and the one-shot subcommands using
click's CliRunner.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

import yaml
from click.testing import CliRunner

from filemanager.cli import cli


class TestCli:
    """Test cases for the click entry point."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_root = Path(self.temp_dir)
        (self.test_root / "work").mkdir()
        (self.test_root / "work" / "log1.txt").write_text("one")
        (self.test_root / "work" / "log2.txt").write_text("two")
        (self.test_root / "work" / "readme.md").write_text("readme")

        self.config_path = self.test_root / "filemanager.yaml"
        self.config_path.write_text(yaml.dump({
            'search': {'progress_interval': 0.01},
            'display': {'start_directory': str(self.test_root / "work")},
            'logging': {'file': str(self.test_root / "filemanager.log")},
        }))
        self.runner = CliRunner()

    def teardown_method(self):
        """Clean up test fixtures."""
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
            handler.close()
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _invoke(self, args, input_text=None):
        return self.runner.invoke(cli, ['--config', str(self.config_path)] + args, input=input_text)

    def test_menu_exit(self):
        """Test that choosing 0 leaves the menu."""
        result = self._invoke([], "0\n")

        assert result.exit_code == 0
        assert "9. Search by Mask" in result.output
        assert "Exiting..." in result.output

    def test_menu_invalid_choice(self):
        """Test that unknown choices are reported and the menu repeats."""
        result = self._invoke(['menu'], "42\nabc\n0\n")

        assert result.exit_code == 0
        assert result.output.count("Invalid choice. Try again.") == 2
        assert result.output.count("1. Display Contents") == 3

    def test_menu_display_contents(self):
        """Test listing the configured start directory."""
        result = self._invoke([], "1\n0\n")

        assert "File Manager Contents:" in result.output
        assert "readme.md" in result.output

    def test_menu_create_and_size(self):
        """Test creating a folder then sizing a file through prompts."""
        folder = self.test_root / "made"
        target = self.test_root / "work" / "log1.txt"
        result = self._invoke([], f"3\n{folder}\n8\n{target}\n0\n")

        assert folder.is_dir()
        assert f"Folder created: {folder}" in result.output
        assert "Size: 3 bytes" in result.output

    def test_menu_reports_operation_errors(self):
        """Test that failed operations are shown and the menu continues."""
        missing = self.test_root / "ghost"
        result = self._invoke([], f"4\n{missing}\n0\n")

        assert result.exit_code == 0
        assert f"Item not found: {missing}" in result.output
        assert "Exiting..." in result.output

    def test_menu_search(self):
        """Test searching by mask from the menu."""
        work = self.test_root / "work"
        result = self._invoke([], f"9\n*.txt\n{work}\n0\n")

        assert f"Match found: {work / 'log1.txt'}" in result.output
        assert f"Match found: {work / 'log2.txt'}" in result.output
        assert "readme.md" not in result.output.split("Searching for")[1]
        assert "Search complete." in result.output

    def test_search_command(self):
        """Test the one-shot search subcommand."""
        result = self._invoke(['search', '*.md', str(self.test_root / "work")])

        assert result.exit_code == 0
        assert "Match found:" in result.output
        assert "readme.md" in result.output

    def test_search_command_invalid_path(self):
        """Test that an invalid root gives a non-zero exit code."""
        missing = self.test_root / "missing"
        result = self._invoke(['search', '*', str(missing)])

        assert result.exit_code == 1
        assert f"Invalid path: \n{missing}" in result.output

    def test_size_command(self):
        """Test the size subcommand."""
        result = self._invoke(['size', str(self.test_root / "work")])

        assert result.exit_code == 0
        assert "Size: 12 bytes" in result.output

    def test_size_command_missing(self):
        """Test the size subcommand on a missing item."""
        result = self._invoke(['size', str(self.test_root / "ghost")])

        assert result.exit_code == 1
        assert "Item not found" in result.output

    def test_ls_command(self):
        """Test the ls subcommand."""
        result = self._invoke(['ls'])

        assert result.exit_code == 0
        assert "log1.txt" in result.output

    def test_tree_command(self):
        """Test the tree subcommand."""
        result = self._invoke(['tree', str(self.test_root / "work")])

        assert result.exit_code == 0
        assert "Folder: work" in result.output
        assert "  File: readme.md" in result.output
        assert "3 files, 12 bytes" in result.output

    def test_init_config(self):
        """Test writing a configuration template."""
        output = self.test_root / "template.yaml"
        result = self._invoke(['init-config', str(output)])

        assert result.exit_code == 0
        assert output.exists()

    def test_bad_config(self):
        """Test that an invalid configuration file stops the CLI."""
        self.config_path.write_text("search: [broken")
        result = self._invoke(['ls'])

        assert result.exit_code == 1
        assert "Invalid YAML syntax" in result.output

    def test_log_file_in_missing_directory(self):
        """Test that the log file's parent directories are created on startup."""
        log_file = self.test_root / "nodir" / "deeper" / "filemanager.log"
        self.config_path.write_text(yaml.dump({
            'display': {'start_directory': str(self.test_root / "work")},
            'logging': {'file': str(log_file)},
        }))
        result = self._invoke(['ls'])

        assert result.exit_code == 0
        assert "log1.txt" in result.output
        assert log_file.parent.is_dir()

    def test_unopenable_log_file(self):
        """Test that a log file path that cannot be opened stops the CLI cleanly."""
        self.config_path.write_text(yaml.dump({
            'logging': {'file': str(self.test_root / "work")},
        }))
        result = self._invoke(['ls'])

        assert result.exit_code == 1
        assert "Cannot open log file" in result.output

    def test_menu_survives_nul_byte_in_name(self):
        """Test that a name the OS rejects outright is reported and the menu continues."""
        result = self._invoke([], "2\na\x00b\n3\nc\x00d\n0\n")

        assert result.exit_code == 0
        assert "Cannot create file" in result.output
        assert "Cannot create folder" in result.output
        assert "Exiting..." in result.output
