"""Command-line interface for the file manager.

Running ``filemanager`` without a subcommand starts the interactive menu.
The subcommands expose single operations (search, size, listing) for use
from scripts.
"""

from __future__ import annotations

import sys
import logging
from pathlib import Path
from typing import Callable, Dict, Optional

import click

from .config.parser import ConfigurationError, create_config_template, load_config
from .errors import OperationError
from .manager import FileManager
from .models.config import LoggingConfig


logger = logging.getLogger(__name__)

MENU_OPTIONS = [
    "1. Display Contents",
    "2. Create File",
    "3. Create Folder",
    "4. Delete File/Folder",
    "5. Rename File/Folder",
    "6. Copy File/Folder",
    "7. Move File/Folder",
    "8. Calculate Size",
    "9. Search by Mask",
    "0. Exit",
]


def configure_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """
    Route log records to stderr or the configured log file.

    Missing parent directories of the log file are created.

    Raises:
        OSError: If the log file cannot be opened
    """
    level = logging.DEBUG if verbose else config.get_level()
    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(level=level, format=config.format, filename=config.file, force=True)
    else:
        logging.basicConfig(level=level, format=config.format, stream=sys.stderr, force=True)


def get_input(prompt: str) -> str:
    """Read one line of free text; empty answers are allowed."""
    return click.prompt(prompt, default='', show_default=False, prompt_suffix='')


def _display_contents(fm: FileManager) -> None:
    click.echo("File Manager Contents: \n")
    for path in fm.display_contents():
        click.echo(path)


def _create_file(fm: FileManager) -> None:
    click.echo(fm.create_file(get_input("Enter file name: ")))


def _create_folder(fm: FileManager) -> None:
    click.echo(fm.create_folder(get_input("Enter folder name: ")))


def _delete_item(fm: FileManager) -> None:
    click.echo(fm.delete_item(get_input("Enter name of file/folder to delete: ")))


def _rename_item(fm: FileManager) -> None:
    name = get_input("Enter current name: ")
    new_name = get_input("Enter new name: ")
    click.echo(fm.rename_item(name, new_name))


def _copy_item(fm: FileManager) -> None:
    source = get_input("Enter source name: ")
    destination = get_input("Enter destination name: ")
    click.echo(fm.copy_item(source, destination))


def _move_item(fm: FileManager) -> None:
    source = get_input("Enter source name: ")
    destination = get_input("Enter destination name: ")
    click.echo(fm.move_item(source, destination))


def _calc_size(fm: FileManager) -> None:
    name = get_input("Enter name to calculate size: ")
    click.echo(f"Size: {fm.calc_size(name)} bytes")


def _search(fm: FileManager) -> None:
    pattern = get_input("Enter search pattern: ")
    path = get_input("Enter path to search in: ")
    fm.search(pattern, path)


MENU_ACTIONS: Dict[int, Callable[[FileManager], None]] = {
    1: _display_contents,
    2: _create_file,
    3: _create_folder,
    4: _delete_item,
    5: _rename_item,
    6: _copy_item,
    7: _move_item,
    8: _calc_size,
    9: _search,
}


def run_menu(fm: FileManager) -> None:
    """Show the menu and dispatch choices until the user picks 0."""
    while True:
        for line in MENU_OPTIONS:
            click.echo(line)

        raw_choice = click.prompt('', default='', show_default=False, prompt_suffix='')
        try:
            choice = int(raw_choice.strip())
        except ValueError:
            choice = None

        if choice == 0:
            click.echo("Exiting...")
            return

        action = MENU_ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Try again.")
            continue

        try:
            action(fm)
        except OperationError as e:
            logger.warning(str(e))
            click.echo(str(e))


@click.group(invoke_without_command=True)
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), default=None, help='Path to configuration file.')
@click.option('--verbose', is_flag=True, help='Enable debug logging.')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool) -> None:
    """Simple File Manager CLI."""
    try:
        result = load_config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    try:
        configure_logging(result.config.logging, verbose)
    except OSError as e:
        raise click.ClickException(f"Cannot open log file {result.config.logging.file}: {e}")
    for warning in result.warnings:
        logger.info(warning)

    ctx.obj = FileManager(result.config, stream=sys.stdout)
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


@cli.command()
@click.pass_obj
def menu(fm: FileManager) -> None:
    """Start the interactive menu."""
    run_menu(fm)


@cli.command()
@click.argument('pattern')
@click.argument('path', default='.')
@click.pass_obj
def search(fm: FileManager, pattern: str, path: str) -> None:
    """Search PATH for names matching the wildcard PATTERN."""
    outcome = fm.search(pattern, path)
    if not outcome.succeeded:
        sys.exit(1)


@cli.command()
@click.argument('name')
@click.pass_obj
def size(fm: FileManager, name: str) -> None:
    """Print the size of a file or directory in bytes."""
    try:
        click.echo(f"Size: {fm.calc_size(name)} bytes")
    except OperationError as e:
        raise click.ClickException(str(e))


@cli.command(name='ls')
@click.argument('path', required=False)
@click.pass_obj
def list_contents(fm: FileManager, path: Optional[str]) -> None:
    """List the contents of PATH (defaults to the start directory)."""
    try:
        for entry in fm.display_contents(path):
            click.echo(entry)
    except OperationError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument('name')
@click.pass_obj
def tree(fm: FileManager, name: str) -> None:
    """Show a file or folder with all of its descendants."""
    try:
        for line in fm.describe(name):
            click.echo(line)
    except OperationError as e:
        raise click.ClickException(str(e))


@cli.command(name='init-config')
@click.argument('output', type=click.Path(dir_okay=False))
def init_config(output: str) -> None:
    """Write a commented configuration template to OUTPUT."""
    try:
        create_config_template(output)
    except ConfigurationError as e:
        raise click.ClickException(str(e))
    click.echo(f"Configuration template written to {output}")


def main() -> None:
    cli()


if __name__ == '__main__':  # pragma: no cover
    main()
