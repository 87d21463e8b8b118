"""
Mask search engine for the file manager.

This module walks a directory tree in pre-order and reports every entry whose
filename matches a wildcard mask. Matches are written to the status stream as
soon as they are found while a progress indicator animates on the same line.
Every failure is turned into a status line at the boundary of ``search``.
"""

import os
import re
import sys
import logging
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO, Union

from ..errors import SearchError, InvalidPathError, PatternError, FilesystemError
from ..models.config import SearchConfig
from ..models.search import MatchEvent, SearchOutcome, SearchRequest, SearchStatus
from .fs_provider import FilesystemProvider, LocalFilesystem
from .mask import compile_mask, matches
from .progress import ProgressIndicator


logger = logging.getLogger(__name__)

COMPLETE_LINE = "\rSearch complete.            \n\n"


class SearchEngine:
    """
    Searches a directory tree for filenames matching a wildcard mask.

    Only one search runs at a time per engine. Each call compiles its own
    pattern and owns its own progress indicator, which is stopped and joined
    before the call reports anything final.
    """

    def __init__(self, provider: Optional[FilesystemProvider] = None,
                 stream: Optional[TextIO] = None,
                 config: Optional[SearchConfig] = None,
                 indicator_factory: Optional[Callable[[], ProgressIndicator]] = None):
        """
        Initialize the search engine.

        Args:
            provider: Filesystem capabilities; defaults to the local disk
            stream: Status output; defaults to ``sys.stdout``
            config: Search settings (progress interval and frames)
            indicator_factory: Builds the progress indicator for each search
        """
        self.config = config or SearchConfig()
        self.provider = provider or LocalFilesystem(follow_symlinks=self.config.follow_symlinks)
        self.stream = stream if stream is not None else sys.stdout
        self.indicator_factory = indicator_factory or self._default_indicator

    def _default_indicator(self) -> ProgressIndicator:
        return ProgressIndicator(
            stream=self.stream,
            interval=self.config.progress_interval,
            frames=self.config.progress_frames,
        )

    def search(self, pattern: str, root: Union[str, Path],
               on_match: Optional[Callable[[MatchEvent], None]] = None) -> SearchOutcome:
        """
        Search ``root`` for entries whose filename matches ``pattern``.

        Never raises for search failures: invalid paths, rejected patterns,
        filesystem errors and anything unexpected are written to the status
        stream and recorded in the returned outcome.

        Args:
            pattern: Wildcard mask
            root: Directory to search in
            on_match: Optional callback invoked for each match as it is found

        Returns:
            SearchOutcome with the terminal status and the matches found
        """
        request = SearchRequest(pattern=pattern, root=os.fspath(root))
        outcome = SearchOutcome(request=request)

        try:
            self._validate_root(request.root)
            compiled = self._compile(request.pattern)

            with self.indicator_factory():
                self._write(f"\nSearching for '{request.pattern}' in path: {request.root}\n")
                for match in self._traverse(compiled, request.root):
                    outcome.matches.append(match)
                    self._write(f"\rMatch found: {match.path}\n")
                    if on_match:
                        on_match(match)

            self._write(COMPLETE_LINE)
            logger.info(f"Search for '{request.pattern}' in {request.root} found {len(outcome.matches)} matches")

        except SearchError as e:
            outcome.status = e.status
            outcome.message = e.message
            self._report(e)

        except Exception as e:
            logger.exception(f"Unexpected error searching {request.root}")
            outcome.status = SearchStatus.UNKNOWN_ERROR
            outcome.message = str(e)
            self._write("An unknown error occurred.\n\n")

        return outcome

    def iter_matches(self, request: SearchRequest) -> Iterator[MatchEvent]:
        """
        Lazily yield matches for a request without any status output.

        Raises:
            InvalidPathError: If the root is missing or not a directory
            PatternError: If the mask cannot be compiled or evaluated
            FilesystemError: If listing the tree fails
        """
        self._validate_root(request.root)
        compiled = self._compile(request.pattern)
        yield from self._traverse(compiled, request.root)

    def _validate_root(self, root: str) -> None:
        if not self.provider.exists(root) or not self.provider.is_directory(root):
            logger.warning(f"Search root is not a directory: {root}")
            raise InvalidPathError(root)

    def _compile(self, pattern: str) -> re.Pattern:
        try:
            return compile_mask(pattern)
        except re.error as e:
            logger.warning(f"Mask '{pattern}' rejected: {e}")
            raise PatternError(str(e), e) from e

    def _traverse(self, compiled: re.Pattern, root: str) -> Iterator[MatchEvent]:
        """
        Walk ``root`` in pre-order and yield matching entries.

        Stops at the first failure of either the listing or a match
        evaluation.
        """
        try:
            for entry in self.provider.list_recursive(root):
                try:
                    matched = matches(compiled, entry.name)
                except re.error as e:
                    raise PatternError(str(e), e) from e

                if matched:
                    yield MatchEvent(path=entry.path, name=entry.name, is_dir=entry.is_dir)

        except OSError as e:
            logger.error(f"Error walking directory {root}: {e}")
            raise FilesystemError(str(e), e) from e

    def _report(self, error: SearchError) -> None:
        if isinstance(error, InvalidPathError):
            self._write(f"Invalid path: \n{error.message}\n")
        elif isinstance(error, PatternError):
            self._write(f"Regex error: \n{error.message}\n")
        elif isinstance(error, FilesystemError):
            self._write(f"Filesystem error: \n{error.message}\n")
        else:
            self._write("An unknown error occurred.\n\n")

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


def search(pattern: str, path: Union[str, Path], stream: Optional[TextIO] = None,
           config: Optional[SearchConfig] = None) -> SearchOutcome:
    """
    Convenience function to run one search against the local filesystem.

    Args:
        pattern: Wildcard mask
        path: Directory to search in
        stream: Status output (optional)
        config: Search settings (optional)

    Returns:
        SearchOutcome describing the terminal status and matches
    """
    engine = SearchEngine(stream=stream, config=config)
    return engine.search(pattern, path)
