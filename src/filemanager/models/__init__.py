"""
Data models for the file manager.

This module contains the core data structures used throughout the system.
"""

from .search import SearchRequest, SearchOutcome, SearchStatus, MatchEvent
from .entries import FileEntry, DirectoryEntry, Entry, entry_size, describe_entry

__all__ = [
    'SearchRequest',
    'SearchOutcome',
    'SearchStatus',
    'MatchEvent',
    'FileEntry',
    'DirectoryEntry',
    'Entry',
    'entry_size',
    'describe_entry'
]
