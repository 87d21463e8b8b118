"""
Search data models for the file manager.

This module defines the structures exchanged between the search engine and
its callers: the request, the match events produced during traversal and the
terminal outcome of a search call.
"""

from typing import Dict, List, Any
from pathlib import Path
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class SearchStatus(Enum):
    """Terminal status of a search call."""
    COMPLETE = "complete"
    INVALID_PATH = "invalid_path"
    PATTERN_ERROR = "pattern_error"
    FILESYSTEM_ERROR = "filesystem_error"
    UNKNOWN_ERROR = "unknown_error"


class SearchRequest(BaseModel):
    """
    A single search invocation.

    Attributes:
        pattern: Wildcard mask matched against filenames (may be empty)
        root: Directory to search in
    """

    model_config = {'frozen': True}

    pattern: str = Field(..., description="Wildcard mask using * and ?")
    root: str = Field(..., description="Directory to search in")

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Expand a leading ~ but otherwise keep the path as typed."""
        if v.startswith('~'):
            return str(Path(v).expanduser())
        return v


class MatchEvent(BaseModel):
    """
    A filesystem entry whose filename satisfied the compiled mask.

    Attributes:
        path: Full path of the entry as produced by the traversal
        name: Final path component that was matched
        is_dir: Whether the entry is a directory
    """

    model_config = {'frozen': True}

    path: str = Field(..., min_length=1, description="Full path of the matched entry")
    name: str = Field(..., description="Filename that matched the mask")
    is_dir: bool = Field(False, description="Whether the entry is a directory")

    def __str__(self) -> str:
        return self.path


class SearchOutcome(BaseModel):
    """
    Result of a completed or aborted search call.

    Attributes:
        request: The request that was executed
        status: Terminal status reported to the user
        message: Underlying error message, empty on success
        matches: Match events in discovery order
    """

    request: SearchRequest
    status: SearchStatus = Field(SearchStatus.COMPLETE, description="Terminal status")
    message: str = Field("", description="Underlying error message")
    matches: List[MatchEvent] = Field(default_factory=list, description="Matches in discovery order")

    @property
    def succeeded(self) -> bool:
        return self.status is SearchStatus.COMPLETE

    def get_match_paths(self) -> List[str]:
        """Get the matched paths in discovery order."""
        return [match.path for match in self.matches]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the outcome to a dictionary representation."""
        data = self.model_dump()
        data['status'] = self.status.value
        data['match_count'] = len(self.matches)
        return data

    def __str__(self) -> str:
        parts = [f"Status: {self.status.value}"]
        parts.append(f"Matches: {len(self.matches)}")
        if self.message:
            parts.append(f"Error: {self.message}")
        return " | ".join(parts)
