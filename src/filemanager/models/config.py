"""
Configuration data models for the file manager.

This module defines the structures holding application settings: search
progress behaviour, directory display defaults and logging options.
"""

from typing import Dict, Any, Optional
from pathlib import Path
import logging
from pydantic import BaseModel, Field, field_validator


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class SearchConfig(BaseModel):
    """
    Configuration for mask search.

    Attributes:
        progress_interval: Seconds between progress indicator frames
        progress_frames: Characters cycled by the progress indicator
        follow_symlinks: Whether traversal descends into symlinked directories
    """

    progress_interval: float = Field(0.5, gt=0, le=10, description="Seconds between progress frames")
    progress_frames: str = Field("|/-\\", min_length=1, description="Characters cycled by the progress indicator")
    follow_symlinks: bool = Field(False, description="Descend into symlinked directories")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class DisplayConfig(BaseModel):
    """
    Configuration for directory listing.

    Attributes:
        start_directory: Directory listed when no explicit path is given
    """

    start_directory: str = Field(".", description="Directory listed by default")

    @field_validator('start_directory')
    @classmethod
    def validate_start_directory(cls, v: str) -> str:
        """Expand user path but keep relative paths relative."""
        if not v or not v.strip():
            return "."
        if v.startswith('~'):
            return str(Path(v).expanduser())
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class LoggingConfig(BaseModel):
    """
    Configuration for application logging.

    Attributes:
        level: Minimum level of records that are emitted
        file: Optional log file; records go to stderr when unset
        format: ``logging.Formatter`` format string
    """

    level: str = Field("WARNING", description="Logging level name")
    file: Optional[str] = Field(None, description="Optional log file path")
    format: str = Field("%(asctime)s %(levelname)s %(name)s: %(message)s", description="Log record format")

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, v) -> str:
        """Normalize and validate the level name."""
        if not isinstance(v, str):
            raise ValueError(f"Invalid log level: {v}")
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator('file')
    @classmethod
    def validate_file(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return str(Path(v).expanduser())

    def get_level(self) -> int:
        """Get the numeric ``logging`` level."""
        return getattr(logging, self.level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class ManagerConfig(BaseModel):
    """
    Main configuration for the file manager.

    Attributes:
        search: Mask search settings
        display: Directory listing settings
        logging: Logging settings
    """

    search: SearchConfig = Field(default_factory=SearchConfig, description="Mask search settings")
    display: DisplayConfig = Field(default_factory=DisplayConfig, description="Directory listing settings")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    def validate_configuration(self) -> list:
        """
        Collect non-fatal configuration warnings.

        Returns:
            List of warning messages
        """
        warnings = []

        start = Path(self.display.start_directory)
        if not start.exists():
            warnings.append(f"Start directory does not exist: {self.display.start_directory}")
        elif not start.is_dir():
            warnings.append(f"Start directory is not a directory: {self.display.start_directory}")

        if self.search.progress_interval < 0.05:
            warnings.append("Very short progress interval may flood the terminal")

        if self.search.follow_symlinks:
            warnings.append("Following symlinks may visit the same directory more than once")

        if self.logging.file:
            log_dir = Path(self.logging.file).parent
            if not log_dir.exists():
                warnings.append(f"Log file directory does not exist: {log_dir}")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'search': self.search.to_dict(),
            'display': self.display.to_dict(),
            'logging': self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ManagerConfig':
        """Create configuration from dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Progress interval: {self.search.progress_interval}s"]
        parts.append(f"Start directory: {self.display.start_directory}")
        parts.append(f"Log level: {self.logging.level}")
        return " | ".join(parts)


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the top-level shape of raw configuration data.

    Args:
        config_data: Raw configuration dictionary

    Returns:
        The same dictionary when its shape is valid

    Raises:
        ValueError: If unknown sections are present or a section is not a mapping
    """
    known_sections = set(ManagerConfig.model_fields)
    unknown = sorted(set(config_data) - known_sections)
    if unknown:
        raise ValueError(f"Unknown configuration section(s): {', '.join(unknown)}")

    for section, value in config_data.items():
        if value is not None and not isinstance(value, dict):
            raise ValueError(f"Section '{section}' must be a mapping, got {type(value).__name__}")

    return {key: value for key, value in config_data.items() if value is not None}
