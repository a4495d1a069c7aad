"""
Type definitions for file detection.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from lasingest.enums import Section


class FileType(str, Enum):
    """
    Types of files recognized by the ingestion workflow.

    Attributes:
        LAS: Log ASCII Standard well-log file (.las)
        UNKNOWN: Unrecognized file type
    """

    LAS = "las"
    UNKNOWN = "unknown"


@dataclass
class FileInfo:
    """
    Information extracted from a detected file.

    Attributes:
        path: Absolute path to the file
        file_type: Detected FileType
        size_bytes: File size on disk
        sections: Sections whose headers appear in the file, in order
    """

    path: str
    file_type: FileType
    size_bytes: int = 0
    sections: list[Section] = field(default_factory=list)

    @property
    def filename(self) -> str:
        """Get the filename without path."""
        return Path(self.path).name

    @property
    def has_data_section(self) -> bool:
        """Check if an ~ASCII/data header was seen."""
        return Section.DATA in self.sections
