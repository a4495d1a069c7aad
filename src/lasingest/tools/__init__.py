"""
Tools module for file detection.

Module structure:
- types.py: FileType enum and FileInfo dataclass
- detection.py: LAS file detection and section scanning
"""

from .detection import (
    detect_file,
    detect_file_type,
    is_las_filename,
    scan_sections,
)
from .types import FileInfo, FileType

__all__ = [
    # Types
    "FileType",
    "FileInfo",
    # Detection functions
    "detect_file_type",
    "detect_file",
    "is_las_filename",
    "scan_sections",
]
