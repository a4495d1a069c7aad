"""
File detection utilities.

Functions for recognizing LAS files and listing their section headers
without running the full parser.
"""

import logging
from pathlib import Path

from lasingest.enums import Section
from lasingest.parsers import detect_section

from .types import FileInfo, FileType

logger = logging.getLogger(__name__)

LAS_SUFFIXES = (".las",)


def is_las_filename(file_path: str | Path) -> bool:
    """Check the file extension (case-insensitive)."""
    return Path(file_path).suffix.lower() in LAS_SUFFIXES


def detect_file_type(file_path: str | Path) -> FileType:
    """
    Detect whether a file is a LAS file.

    A file is LAS when it has a .las extension, or when its first
    non-blank, non-comment line is a ~V (version) header.

    Args:
        file_path: Path to the file

    Returns:
        FileType enum value

    Example:
        >>> detect_file_type("/data/15_9-F-11.las")
        FileType.LAS
    """
    path = Path(file_path)

    if not path.exists():
        return FileType.UNKNOWN

    if is_las_filename(path):
        return FileType.LAS

    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    continue
                if stripped.upper().startswith("~V"):
                    return FileType.LAS
                break
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")

    return FileType.UNKNOWN


def scan_sections(file_path: str | Path) -> list[Section]:
    """
    List the sections of a LAS file in header order.

    Scanning stops at the data section, like the parser.

    Args:
        file_path: Path to the file

    Returns:
        Recognized sections in file order
    """
    sections: list[Section] = []
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            stripped = line.strip()
            if not stripped.startswith("~"):
                continue
            section = detect_section(stripped)
            if section is not None:
                sections.append(section)
            if section == Section.DATA:
                break

    return sections


def detect_file(file_path: str | Path) -> FileInfo:
    """
    Detect file type and list the sections of a LAS file.

    Args:
        file_path: Path to the file

    Returns:
        FileInfo with type, size and sections

    Example:
        >>> info = detect_file("/data/15_9-F-11.las")
        >>> info.sections
        [Section.VERSION, Section.WELL, Section.CURVE, Section.DATA]
    """
    path = Path(file_path)
    file_type = detect_file_type(path)

    sections: list[Section] = []
    if file_type == FileType.LAS:
        try:
            sections = scan_sections(path)
        except OSError as e:
            logger.warning(f"Could not scan sections of {path}: {e}")

    return FileInfo(
        path=str(path.absolute()),
        file_type=file_type,
        size_bytes=path.stat().st_size if path.exists() else 0,
        sections=sections,
    )
