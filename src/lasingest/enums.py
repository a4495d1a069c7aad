"""
Enums for LAS file structure.

These enums define the section labels recognized by the scanner.
"""

from enum import Enum


class Section(str, Enum):
    """LAS file sections, detected from `~` header lines."""

    VERSION = "version"
    WELL = "well"
    CURVE = "curve"
    PARAMETER = "parameter"
    DATA = "data"
