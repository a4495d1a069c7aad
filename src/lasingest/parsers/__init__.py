"""
LAS file parsing.

Provides:
- LASParser and the per-section line parsers
- The well metadata normalizer
"""

from lasingest.parsers.las_parser import (
    DEPTH_MNEMONICS,
    MAX_FILE_SIZE,
    CurveDefinition,
    DataRow,
    LASParser,
    ParseResult,
    WellInfoEntry,
    detect_section,
    parse_curve_line,
    parse_data_line,
    parse_version_line,
    parse_well_line,
    read_las_text,
    row_depth,
)
from lasingest.parsers.metadata import (
    DEFAULT_NULL_VALUE,
    WellMetadata,
    extract_well_metadata,
)
from lasingest.parsers.values import camel_case, parse_float

__all__ = [
    # Parser
    "LASParser",
    "ParseResult",
    "CurveDefinition",
    "WellInfoEntry",
    "DataRow",
    "MAX_FILE_SIZE",
    "DEPTH_MNEMONICS",
    "read_las_text",
    "row_depth",
    # Line parsers
    "detect_section",
    "parse_version_line",
    "parse_well_line",
    "parse_curve_line",
    "parse_data_line",
    "parse_float",
    "camel_case",
    # Metadata
    "WellMetadata",
    "extract_well_metadata",
    "DEFAULT_NULL_VALUE",
]
