"""
las-ingest - LAS well-log parsing and ingestion.

This package parses Log ASCII Standard (LAS) files into well metadata and
depth-indexed curve data, and assembles them into records for storage.
"""

__version__ = "0.1.0"

from lasingest.parsers import (
    CurveDefinition,
    LASParser,
    ParseResult,
    WellInfoEntry,
    WellMetadata,
    extract_well_metadata,
)
from lasingest.statistics import CurveStatistics, compute_curve_statistics, filter_by_depth
from lasingest.tools import FileInfo, FileType, detect_file, detect_file_type
from lasingest.validation import DataValidator, ValidationResult
from lasingest.workflow import AssemblyResult, WellAssembler, assemble_from_file
from lasingest.writers import JSONWriter, ParquetWriter, write_assembly_to_parquet

__all__ = [
    # Parsing
    "LASParser",
    "ParseResult",
    "CurveDefinition",
    "WellInfoEntry",
    "WellMetadata",
    "extract_well_metadata",
    # File detection tools
    "FileType",
    "FileInfo",
    "detect_file",
    "detect_file_type",
    # Workflow
    "WellAssembler",
    "AssemblyResult",
    "assemble_from_file",
    # Validation
    "DataValidator",
    "ValidationResult",
    # Statistics
    "CurveStatistics",
    "compute_curve_statistics",
    "filter_by_depth",
    # Writers
    "ParquetWriter",
    "JSONWriter",
    "write_assembly_to_parquet",
]
