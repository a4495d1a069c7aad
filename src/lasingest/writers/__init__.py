"""
Writers module for outputting assembled wells to Parquet and JSON files.

Module structure:
- schemas.py: PyArrow schema definitions for the well tables
- serializers.py: Model-to-record conversion utilities
- parquet_writer.py: ParquetWriter with batched sample output
- json_writer.py: JSONWriter class for JSON output
"""

from pathlib import Path

from lasingest.workflow import AssemblyResult

from .json_writer import JSONWriter, write_assembly_to_json
from .parquet_writer import DEFAULT_BATCH_SIZE, ParquetWriter
from .schemas import WELL_DATA_SCHEMA, WELL_SCHEMA, get_schema_for_model
from .serializers import data_point_to_record, serialize_value, well_to_record

__all__ = [
    # Schemas
    "WELL_SCHEMA",
    "WELL_DATA_SCHEMA",
    "get_schema_for_model",
    # Serializers
    "serialize_value",
    "well_to_record",
    "data_point_to_record",
    # Writers
    "ParquetWriter",
    "JSONWriter",
    "DEFAULT_BATCH_SIZE",
    # Convenience functions
    "write_assembly_to_parquet",
    "write_assembly_to_json",
]


def write_assembly_to_parquet(
    result: AssemblyResult,
    output_dir: str | Path,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> dict[str, Path]:
    """
    Convenience function to write all results from an assembly.

    Args:
        result: The AssemblyResult from WellAssembler
        output_dir: Directory for output files
        batch_size: Data points per Parquet row group

    Returns:
        Dict mapping table names to written file paths

    Example:
        result = WellAssembler().assemble(parsed)
        paths = write_assembly_to_parquet(result, "/data/lakehouse")
        print(f"Wrote samples to: {paths['well_data']}")
    """
    writer = ParquetWriter(output_dir, batch_size=batch_size)
    return writer.write(result)
