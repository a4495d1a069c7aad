"""
Parquet file writer for well output.

Writes the parent well record and its depth samples to Parquet files,
one directory per table, samples grouped per well.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pyarrow as pa
import pyarrow.parquet as pq

from lasingest.models import Well, WellDataPoint

from .schemas import WELL_DATA_SCHEMA, WELL_SCHEMA
from .serializers import data_point_to_record, well_to_record

if TYPE_CHECKING:
    from lasingest.workflow import AssemblyResult

logger = logging.getLogger(__name__)

# Rows per bulk insert / Parquet row group
DEFAULT_BATCH_SIZE = 1000


class ParquetWriter:
    """
    Writes assembled well models to Parquet files.

    Layout:
        <output_dir>/wells/<well_id>.parquet
        <output_dir>/well_data/well_id=<well_id>/data.parquet

    Example:
        writer = ParquetWriter("/data/lakehouse")
        paths = writer.write(assembly_result)
    """

    def __init__(
        self,
        output_dir: str | Path,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ):
        """
        Initialize the writer with an output directory.

        Args:
            output_dir: Base directory for output files
            batch_size: Data points per Parquet row group
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.batch_size = batch_size

    def _get_partition_path(self, table_name: str, well_id: str | None = None) -> Path:
        """Build the directory for a table (and well partition)."""
        parts = [self.output_dir, table_name]
        if well_id:
            parts.append(f"well_id={well_id}")
        return Path(*parts)

    def write(self, result: AssemblyResult) -> dict[str, Path]:
        """
        Write the well and data points of an assembly result.

        Args:
            result: The assembly result to write

        Returns:
            Dict mapping table names to written file paths
        """
        paths: dict[str, Path] = {}

        if result.well:
            paths["well"] = self.write_well(result.well)

        if result.data_points:
            well_id = result.well.id if result.well else None
            paths["well_data"] = self.write_well_data(result.data_points, well_id=well_id)

        return paths

    def write_well(self, well: Well) -> Path:
        """
        Write a Well record to Parquet.

        Args:
            well: The Well instance

        Returns:
            Path to the written file
        """
        record = well_to_record(well)
        table = pa.Table.from_pylist([record], schema=WELL_SCHEMA)

        partition_dir = self._get_partition_path("wells")
        partition_dir.mkdir(parents=True, exist_ok=True)

        output_path = partition_dir / f"{well.id}.parquet"
        pq.write_table(table, output_path)
        return output_path

    def write_well_data(
        self, points: list[WellDataPoint], well_id: str | None = None
    ) -> Path:
        """
        Write depth samples to Parquet in row groups of batch_size.

        Args:
            points: Data points, normally all of one well
            well_id: Partition key (defaults to the first point's well_id)

        Returns:
            Path to the written file
        """
        if well_id is None and points:
            well_id = points[0].well_id

        partition_dir = self._get_partition_path("well_data", well_id)
        partition_dir.mkdir(parents=True, exist_ok=True)
        output_path = partition_dir / "data.parquet"

        with pq.ParquetWriter(output_path, WELL_DATA_SCHEMA) as writer:
            for start in range(0, len(points), self.batch_size):
                batch = points[start : start + self.batch_size]
                records = [data_point_to_record(p) for p in batch]
                writer.write_table(pa.Table.from_pylist(records, schema=WELL_DATA_SCHEMA))

        logger.info(f"Wrote {len(points)} data points to {output_path}")
        return output_path
