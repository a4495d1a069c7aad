"""
JSON writer for well output.

Produces JSON files with the same record layout as the Parquet output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from lasingest.models import Well, WellDataPoint
from lasingest.workflow import AssemblyResult

from .serializers import serialize_value, well_to_record


class JSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for datetime and Path objects."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


class JSONWriter:
    """
    Writes assembled well data to JSON files.

    Measurements stay nested objects rather than JSON strings.
    """

    def __init__(self, output_dir: str | Path):
        """
        Initialize the JSON writer.

        Args:
            output_dir: Base directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_well(self, well: Well) -> Path:
        """
        Write a Well to JSON.

        Args:
            well: The Well model to write

        Returns:
            Path to the written JSON file
        """
        record = well_to_record(well)

        output_path = self.output_dir / "well.json"

        with open(output_path, "w") as f:
            json.dump(record, f, cls=JSONEncoder, indent=2, allow_nan=False)

        return output_path

    def write_well_data(self, points: list[WellDataPoint]) -> Path:
        """
        Write depth samples to JSON.

        Args:
            points: The data points to write

        Returns:
            Path to the written JSON file
        """
        records = [
            {
                "well_id": p.well_id,
                "depth": serialize_value(p.depth),
                "measurements": {k: serialize_value(v) for k, v in p.measurements.items()},
            }
            for p in points
        ]

        output_path = self.output_dir / "well_data.json"

        with open(output_path, "w") as f:
            json.dump(records, f, cls=JSONEncoder, indent=2, allow_nan=False)

        return output_path

    def write_all(self, result: AssemblyResult) -> dict[str, Path]:
        """
        Write all assembled data to JSON files.

        Args:
            result: The AssemblyResult from WellAssembler

        Returns:
            Dict mapping table names to written file paths
        """
        paths: dict[str, Path] = {}

        if result.well:
            paths["well"] = self.write_well(result.well)

        if result.data_points:
            paths["well_data"] = self.write_well_data(result.data_points)

        return paths


def write_assembly_to_json(result: AssemblyResult, output_dir: str | Path) -> dict[str, Path]:
    """
    Convenience function to write all results from an assembly to JSON.

    Args:
        result: The AssemblyResult from WellAssembler
        output_dir: Directory for output files

    Returns:
        Dict mapping table names to written file paths
    """
    writer = JSONWriter(output_dir)
    return writer.write_all(result)
