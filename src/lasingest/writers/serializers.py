"""
Serialization utilities for converting well models to flat records.

Unknown or overflowing numeric values (NaN, inf) become None so they are
stored as nulls in Parquet and JSON alike.
"""

import json
import math
from datetime import datetime, timezone
from typing import Any, Optional

from lasingest.models import Well, WellDataPoint


def serialize_value(value: Any) -> Any:
    """
    Serialize a value to a Parquet/JSON-compatible type.

    Handles:
    - non-finite floats (NaN, inf) -> None
    - dicts -> JSON strings
    - everything else -> as-is

    Args:
        value: Any Python value to serialize

    Returns:
        Storage-compatible representation
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return json.dumps({k: serialize_value(v) for k, v in value.items()})
    return value


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Drop tzinfo after converting to UTC (DATE values are mostly naive)."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def well_to_record(well: Well) -> dict[str, Any]:
    """
    Convert a Well to a flat dict.

    Args:
        well: The Well model instance

    Returns:
        Dict with keys matching WELL_SCHEMA
    """
    return {
        "id": well.id,
        "created_at": well.created_at,
        "well_name": well.well_name,
        "company": well.company,
        "field": well.field,
        "location": well.location,
        "country": well.country,
        "state": well.state,
        "uwi": well.uwi,
        "api": well.api,
        "start_depth": serialize_value(well.start_depth),
        "stop_depth": serialize_value(well.stop_depth),
        "step": serialize_value(well.step),
        "null_value": serialize_value(well.null_value),
        "date_analyzed": _naive_utc(well.date_analyzed),
        "source_file": well.source_file,
        "curves": [curve.model_dump() for curve in well.curves],
        "las_version": well.metadata.get("version"),
        "total_data_points": well.metadata.get("total_data_points"),
    }


def data_point_to_record(point: WellDataPoint) -> dict[str, Any]:
    """
    Convert a WellDataPoint to a flat dict.

    Args:
        point: The WellDataPoint instance

    Returns:
        Dict with keys matching WELL_DATA_SCHEMA
    """
    return {
        "well_id": point.well_id,
        "depth": serialize_value(point.depth),
        "measurements_json": serialize_value(point.measurements),
    }
