"""
PyArrow schema definitions for well tables.
"""

import pyarrow as pa

# Schema for Well records
WELL_SCHEMA = pa.schema(
    [
        # Base DataModel fields
        ("id", pa.string()),
        ("created_at", pa.timestamp("us", tz="UTC")),
        # Header fields
        ("well_name", pa.string()),
        ("company", pa.string()),
        ("field", pa.string()),
        ("location", pa.string()),
        ("country", pa.string()),
        ("state", pa.string()),
        ("uwi", pa.string()),
        ("api", pa.string()),
        ("start_depth", pa.float64()),
        ("stop_depth", pa.float64()),
        ("step", pa.float64()),
        pa.field("null_value", pa.float64(), metadata={b"description": b"Sentinel marking missing samples"}),
        ("date_analyzed", pa.timestamp("us")),
        ("source_file", pa.string()),
        # Curve catalog in column order
        (
            "curves",
            pa.list_(
                pa.struct(
                    [
                        ("mnemonic", pa.string()),
                        ("unit", pa.string()),
                        ("description", pa.string()),
                    ]
                )
            ),
        ),
        ("las_version", pa.string()),
        ("total_data_points", pa.int64()),
    ]
)

# Schema for WellDataPoint records
WELL_DATA_SCHEMA = pa.schema(
    [
        ("well_id", pa.string()),
        ("depth", pa.float64()),
        # Curve values keyed by mnemonic; keys vary per well
        ("measurements_json", pa.string()),
    ]
)


def get_schema_for_model(model_name: str) -> pa.Schema:
    """
    Get the PyArrow schema for a model type.

    Args:
        model_name: One of 'well', 'well_data'

    Returns:
        The corresponding PyArrow schema

    Raises:
        ValueError: If model_name is not recognized
    """
    schemas = {
        "well": WELL_SCHEMA,
        "well_data": WELL_DATA_SCHEMA,
    }
    if model_name not in schemas:
        raise ValueError(f"Unknown model: {model_name}. Expected one of {list(schemas.keys())}")
    return schemas[model_name]
