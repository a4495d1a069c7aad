"""
Well metadata normalizer.

Maps the well information entries collected from the ~WELL section onto
named fields. Numeric fields that are missing or unparseable become NaN,
which callers must read as "unknown", not zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from lasingest.parsers.values import camel_case, parse_float

if TYPE_CHECKING:
    from lasingest.parsers.las_parser import WellInfoEntry

DEFAULT_NULL_VALUE = -9999.0


@dataclass
class WellMetadata:
    """Flattened scalar well fields derived from the ~WELL section."""

    name: Optional[str] = None
    company: Optional[str] = None
    field: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    uwi: Optional[str] = None
    api: Optional[str] = None
    start_depth: float = math.nan
    stop_depth: float = math.nan
    step: float = math.nan
    null_value: float = DEFAULT_NULL_VALUE
    date_analyzed: Optional[str] = None  # raw DATE value, not parsed here


# Well mnemonic -> WellMetadata string field
TEXT_FIELDS = {
    "WELL": "name",
    "COMP": "company",
    "FLD": "field",
    "LOC": "location",
    "CTRY": "country",
    "STAT": "state",
    "UWI": "uwi",
    "API": "api",
    "DATE": "date_analyzed",
}

# Well mnemonic -> WellMetadata float field
NUMERIC_FIELDS = {
    "STRT": "start_depth",
    "STOP": "stop_depth",
    "STEP": "step",
}


def _value(well_info: dict[str, WellInfoEntry], mnemonic: str) -> Optional[str]:
    entry = well_info.get(camel_case(mnemonic))
    return entry.value if entry is not None else None


def _float_or_nan(value: Optional[str]) -> float:
    number = parse_float(value)
    return math.nan if number is None else number


def extract_well_metadata(well_info: dict[str, WellInfoEntry]) -> WellMetadata:
    """
    Build the metadata view from parsed well information.

    Args:
        well_info: Well entries keyed by camel-cased mnemonic

    Returns:
        WellMetadata with text fields as found, depths/step as floats (NaN
        when unknown) and the null value (-9999.0 when unknown)
    """
    metadata = WellMetadata()

    for mnemonic, attr in TEXT_FIELDS.items():
        setattr(metadata, attr, _value(well_info, mnemonic))

    for mnemonic, attr in NUMERIC_FIELDS.items():
        setattr(metadata, attr, _float_or_nan(_value(well_info, mnemonic)))

    null_value = parse_float(_value(well_info, "NULL"))
    metadata.null_value = DEFAULT_NULL_VALUE if null_value is None else null_value

    return metadata
