"""
Well models: the parent well record, its curve catalog, and depth samples.
"""

import math
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from lasingest.models.base import DataModel
from lasingest.parsers.metadata import DEFAULT_NULL_VALUE


class Curve(BaseModel):
    """
    A stored curve definition.

    Attributes:
        mnemonic: Curve code (e.g., "GR")
        unit: Unit of measure ("UNKN" when the file gives none)
        description: Free-text description from the ~CURVE section
    """

    mnemonic: str
    unit: str = "UNKN"
    description: str = ""


class Well(DataModel):
    """
    Parent well record created from a LAS file header.

    Depth and step values may be NaN when the file does not state them;
    DataValidator rejects such wells before they are stored.

    Attributes:
        well_name: Well name (WELL), "Unknown" when absent
        company: Operator (COMP)
        field: Field name (FLD)
        location: Location (LOC)
        country: Country (CTRY)
        state: State or province (STAT)
        uwi: Unique well identifier (UWI)
        api: API number (API)
        start_depth: First depth (STRT)
        stop_depth: Last depth (STOP)
        step: Depth increment (STEP)
        null_value: Sentinel for missing samples (NULL)
        date_analyzed: Log date (DATE), when it could be parsed
        source_file: Path of the ingested LAS file
        curves: Curve catalog in column order
        metadata: LAS version and total data point count
    """

    well_name: str = "Unknown"
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

    date_analyzed: Optional[datetime] = None
    source_file: Optional[str] = None

    curves: list[Curve] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def curve_names(self) -> list[str]:
        """Curve mnemonics in column order."""
        return [curve.mnemonic for curve in self.curves]

    @property
    def depth_range(self) -> tuple[float, float]:
        """Declared (start, stop) depth."""
        return (self.start_depth, self.stop_depth)


class WellDataPoint(BaseModel):
    """
    One depth sample of all curves (no timestamps, stored in bulk).

    Attributes:
        well_id: ID of the parent Well
        depth: Depth of the sample
        measurements: Curve mnemonic -> value (None for unreadable values)
    """

    well_id: Optional[str] = None
    depth: float
    measurements: dict[str, Optional[float]] = Field(default_factory=dict)
