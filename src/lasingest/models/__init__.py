"""
Pydantic models for stored well data:
- Well / Curve
- WellDataPoint
"""

from lasingest.models.base import DataModel
from lasingest.models.well import Curve, Well, WellDataPoint

__all__ = [
    "DataModel",
    "Curve",
    "Well",
    "WellDataPoint",
]
