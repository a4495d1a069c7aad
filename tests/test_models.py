"""
Tests for the well models.
"""

import math
from datetime import datetime

import pytest
from pydantic import ValidationError

from lasingest.models import Curve, Well, WellDataPoint


class TestCurve:
    """Tests for Curve model."""

    def test_defaults(self):
        curve = Curve(mnemonic="GR")
        assert curve.unit == "UNKN"
        assert curve.description == ""

    def test_requires_mnemonic(self):
        with pytest.raises(ValidationError):
            Curve(unit="api")


class TestWell:
    """Tests for Well model."""

    def test_create_empty_well(self):
        well = Well()
        assert well.well_name == "Unknown"
        assert well.null_value == -9999.0
        assert math.isnan(well.start_depth)
        assert well.curves == []
        assert well.created_at is not None

    def test_create_with_header(self):
        well = Well(
            id="w-1",
            well_name="WELLX",
            company="ACME",
            start_depth=100.0,
            stop_depth=102.0,
            step=1.0,
            null_value=-999.25,
            date_analyzed=datetime(1986, 12, 13),
            curves=[
                Curve(mnemonic="DEPT", unit="ft", description="Depth"),
                {"mnemonic": "GR", "unit": "api", "description": "Gamma ray"},
            ],
            metadata={"version": "2.0", "total_data_points": 3},
        )
        assert well.curve_names == ["DEPT", "GR"]
        assert well.depth_range == (100.0, 102.0)
        assert isinstance(well.curves[1], Curve)

    def test_validate_assignment(self):
        well = Well()
        with pytest.raises(ValidationError):
            well.step = "not a number"

    def test_to_dict_excludes_none(self):
        well = Well(id="w-1", well_name="WELLX", start_depth=1.0, stop_depth=2.0, step=1.0)
        data = well.to_dict()
        assert data["well_name"] == "WELLX"
        assert "company" not in data


class TestWellDataPoint:
    """Tests for WellDataPoint model."""

    def test_create(self):
        point = WellDataPoint(well_id="w-1", depth=100.0, measurements={"DEPT": 100.0, "GR": None})
        assert point.depth == 100.0
        assert point.measurements["GR"] is None

    def test_requires_depth(self):
        with pytest.raises(ValidationError):
            WellDataPoint(well_id="w-1", measurements={})
