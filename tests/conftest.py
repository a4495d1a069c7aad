"""
Shared fixtures for the test suite.
"""

import pytest

SAMPLE_LAS = """~VERSION
VERS. 2.0 : LAS format version
~WELL
WELL.    WELLX : Well name
STRT.ft  100.0 : start depth
STOP.ft  102.0 : stop depth
STEP.ft  1.0   : step
NULL.    -999.25 : null value
~CURVE
DEPT.ft  : Depth
GR.api   : Gamma ray
~ASCII
100.0  50.2
101.0  52.1
102.0  -999.25
"""


FULL_LAS = """~Version Information
 VERS.                 2.0 :   CWLS LOG ASCII STANDARD - VERSION 2.0
 WRAP.                  NO :   ONE LINE PER DEPTH STEP
~Well Information Block
#MNEM.UNIT       Data Type    Information
#---------    -------------   ------------------------------
 STRT.M              1670.0 :  START DEPTH
 STOP.M              1671.0 :  STOP DEPTH
 STEP.M                0.5 :  STEP
 NULL.             -999.25 :  NULL VALUE
 COMP.     ANY_OIL_COMPANY :  COMPANY
 WELL.          AAAAA_1234 :  WELL
 FLD.                EDAM :  FIELD
 LOC.        A9-16-49-20W3 :  LOCATION
 CTRY.                  CA :  COUNTRY
 STAT.            SASKATCH :  STATE
 UWI.     100091604920W300 :  UNIQUE WELL ID
 API.          42-123-45678 :  API NUMBER
 DATE.          13-DEC-86 :  LOG DATE
~Curve Information Block
#MNEM.UNIT      API CODE     Curve Description
#---------    -------------   ------------------------------
 DEPT.M                      :  1  DEPTH
 DT  .US/M     60 520 32 00  :  2  SONIC TRANSIT TIME
 RHOB.K/M3     45 350 01 00  :  3  BULK DENSITY
 NPHI.V/V      42 890 00 00  :  4  NEUTRON POROSITY
~Parameter Information Block
 BHT .DEGC             35.5 :  BOTTOM HOLE TEMPERATURE
 MUD .            GEL CHEM :  MUD TYPE
~A  ASCII LOG DATA
1670.000   123.450 2550.000    0.450
1670.500   123.450 2550.000    0.450
1671.000   123.450 -999.25     0.450
"""


@pytest.fixture
def sample_las_content():
    """Minimal LAS file content."""
    return SAMPLE_LAS


@pytest.fixture
def full_las_content():
    """LAS 2.0 file with a complete well header and parameter block."""
    return FULL_LAS


@pytest.fixture
def sample_las_file(tmp_path, sample_las_content):
    """Minimal LAS file written to disk."""
    path = tmp_path / "WELLX.las"
    path.write_text(sample_las_content)
    return path


@pytest.fixture
def full_las_file(tmp_path, full_las_content):
    """Complete LAS file written to disk."""
    path = tmp_path / "AAAAA_1234.las"
    path.write_text(full_las_content)
    return path
