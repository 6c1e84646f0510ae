"""
Shared fixtures for rawsmet tests.
"""

import pandas as pd
import pytest

from rawsmet.parse import FW13_LAYOUT

FW13_DEFAULTS = {
    "recordType": "W13",
    "stationID": "500726",
    "observationDate": "20170101",
    "observationTime": "0000",
    "observationType": "R",
    "weatherCode": "0",
    "dryBulbTemp": 50,
    "atmosMoisture": 60,
    "windDirection": 180,
    "avWindSpeed": 10,
    "fuelMoisture": 12,
    "maxTemp": 52,
    "minTemp": 48,
    "maxRelHumidity": 70,
    "minRelHumidity": 50,
    "precipDuration": 0,
    "precipAmount": 0,
    "wetFlag": "N",
    "herbaceousGreenness": None,
    "shrubGreenness": None,
    "moistureType": 2,
    "measurementType": 1,
    "seasonCode": 1,
    "solarRadiation": 250,
    "maxGustDirection": 190,
    "maxGustSpeed": 20,
    "snowFlag": "N",
}


@pytest.fixture
def fw13_record():
    """Build one fixed-width W13 line; keyword arguments override fields."""

    def build(**fields):
        values = {**FW13_DEFAULTS, **fields}
        parts = []
        for name, first, last in FW13_LAYOUT:
            value = values[name]
            width = last - first + 1
            parts.append(" " * width if value is None else f"{value:>{width}}")
        return "".join(parts)

    return build


@pytest.fixture
def meta():
    """Metadata table for a handful of stations."""
    return pd.DataFrame(
        {
            "nwsID": ["500726", "040203", "020207", "999999"],
            "wrccID": ["orOKAN", "caALPI", "azATEX", "xxBADT"],
            "siteName": ["Oakland", "Alpine", "Aztec", "Nowhere"],
            "longitude": [-123.0, -116.7, -111.9, 0.0],
            "latitude": [44.0, 32.8, 33.4, 0.0],
            "timezone": [
                "America/Los_Angeles",
                "America/Los_Angeles",
                "America/Phoenix",
                "Mars/Olympus",
            ],
            "elevation": [300, 1200, 400, 0],
        }
    )


@pytest.fixture
def wrcc_text():
    """Two hours of WRCC listing output in metric units."""
    return "\n".join(
        [
            ":Date/Time,Solar Rad.,Precip.,Wind Speed,Wind Direc.,Max Gust,"
            "Av Air Temp,Fuel Temp,Fuel Moist,Rel Humid,Dir MxGust,Battery Volts",
            ": LST,W/m2,mm,m/s,Deg,m/s,Deg C,Deg C,%,%,Deg,volts",
            "1701010000,0,0.0,2.1,180,4.5,-3.2,-4.0,12.5,85,190,13.1",
            "1701010100,0,0.5,2.3,185,5.0,-3.5,-4.2,12.7,87,200,13.1",
            "1701010200,-9999,0.2,2.0,170,4.0,-3.9,-4.4,12.9,88,175,13.0",
        ]
    )
