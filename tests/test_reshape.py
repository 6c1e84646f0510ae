"""
Tests for long format flattening.
"""

from unittest.mock import Mock

import pandas as pd
import pytest

from rawsmet.exceptions import RAWSError
from rawsmet.models import PARAMETER_COLUMNS
from rawsmet.reshape import LONG_COLUMNS, long_to_wide, raws_to_long
from rawsmet.timeseries import fw13_create_timeseries_object


@pytest.fixture
def ts(meta, fw13_record):
    text = "\n".join(
        fw13_record(observationTime=f"{hour:02d}00", dryBulbTemp=40 + hour)
        for hour in range(4)
    )
    client = Mock()
    client.download_fw13.return_value = text
    return fw13_create_timeseries_object("500726", meta=meta, client=client)


class TestRawsToLong:
    """Test flattening to one row per parameter observation."""

    def test_row_count(self, ts):
        long = raws_to_long(ts)
        assert len(long) == len(ts.data) * len(PARAMETER_COLUMNS)
        assert list(long.columns) == LONG_COLUMNS

    def test_datetime_major_order(self, ts):
        long = raws_to_long(ts)
        n = len(PARAMETER_COLUMNS)

        assert long["parameter"].iloc[:n].tolist() == PARAMETER_COLUMNS
        assert (long["datetime"].iloc[:n] == ts.data["datetime"].iloc[0]).all()
        assert long["datetime"].iloc[n] == ts.data["datetime"].iloc[1]

    def test_values(self, ts):
        long = raws_to_long(ts)
        temperature = long[long["parameter"] == "temperature"]["value"]
        assert temperature.tolist() == ts.data["temperature"].tolist()

    def test_missing_values_kept(self, ts):
        long = raws_to_long(ts)
        fuel = long[long["parameter"] == "fuelTemperature"]
        assert len(fuel) == len(ts.data)
        assert fuel["value"].isna().all()

    def test_meta_columns_repeated(self, ts):
        long = raws_to_long(ts)
        assert (long["nwsID"] == "500726").all()
        assert (long["wrccID"] == "orOKAN").all()
        assert (long["siteName"] == "Oakland").all()
        assert (long["longitude"] == -123.0).all()
        assert (long["latitude"] == 44.0).all()

    def test_method_matches_function(self, ts):
        pd.testing.assert_frame_equal(ts.to_long(), raws_to_long(ts))

    def test_empty_timeseries(self, meta):
        client = Mock()
        client.download_fw13.return_value = ""
        empty = fw13_create_timeseries_object("500726", meta=meta, client=client)

        long = raws_to_long(empty)

        assert long.empty
        assert list(long.columns) == LONG_COLUMNS


class TestLongToWide:
    def test_round_trip(self, ts):
        wide = long_to_wide(raws_to_long(ts))
        expected = ts.data[["datetime", *PARAMETER_COLUMNS]]
        pd.testing.assert_frame_equal(wide, expected)

    def test_round_trip_after_repeated_record(self, meta, fw13_record):
        text = "\n".join(
            [
                fw13_record(observationTime="0000"),
                fw13_record(observationTime="0100", dryBulbTemp=60),
                fw13_record(observationTime="0100", dryBulbTemp=70),
                fw13_record(observationTime="0200"),
            ]
        )
        client = Mock()
        client.download_fw13.return_value = text
        ts = fw13_create_timeseries_object("500726", meta=meta, client=client)

        wide = long_to_wide(raws_to_long(ts))

        assert len(wide) == 3
        pd.testing.assert_frame_equal(wide, ts.data[["datetime", *PARAMETER_COLUMNS]])

    def test_repeated_pairs(self, ts):
        long = raws_to_long(ts)
        with pytest.raises(RAWSError, match="repeated"):
            long_to_wide(pd.concat([long, long], ignore_index=True))

    def test_missing_columns(self):
        with pytest.raises(RAWSError):
            long_to_wide(pd.DataFrame({"datetime": [], "value": []}))
