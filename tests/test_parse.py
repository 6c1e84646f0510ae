"""
Tests for FW13 and WRCC raw text parsers.
"""

import numpy as np

from rawsmet.parse import FW13_COLUMNS, WRCC_COLUMNS, parse_fw13, parse_wrcc


class TestParseFW13:
    """Test fixed-width W13 parsing."""

    def test_record_width(self, fw13_record):
        assert len(fw13_record()) == 75

    def test_parse_records(self, fw13_record):
        text = "\n".join(
            [
                fw13_record(observationTime="0000", dryBulbTemp=50),
                fw13_record(observationTime="0100", dryBulbTemp=-5, precipAmount=15),
            ]
        )

        df = parse_fw13(text)

        assert list(df.columns) == FW13_COLUMNS
        assert len(df) == 2
        assert df["stationID"].tolist() == ["500726", "500726"]
        assert df["observationDate"].tolist() == ["20170101", "20170101"]
        assert df["observationTime"].tolist() == ["0000", "0100"]
        assert df["dryBulbTemp"].tolist() == [50, -5]
        assert df["measurementType"].tolist() == [1, 1]
        assert df["precipAmount"].tolist() == [0, 15]
        assert df["maxGustSpeed"].tolist() == [20, 20]
        assert df["solarRadiation"].tolist() == [250, 250]

    def test_blank_fields(self, fw13_record):
        """Blank numeric fields are missing; blank precipitation is zero."""
        df = parse_fw13(fw13_record(precipAmount=None, solarRadiation=None))

        assert df["precipAmount"].iloc[0] == 0
        assert np.isnan(df["solarRadiation"].iloc[0])
        assert np.isnan(df["herbaceousGreenness"].iloc[0])

    def test_non_record_lines_skipped(self, fw13_record):
        text = "\n".join(["header text", fw13_record(), "", "trailer"])
        assert len(parse_fw13(text)) == 1

    def test_empty_text(self):
        for text in ("", "   \n", None, "<html>Not found</html>"):
            df = parse_fw13(text)
            assert df.empty
            assert list(df.columns) == FW13_COLUMNS


class TestParseWRCC:
    """Test WRCC listing parsing."""

    def test_parse_rows(self, wrcc_text):
        df = parse_wrcc(wrcc_text)

        assert list(df.columns) == WRCC_COLUMNS
        assert len(df) == 3
        assert df["observationDate"].tolist() == ["20170101"] * 3
        assert df["observationTime"].tolist() == ["0000", "0100", "0200"]
        assert df["measurementType"].tolist() == [2, 2, 2]
        assert df["dryBulbTemp"].tolist() == [-3.2, -3.5, -3.9]
        assert df["relHumidity"].tolist() == [85, 87, 88]
        assert df["maxGustDirection"].tolist() == [190, 200, 175]

    def test_missing_value_marker(self, wrcc_text):
        df = parse_wrcc(wrcc_text)
        assert np.isnan(df["solarRadiation"].iloc[2])

    def test_unknown_columns_dropped(self, wrcc_text):
        assert "Battery Volts" not in parse_wrcc(wrcc_text).columns

    def test_absent_column_is_missing(self):
        text = ":Date/Time,Av Air Temp\n1701010000,1.5\n"
        df = parse_wrcc(text)

        assert df["dryBulbTemp"].tolist() == [1.5]
        assert np.isnan(df["fuelTemperature"].iloc[0])

    def test_unreadable_time_stamp_dropped(self):
        text = ":Date/Time,Av Air Temp\n1701010000,1.5\nbogus,2.0\n"
        assert len(parse_wrcc(text)) == 1

    def test_four_digit_year(self):
        text = ":Date/Time,Av Air Temp\n201701011300,1.5\n"
        df = parse_wrcc(text)

        assert df["observationDate"].tolist() == ["20170101"]
        assert df["observationTime"].tolist() == ["1300"]

    def test_empty_text(self):
        for text in ("", ":Date/Time,Av Air Temp\n", None):
            df = parse_wrcc(text)
            assert df.empty
            assert list(df.columns) == WRCC_COLUMNS
