"""
Parsers turning raw FW13 and WRCC text into source-specific DataFrames.

The returned frames keep the column names of the source formats. Unit
conversion, precipitation correction and time harmonization happen later,
in ``rawsmet.timeseries``.
"""

import io
import logging
import re
from typing import List, Tuple

import pandas as pd

from .units import METRIC_UNITS

logger = logging.getLogger(__name__)

# W13 record layout, https://fam.nwcg.gov/fam-web/weatherfirecd/13.htm
# (name, first column, last column), 1-based and inclusive
FW13_LAYOUT: List[Tuple[str, int, int]] = [
    ("recordType", 1, 3),
    ("stationID", 4, 9),
    ("observationDate", 10, 17),
    ("observationTime", 18, 21),
    ("observationType", 22, 22),
    ("weatherCode", 23, 23),
    ("dryBulbTemp", 24, 26),
    ("atmosMoisture", 27, 29),
    ("windDirection", 30, 32),
    ("avWindSpeed", 33, 35),
    ("fuelMoisture", 36, 37),
    ("maxTemp", 38, 40),
    ("minTemp", 41, 43),
    ("maxRelHumidity", 44, 46),
    ("minRelHumidity", 47, 49),
    ("precipDuration", 50, 51),
    ("precipAmount", 52, 56),
    ("wetFlag", 57, 57),
    ("herbaceousGreenness", 58, 59),
    ("shrubGreenness", 60, 61),
    ("moistureType", 62, 62),
    ("measurementType", 63, 63),
    ("seasonCode", 64, 64),
    ("solarRadiation", 65, 68),
    ("maxGustDirection", 69, 71),
    ("maxGustSpeed", 72, 74),
    ("snowFlag", 75, 75),
]

FW13_COLUMNS = [name for name, _, _ in FW13_LAYOUT]

FW13_TEXT_COLUMNS = {
    "recordType",
    "stationID",
    "observationDate",
    "observationTime",
    "observationType",
    "weatherCode",
    "wetFlag",
    "snowFlag",
}

WRCC_COLUMNS = [
    "observationDate",
    "observationTime",
    "measurementType",
    "dryBulbTemp",
    "relHumidity",
    "avWindSpeed",
    "windDirection",
    "maxGustSpeed",
    "maxGustDirection",
    "precipAmount",
    "solarRadiation",
    "fuelMoisture",
    "fuelTemperature",
]

# WRCC header labels, compared after lowercasing and dropping punctuation
WRCC_LABELS = {
    "datetime": "datetime",
    "solarrad": "solarRadiation",
    "precip": "precipAmount",
    "windspeed": "avWindSpeed",
    "winddirec": "windDirection",
    "maxgust": "maxGustSpeed",
    "dirmxgust": "maxGustDirection",
    "avairtemp": "dryBulbTemp",
    "meantemp": "dryBulbTemp",
    "fueltemp": "fuelTemperature",
    "fuelmoist": "fuelMoisture",
    "relhumid": "relHumidity",
}

# WRCC reports missing values as -9999 (miss=08)
WRCC_MISSING = -9999


def _empty_frame(columns: List[str]) -> pd.DataFrame:
    return pd.DataFrame({column: pd.Series(dtype="object") for column in columns})


def parse_fw13(text: str) -> pd.DataFrame:
    """
    Parse FW13 text into a DataFrame with one row per W13 record.

    Lines that are not W13 records are skipped. ``observationDate`` and
    ``observationTime`` are kept as zero padded text; all other numeric
    fields are converted to numbers with blanks read as missing. A blank
    precipitation amount means no precipitation and is stored as 0.

    Args:
        text: Raw FW13 text.

    Returns:
        DataFrame with ``FW13_COLUMNS``. Empty if ``text`` holds no records.
    """
    lines = [line for line in (text or "").splitlines() if line.startswith("W13")]

    if not lines:
        logger.warning("No W13 records found in FW13 text")
        return _empty_frame(FW13_COLUMNS)

    colspecs = [(first - 1, last) for _, first, last in FW13_LAYOUT]
    df = pd.read_fwf(
        io.StringIO("\n".join(lines)),
        colspecs=colspecs,
        names=FW13_COLUMNS,
        dtype=str,
        header=None,
    )

    for column in FW13_COLUMNS:
        if column not in FW13_TEXT_COLUMNS:
            df[column] = pd.to_numeric(df[column], errors="coerce")

    df["precipAmount"] = df["precipAmount"].fillna(0)

    logger.debug(f"Parsed {len(df)} FW13 records")
    return df


def _normalize_label(label: str) -> str:
    return re.sub(r"[^a-z]", "", label.lower())


def parse_wrcc(text: str) -> pd.DataFrame:
    """
    Parse WRCC listing text into a DataFrame with the raw WRCC schema.

    Header lines start with ``:``; the first of them names the columns.
    The packed ``YYMMDDhhmm`` local standard time stamp is split into
    ``observationDate`` (``YYYYMMDD``) and ``observationTime`` (``HHMM``).
    Rows whose time stamp cannot be read are dropped. Data are always
    requested in metric units, so every row gets the metric measurement
    type.

    Args:
        text: Raw comma-delimited WRCC text.

    Returns:
        DataFrame with ``WRCC_COLUMNS``. Empty if ``text`` holds no data rows.
    """
    header = None
    rows = []
    for line in (text or "").splitlines():
        if not line.strip():
            continue
        if line.startswith(":"):
            if header is None:
                header = [label.strip() for label in line[1:].split(",")]
            continue
        rows.append(line)

    if header is None or not rows:
        logger.warning("No data rows found in WRCC text")
        return _empty_frame(WRCC_COLUMNS)

    raw = pd.read_csv(
        io.StringIO("\n".join(rows)),
        header=None,
        names=header,
        dtype=str,
        skipinitialspace=True,
    )

    renames = {}
    for label in raw.columns:
        name = WRCC_LABELS.get(_normalize_label(label))
        if name is not None and name not in renames.values():
            renames[label] = name
    raw = raw[list(renames)].rename(columns=renames)

    if "datetime" not in raw.columns:
        logger.warning("WRCC text has no Date/Time column")
        return _empty_frame(WRCC_COLUMNS)

    stamps = raw["datetime"].str.strip()
    stamp_format = "%Y%m%d%H%M" if stamps.str.len().eq(12).all() else "%y%m%d%H%M"
    local_time = pd.to_datetime(stamps, format=stamp_format, errors="coerce")

    bad = local_time.isna()
    if bad.any():
        logger.warning(f"Dropping {int(bad.sum())} WRCC rows with unreadable time stamps")

    df = pd.DataFrame(index=raw.index[~bad.to_numpy()])
    df["observationDate"] = local_time[~bad].dt.strftime("%Y%m%d")
    df["observationTime"] = local_time[~bad].dt.strftime("%H%M")
    df["measurementType"] = METRIC_UNITS

    for column in WRCC_COLUMNS[3:]:
        if column in raw.columns:
            values = pd.to_numeric(raw.loc[~bad, column], errors="coerce")
            df[column] = values.mask(values <= WRCC_MISSING)
        else:
            df[column] = float("nan")

    df = df.reset_index(drop=True)
    logger.debug(f"Parsed {len(df)} WRCC rows")
    return df
