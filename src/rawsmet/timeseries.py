"""
Creation of harmonized timeseries objects from FW13 and WRCC data.

Each ``*_create_timeseries_object`` function runs the same steps:

1. validate and normalize the station identifier
2. find the station's metadata record and its standard UTC offset
3. download and parse the raw data (unless a parsed frame is supplied)
4. correct precipitation, convert to metric, convert time stamps to UTC
5. bundle metadata and observations into a ``RAWSTimeseries``
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional, Union

import pandas as pd

from .client import RAWSClient
from .config import RAWSConfig
from .exceptions import RAWSParameterError
from .meta import (
    add_utc_offset,
    filter_meta,
    fw13_load_meta,
    normalize_nws_id,
    wrcc_load_meta,
)
from .models import DATA_COLUMNS, RAWSTimeseries, empty_data
from .parse import parse_fw13, parse_wrcc
from .timezones import local_standard_to_utc
from .units import (
    convert_precipitation,
    convert_speed,
    convert_temperature,
    correct_precipitation,
)

logger = logging.getLogger(__name__)

WRCC_ID_LENGTH = 6


def normalize_wrcc_id(wrcc_id: str) -> str:
    """
    Validate a WRCC identifier: two letter state prefix plus four characters.

    Raises:
        RAWSParameterError: If the identifier is not six characters long.
    """
    wrcc_id = str(wrcc_id).strip()
    if len(wrcc_id) != WRCC_ID_LENGTH:
        raise RAWSParameterError(
            f"WRCC station id must be {WRCC_ID_LENGTH} characters, got '{wrcc_id}'"
        )
    return wrcc_id


def _sort_local(raw: pd.DataFrame) -> pd.DataFrame:
    # zero padded YYYYMMDD + HHMM sorts chronologically as text
    key = raw["observationDate"].astype(str).str.strip() + raw[
        "observationTime"
    ].astype(str).str.strip().str.zfill(4)
    order = key.sort_values(kind="stable").index
    return raw.loc[order].reset_index(drop=True)


def _finish(data: pd.DataFrame) -> pd.DataFrame:
    unreadable = data["datetime"].isna()
    if unreadable.any():
        logger.warning(f"Dropping {int(unreadable.sum())} rows without a valid time stamp")
        data = data[~unreadable]

    repeated = data["datetime"].duplicated(keep="first")
    if repeated.any():
        logger.warning(f"Dropping {int(repeated.sum())} rows with a repeated time stamp")
        data = data[~repeated]

    return data[DATA_COLUMNS].reset_index(drop=True)


def fw13_harmonize(raw: pd.DataFrame, utc_offset: float) -> pd.DataFrame:
    """
    Convert a parsed FW13 frame into canonical observations.

    Precipitation is corrected in the counter's native units and then
    converted; all other fields are converted row by row according to the
    record's measurement type. Humidity is the mean of the reported hourly
    minimum and maximum.

    Args:
        raw: Output of ``parse_fw13``.
        utc_offset: Station's standard time UTC offset, in hours.

    Returns:
        Observation table with ``DATA_COLUMNS``.
    """
    if raw.empty:
        return empty_data()

    raw = _sort_local(raw)
    measurement_type = raw["measurementType"]

    hourly = correct_precipitation(raw["precipAmount"])

    data = pd.DataFrame(
        {
            "datetime": local_standard_to_utc(
                raw["observationDate"], raw["observationTime"], utc_offset
            ),
            "temperature": convert_temperature(measurement_type, raw["dryBulbTemp"]),
            "humidity": (raw["minRelHumidity"] + raw["maxRelHumidity"]) / 2,
            "windSpeed": convert_speed(measurement_type, raw["avWindSpeed"]),
            "windDirection": raw["windDirection"].astype(float),
            "maxGustSpeed": convert_speed(measurement_type, raw["maxGustSpeed"]),
            "maxGustDirection": raw["maxGustDirection"].astype(float),
            "precipitation": convert_precipitation(measurement_type, hourly),
            "solarRadiation": raw["solarRadiation"].astype(float),
            "fuelMoisture": raw["fuelMoisture"].astype(float),
            "fuelTemperature": float("nan"),
            "monitorType": "FW13",
        }
    )

    return _finish(data)


def wrcc_harmonize(raw: pd.DataFrame, utc_offset: float) -> pd.DataFrame:
    """
    Convert a parsed WRCC frame into canonical observations.

    WRCC reports precipitation per hour, so no counter correction is applied.

    Args:
        raw: Output of ``parse_wrcc``.
        utc_offset: Station's standard time UTC offset, in hours.

    Returns:
        Observation table with ``DATA_COLUMNS``.
    """
    if raw.empty:
        return empty_data()

    raw = _sort_local(raw)
    measurement_type = raw["measurementType"]

    data = pd.DataFrame(
        {
            "datetime": local_standard_to_utc(
                raw["observationDate"], raw["observationTime"], utc_offset
            ),
            "temperature": convert_temperature(measurement_type, raw["dryBulbTemp"]),
            "humidity": raw["relHumidity"].astype(float),
            "windSpeed": convert_speed(measurement_type, raw["avWindSpeed"]),
            "windDirection": raw["windDirection"].astype(float),
            "maxGustSpeed": convert_speed(measurement_type, raw["maxGustSpeed"]),
            "maxGustDirection": raw["maxGustDirection"].astype(float),
            "precipitation": convert_precipitation(measurement_type, raw["precipAmount"]),
            "solarRadiation": raw["solarRadiation"].astype(float),
            "fuelMoisture": raw["fuelMoisture"].astype(float),
            "fuelTemperature": raw["fuelTemperature"].astype(float),
            "monitorType": "WRCC",
        }
    )

    return _finish(data)


def fw13_create_timeseries_object(
    nws_id: Optional[Union[str, int, float]] = None,
    meta: Optional[pd.DataFrame] = None,
    raw: Optional[pd.DataFrame] = None,
    config: Optional[RAWSConfig] = None,
    client: Optional[RAWSClient] = None,
) -> RAWSTimeseries:
    """
    Obtain FW13 data for a station and create a timeseries object.

    Args:
        nws_id: NWS station identifier. Zero padded to six characters.
        meta: Metadata table containing ``nwsID``. Loaded from the configured
            data directory when omitted.
        raw: Already parsed FW13 data. Downloaded when omitted.
        config: Configuration for the metadata loader and the HTTP client.
        client: HTTP client to use. A new one is created and closed when
            omitted.

    Returns:
        RAWSTimeseries with 'meta' and 'data'. 'data' is empty when the
        service returned no usable records.

    Raises:
        RAWSParameterError: If ``nws_id`` is missing.
        RAWSQueryError: If the station or its timezone cannot be found.
    """
    if nws_id is None:
        raise RAWSParameterError("nws_id is required")

    nws_id = normalize_nws_id(nws_id)

    if meta is None:
        meta = fw13_load_meta(config)
    meta = add_utc_offset(filter_meta(meta, "nwsID", nws_id))
    utc_offset = float(meta["UTC_offset"].iloc[0])

    if raw is None:
        if client is None:
            with RAWSClient(config) as new_client:
                text = new_client.download_fw13(nws_id)
        else:
            text = client.download_fw13(nws_id)
        raw = parse_fw13(text)

    data = fw13_harmonize(raw, utc_offset)
    if data.empty:
        logger.warning(f"No FW13 observations for station {nws_id}")

    ts = RAWSTimeseries(meta=meta, data=data)
    logger.info(f"Created FW13 timeseries for {nws_id} with {len(data)} observations")
    return ts


def wrcc_create_timeseries_object(
    wrcc_id: Optional[str] = None,
    meta: Optional[pd.DataFrame] = None,
    start: Optional[Union[str, date, datetime]] = None,
    end: Optional[Union[str, date, datetime]] = None,
    password: Optional[str] = None,
    raw: Optional[pd.DataFrame] = None,
    config: Optional[RAWSConfig] = None,
    client: Optional[RAWSClient] = None,
) -> RAWSTimeseries:
    """
    Obtain WRCC data for a station and create a timeseries object.

    Args:
        wrcc_id: WRCC station identifier (e.g., 'waWENU').
        meta: Metadata table containing ``wrccID``. Loaded from the configured
            data directory when omitted.
        start: First day requested. Defaults to the first day of the
            current month.
        end: Last day requested. Defaults to today.
        password: WRCC password for restricted stations.
        raw: Already parsed WRCC data. Downloaded when omitted.
        config: Configuration for the metadata loader and the HTTP client.
        client: HTTP client to use. A new one is created and closed when
            omitted.

    Returns:
        RAWSTimeseries with 'meta' and 'data'.

    Raises:
        RAWSParameterError: If ``wrcc_id`` is missing or malformed.
        RAWSQueryError: If the station or its timezone cannot be found.
    """
    if wrcc_id is None:
        raise RAWSParameterError("wrcc_id is required")

    wrcc_id = normalize_wrcc_id(wrcc_id)

    if meta is None:
        meta = wrcc_load_meta(config)
    meta = add_utc_offset(filter_meta(meta, "wrccID", wrcc_id))
    utc_offset = float(meta["UTC_offset"].iloc[0])

    if raw is None:
        today = datetime.now(timezone.utc).date()
        start = start if start is not None else today.replace(day=1)
        end = end if end is not None else today

        if client is None:
            with RAWSClient(config) as new_client:
                text = new_client.download_wrcc(wrcc_id, start, end, password)
        else:
            text = client.download_wrcc(wrcc_id, start, end, password)
        raw = parse_wrcc(text)

    data = wrcc_harmonize(raw, utc_offset)
    if data.empty:
        logger.warning(f"No WRCC observations for station {wrcc_id}")

    ts = RAWSTimeseries(meta=meta, data=data)
    logger.info(f"Created WRCC timeseries for {wrcc_id} with {len(data)} observations")
    return ts
