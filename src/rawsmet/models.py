"""
Data models for harmonized RAWS timeseries.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

import pandas as pd

from .exceptions import RAWSError, RAWSParameterError
from .utils import parse_date

logger = logging.getLogger(__name__)

META_COLUMNS = ["nwsID", "wrccID", "siteName", "longitude", "latitude"]

PARAMETER_COLUMNS = [
    "temperature",  # deg C
    "humidity",  # %
    "windSpeed",  # m/s
    "windDirection",  # deg
    "maxGustSpeed",  # m/s
    "maxGustDirection",  # deg
    "precipitation",  # mm per hour
    "solarRadiation",  # W/m^2
    "fuelMoisture",
    "fuelTemperature",
]

DATA_COLUMNS = ["datetime", *PARAMETER_COLUMNS, "monitorType"]


def empty_data() -> pd.DataFrame:
    """Observation table with the canonical columns and no rows."""
    data = pd.DataFrame(
        {column: pd.Series(dtype="float64") for column in PARAMETER_COLUMNS}
    )
    data.insert(0, "datetime", pd.Series(dtype="datetime64[ns, UTC]"))
    data["monitorType"] = pd.Series(dtype="object")
    return data


@dataclass(frozen=True, eq=False)
class RAWSTimeseries:
    """
    Station metadata and harmonized hourly observations for one station.

    ``meta`` holds a single metadata record. ``data`` holds one row per
    observation hour with ``DATA_COLUMNS``, sorted by UTC ``datetime``.
    """

    meta: pd.DataFrame
    data: pd.DataFrame

    def __post_init__(self) -> None:
        if len(self.meta) != 1:
            raise RAWSError(
                f"Timeseries metadata must hold exactly one station, got {len(self.meta)}"
            )
        missing = [column for column in DATA_COLUMNS if column not in self.data.columns]
        if missing:
            raise RAWSError(f"Timeseries data is missing columns: {', '.join(missing)}")

    def __len__(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        """True if there are no observations."""
        return len(self.data) == 0

    def filter_date(
        self,
        start: Optional[Union[str, date, datetime]] = None,
        end: Optional[Union[str, date, datetime]] = None,
    ) -> "RAWSTimeseries":
        """
        Return a new timeseries limited to ``start <= datetime < end``.

        Dates may be ``YYYYMMDD`` strings or date/datetime objects. Naive
        values are taken as UTC. Either bound may be omitted.
        """
        if start is None and end is None:
            raise RAWSParameterError("At least one of 'start' or 'end' is required")

        mask = pd.Series(True, index=self.data.index)
        if start is not None:
            mask &= self.data["datetime"] >= _as_utc(start)
        if end is not None:
            mask &= self.data["datetime"] < _as_utc(end)

        data = self.data[mask].reset_index(drop=True)
        logger.debug(f"Date filter kept {len(data)} of {len(self.data)} rows")
        return RAWSTimeseries(meta=self.meta, data=data)

    def to_long(self) -> pd.DataFrame:
        """Long format observations, see ``rawsmet.reshape.raws_to_long``."""
        from .reshape import raws_to_long

        return raws_to_long(self)


def _as_utc(value: Union[str, date, datetime]) -> pd.Timestamp:
    timestamp = parse_date(value)
    if timestamp.tzinfo is None:
        return timestamp.tz_localize("UTC")
    return timestamp.tz_convert("UTC")


def raws_is_empty(ts: RAWSTimeseries) -> bool:
    """True if the timeseries object has no observations."""
    return ts.is_empty()


def raws_filter_date(
    ts: RAWSTimeseries,
    start: Optional[Union[str, date, datetime]] = None,
    end: Optional[Union[str, date, datetime]] = None,
) -> RAWSTimeseries:
    """Subset a timeseries object to ``start <= datetime < end``."""
    return ts.filter_date(start, end)
