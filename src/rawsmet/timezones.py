"""
Standard time UTC offsets and conversion of local standard time to UTC.

RAWS report in local standard time all year round. No IANA zone describes
"standard time without daylight saving", so time stamps are first read as
if they were UTC and then shifted by the station's fixed standard offset.

The offset table only lists the zones RAWS stations are located in (the
United States, its territories and the bordering Canadian and Mexican
zones). Any other IANA name is reported as not found.
"""

import logging
from typing import Any, Dict

import pandas as pd

from .exceptions import RAWSQueryError

logger = logging.getLogger(__name__)

# Standard time offsets in hours for the zones RAWS stations are found in
TIMEZONE_OFFSETS: Dict[str, float] = {
    "UTC": 0,
    "America/Puerto_Rico": -4,
    "America/St_Thomas": -4,
    "America/Halifax": -4,
    "America/New_York": -5,
    "America/Detroit": -5,
    "America/Toronto": -5,
    "America/Kentucky/Louisville": -5,
    "America/Kentucky/Monticello": -5,
    "America/Indiana/Indianapolis": -5,
    "America/Indiana/Marengo": -5,
    "America/Indiana/Petersburg": -5,
    "America/Indiana/Vevay": -5,
    "America/Indiana/Vincennes": -5,
    "America/Indiana/Winamac": -5,
    "America/Chicago": -6,
    "America/Indiana/Knox": -6,
    "America/Indiana/Tell_City": -6,
    "America/Menominee": -6,
    "America/North_Dakota/Beulah": -6,
    "America/North_Dakota/Center": -6,
    "America/North_Dakota/New_Salem": -6,
    "America/Winnipeg": -6,
    "America/Regina": -6,
    "America/Mexico_City": -6,
    "America/Denver": -7,
    "America/Boise": -7,
    "America/Phoenix": -7,
    "America/Edmonton": -7,
    "America/Hermosillo": -7,
    "America/Whitehorse": -7,
    "America/Los_Angeles": -8,
    "America/Vancouver": -8,
    "America/Tijuana": -8,
    "America/Anchorage": -9,
    "America/Juneau": -9,
    "America/Metlakatla": -9,
    "America/Nome": -9,
    "America/Sitka": -9,
    "America/Yakutat": -9,
    "America/Adak": -10,
    "Pacific/Honolulu": -10,
    "Pacific/Pago_Pago": -11,
    "Pacific/Guam": 10,
    "Pacific/Saipan": 10,
}


def timezone_table() -> pd.DataFrame:
    """Reference table with ``timezone`` and ``UTC_offset`` columns."""
    return pd.DataFrame(
        {
            "timezone": list(TIMEZONE_OFFSETS),
            "UTC_offset": [float(offset) for offset in TIMEZONE_OFFSETS.values()],
        }
    )


def get_utc_offset(timezone: str) -> float:
    """
    Standard time UTC offset, in hours, of an IANA timezone.

    Raises:
        RAWSQueryError: If the timezone is not in the reference table.
    """
    try:
        return float(TIMEZONE_OFFSETS[timezone])
    except (KeyError, TypeError) as e:
        raise RAWSQueryError(f"Timezone '{timezone}' not found in timezone table") from e


def local_standard_to_utc(dates: Any, times: Any, utc_offset: float) -> pd.Series:
    """
    Combine local standard date and time fields into UTC time stamps.

    Args:
        dates: ``YYYYMMDD`` values.
        times: ``HHMM`` values; shorter values are zero padded.
        utc_offset: Fixed standard time offset of the station, in hours.

    Returns:
        Series of timezone-aware UTC time stamps. Unreadable values are NaT.
    """
    dates = pd.Series(dates, dtype="object").astype(str).str.strip()
    times = pd.Series(times, dtype="object").astype(str).str.strip().str.zfill(4)

    parsed = pd.to_datetime(dates + times, format="%Y%m%d%H%M", utc=True, errors="coerce")

    unreadable = int(parsed.isna().sum())
    if unreadable:
        logger.warning(f"{unreadable} time stamps could not be parsed")

    return parsed - pd.to_timedelta(utc_offset, unit="h")

