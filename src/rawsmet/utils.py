"""
Internal utility functions for rawsmet.
"""

from datetime import date, datetime
from typing import Union

import pandas as pd

from .exceptions import RAWSParameterError

DateLike = Union[str, date, datetime]


def parse_date(value: DateLike) -> pd.Timestamp:
    """
    Interpret a date given as ``YYYYMMDD``/ISO text or a date object.

    Raises:
        RAWSParameterError: If the value cannot be read as a date.
    """
    if value is None:
        raise RAWSParameterError("A date is required")
    try:
        if isinstance(value, str):
            value = value.strip()
            if len(value) == 8 and value.isdigit():
                return pd.Timestamp(datetime.strptime(value, "%Y%m%d"))
        return pd.Timestamp(value)
    except (ValueError, TypeError) as e:
        raise RAWSParameterError(f"Could not parse date '{value}': {e}") from e
