"""
Reshaping of RAWS timeseries between wide and long formats.
"""

from typing import TYPE_CHECKING

import pandas as pd

from .exceptions import RAWSError
from .models import META_COLUMNS, PARAMETER_COLUMNS

if TYPE_CHECKING:
    from .models import RAWSTimeseries

LONG_COLUMNS = [*META_COLUMNS, "datetime", "parameter", "value"]


def raws_to_long(ts: "RAWSTimeseries") -> pd.DataFrame:
    """
    Flatten a timeseries object into one row per (datetime, parameter).

    Rows are datetime-major: all parameters of the first observation, in
    ``PARAMETER_COLUMNS`` order, then all parameters of the next one.
    Missing values are kept. Station metadata columns are repeated on every
    row.

    Args:
        ts: Timeseries object.

    Returns:
        DataFrame with ``LONG_COLUMNS`` and
        ``len(ts.data) * len(PARAMETER_COLUMNS)`` rows.
    """
    wide = ts.data[["datetime", *PARAMETER_COLUMNS]].reset_index(drop=True)

    long = wide.melt(
        id_vars="datetime",
        value_vars=PARAMETER_COLUMNS,
        var_name="parameter",
        value_name="value",
        ignore_index=False,
    )
    long = long.sort_index(kind="stable").reset_index(drop=True)

    station = ts.meta.iloc[0]
    for column in reversed(META_COLUMNS):
        long.insert(0, column, station[column])

    return long[LONG_COLUMNS]


def long_to_wide(long: pd.DataFrame) -> pd.DataFrame:
    """
    Pivot long format observations back to one column per parameter.

    Raises:
        RAWSError: If required columns are missing or a (datetime, parameter)
            pair occurs more than once.
    """
    missing = [c for c in ("datetime", "parameter", "value") if c not in long.columns]
    if missing:
        raise RAWSError(f"Long format data is missing columns: {', '.join(missing)}")

    if long.duplicated(["datetime", "parameter"]).any():
        raise RAWSError("Long format data has repeated (datetime, parameter) pairs")

    wide = long.pivot(index="datetime", columns="parameter", values="value")
    columns = [column for column in PARAMETER_COLUMNS if column in wide.columns]
    wide = wide.reindex(columns=columns).reset_index()
    wide.columns.name = None
    return wide
