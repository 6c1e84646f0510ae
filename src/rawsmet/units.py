"""
Unit conversion and precipitation counter correction for RAWS observations.

FW13 measurement type codes: 1 = U.S. units (Fahrenheit, miles per hour,
inches with an implied decimal, nn.nnn), 2 = metric (Celsius, meters per
second, millimeters). The code is carried per record and can change within
a single station history, so every conversion takes the code alongside the
values.
"""

from typing import Any, Callable

import numpy as np
import pandas as pd

US_UNITS = 1
METRIC_UNITS = 2

METERS_PER_MILE = 1609.344
SECONDS_PER_HOUR = 3600
MM_PER_INCH = 25.4


def _convert_us(
    measurement_type: Any, values: Any, convert: Callable[[np.ndarray], np.ndarray]
) -> Any:
    """Apply ``convert`` where the measurement type is U.S., pass through elsewhere."""
    raw = np.asarray(values, dtype=float)
    us = np.asarray(measurement_type) == US_UNITS
    converted = np.where(us, convert(raw), raw)

    if isinstance(values, pd.Series):
        return pd.Series(converted, index=values.index, name=values.name)
    if converted.ndim == 0:
        return float(converted)
    return converted


def convert_temperature(measurement_type: Any, temperature: Any) -> Any:
    """Degrees Fahrenheit to degrees Celsius for U.S. records."""
    return _convert_us(measurement_type, temperature, lambda t: 5 / 9 * (t - 32))


def convert_speed(measurement_type: Any, speed: Any) -> Any:
    """Miles per hour to meters per second for U.S. records."""
    return _convert_us(
        measurement_type, speed, lambda s: s * METERS_PER_MILE / SECONDS_PER_HOUR
    )


def convert_precipitation(measurement_type: Any, amount: Any) -> Any:
    """Thousandths of an inch to millimeters for U.S. records."""
    return _convert_us(measurement_type, amount, lambda a: a * MM_PER_INCH / 1000)


def correct_precipitation(cumulative: Any) -> pd.Series:
    """
    Turn a daily cumulative precipitation counter into hourly amounts.

    The counter resets at local midnight, which shows up as a negative
    difference. For those hours the negative difference is added to the
    prior reading, leaving the amount accumulated since the reset.

    Rows must be in ascending time order. The first element is always
    missing; any other missing result is set to 0. Two resets in a row
    are not treated specially.

    Args:
        cumulative: Cumulative readings, one per hour.

    Returns:
        Hourly amounts, same length and index as the input.
    """
    if isinstance(cumulative, pd.Series):
        readings = cumulative.astype(float)
    else:
        readings = pd.Series(np.asarray(cumulative, dtype=float))

    prior = readings.shift(1)
    hourly = readings - prior

    reset = hourly < 0
    hourly[reset] = hourly[reset] + prior[reset]

    hourly = hourly.fillna(0)
    if len(hourly) > 0:
        hourly.iloc[0] = np.nan

    return hourly
