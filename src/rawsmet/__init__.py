"""
Python client for RAWS (Remote Automated Weather Station) data.

Download FW13 and WRCC observations and harmonize them into metric,
UTC-based timeseries objects.
"""

try:
    from importlib import metadata

    __version__ = metadata.version(__name__)
except Exception:
    __version__ = "unknown"

from .client import RAWSClient
from .config import RAWSConfig
from .exceptions import (
    RAWSConnectionError,
    RAWSError,
    RAWSParameterError,
    RAWSQueryError,
)
from .meta import (
    add_utc_offset,
    filter_meta,
    fw13_load_meta,
    load_meta,
    wrcc_load_meta,
)
from .models import (
    DATA_COLUMNS,
    PARAMETER_COLUMNS,
    RAWSTimeseries,
    raws_filter_date,
    raws_is_empty,
)
from .parse import parse_fw13, parse_wrcc
from .reshape import long_to_wide, raws_to_long
from .timeseries import (
    fw13_create_timeseries_object,
    fw13_harmonize,
    wrcc_create_timeseries_object,
    wrcc_harmonize,
)
from .timezones import get_utc_offset, local_standard_to_utc, timezone_table
from .units import (
    convert_precipitation,
    convert_speed,
    convert_temperature,
    correct_precipitation,
)

__all__ = [
    "RAWSClient",
    "RAWSConfig",
    "RAWSError",
    "RAWSParameterError",
    "RAWSConnectionError",
    "RAWSQueryError",
    "add_utc_offset",
    "filter_meta",
    "fw13_load_meta",
    "load_meta",
    "wrcc_load_meta",
    "DATA_COLUMNS",
    "PARAMETER_COLUMNS",
    "RAWSTimeseries",
    "raws_filter_date",
    "raws_is_empty",
    "parse_fw13",
    "parse_wrcc",
    "long_to_wide",
    "raws_to_long",
    "fw13_create_timeseries_object",
    "fw13_harmonize",
    "wrcc_create_timeseries_object",
    "wrcc_harmonize",
    "get_utc_offset",
    "local_standard_to_utc",
    "timezone_table",
    "convert_precipitation",
    "convert_speed",
    "convert_temperature",
    "correct_precipitation",
]
