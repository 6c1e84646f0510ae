"""
Station metadata tables.

A metadata table has one row per station with at least the columns in
``REQUIRED_META_COLUMNS``. Tables are kept as CSV files in the configured
data directory and read with pandas.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .config import RAWSConfig
from .exceptions import RAWSError, RAWSQueryError
from .timezones import get_utc_offset

logger = logging.getLogger(__name__)

REQUIRED_META_COLUMNS = [
    "nwsID",
    "wrccID",
    "siteName",
    "longitude",
    "latitude",
    "timezone",
]

ID_COLUMNS = ["nwsID", "wrccID"]

FW13_META_FILE = "fw13_meta.csv"
WRCC_META_FILE = "wrcc_meta.csv"


def normalize_nws_id(nws_id: Union[str, int, float]) -> str:
    """Zero pad an NWS identifier to six characters."""
    if isinstance(nws_id, float) and nws_id.is_integer():
        nws_id = int(nws_id)
    return re.sub(r"\.0$", "", str(nws_id).strip()).zfill(6)


def validate_meta(meta: pd.DataFrame) -> pd.DataFrame:
    """
    Check that a metadata table has the required columns.

    Identifier columns are returned as text, with ``nwsID`` zero padded.

    Raises:
        RAWSError: If required columns are missing.
    """
    missing = [column for column in REQUIRED_META_COLUMNS if column not in meta.columns]
    if missing:
        raise RAWSError(f"Metadata is missing required columns: {', '.join(missing)}")

    meta = meta.copy()
    for column in ID_COLUMNS:
        if pd.api.types.is_float_dtype(meta[column]):
            # NaN forces integer ids to float
            meta[column] = meta[column].astype("Int64")
        meta[column] = meta[column].astype("string").str.strip()
    meta["nwsID"] = meta["nwsID"].str.replace(r"\.0$", "", regex=True).str.zfill(6)
    return meta


def load_meta(path: Union[str, Path]) -> pd.DataFrame:
    """
    Read a station metadata table from CSV.

    Raises:
        RAWSError: If the file does not exist or lacks required columns.
    """
    path = Path(path)
    if not path.exists():
        raise RAWSError(f"Metadata file not found: {path}")

    meta = pd.read_csv(path, dtype={column: str for column in ID_COLUMNS})
    logger.debug(f"Loaded {len(meta)} stations from {path}")
    return validate_meta(meta)


def _load_configured_meta(filename: str, config: Optional[RAWSConfig]) -> pd.DataFrame:
    config = config or RAWSConfig.from_env()
    path = config.meta_path(filename)
    if path is None:
        raise RAWSError(
            "No data directory configured. Pass 'meta' explicitly or set "
            "RAWSConfig.data_dir (or RAWSMET_DATA_DIR)."
        )
    return load_meta(path)


def fw13_load_meta(config: Optional[RAWSConfig] = None) -> pd.DataFrame:
    """Load the FW13 station metadata table from the configured data directory."""
    return _load_configured_meta(FW13_META_FILE, config)


def wrcc_load_meta(config: Optional[RAWSConfig] = None) -> pd.DataFrame:
    """Load the WRCC station metadata table from the configured data directory."""
    return _load_configured_meta(WRCC_META_FILE, config)


def add_utc_offset(meta: pd.DataFrame) -> pd.DataFrame:
    """
    Add the ``UTC_offset`` column derived from each station's timezone.

    Raises:
        RAWSQueryError: If a timezone is not in the timezone table.
    """
    meta = meta.copy()
    meta["UTC_offset"] = [get_utc_offset(tz) for tz in meta["timezone"]]
    return meta


def filter_meta(meta: pd.DataFrame, column: str, station_id: str) -> pd.DataFrame:
    """
    Subset a metadata table to the record for one station.

    When several records match, the first one is used and a warning logged.

    Raises:
        RAWSQueryError: If no row matches.
    """
    meta = validate_meta(meta)
    subset = meta[meta[column].fillna("") == station_id].reset_index(drop=True)

    if subset.empty:
        raise RAWSQueryError(f"Station {column} '{station_id}' not found in metadata")
    if len(subset) > 1:
        logger.warning(
            f"{len(subset)} metadata records match {column} '{station_id}', using the first"
        )
        subset = subset.iloc[:1]

    return subset
