"""
Configuration for RAWS data access.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import RAWSParameterError

FW13_BASE_URL = "https://cefa.dri.edu/raws/fw13/"
WRCC_BASE_URL = "https://wrcc.dri.edu/cgi-bin/wea_list2.pl"


@dataclass
class RAWSConfig:
    """
    Settings shared by the fetcher and the metadata loaders.

    Args:
        fw13_base_url: Base URL of the FW13 archive. Station files live at
            ``{fw13_base_url}{nwsID}.fw13``.
        wrcc_base_url: URL of the WRCC data listing service.
        timeout: HTTP timeout in seconds.
        data_dir: Directory holding the station metadata tables
            (``fw13_meta.csv``, ``wrcc_meta.csv``).
        wrcc_password: Password required by WRCC for some station classes.
        user_agent: User-Agent header sent with every request.
    """

    fw13_base_url: str = FW13_BASE_URL
    wrcc_base_url: str = WRCC_BASE_URL
    timeout: int = 30
    data_dir: Optional[Union[str, Path]] = None
    wrcc_password: Optional[str] = None
    user_agent: str = "rawsmet/0.1.0"

    @classmethod
    def from_env(cls) -> "RAWSConfig":
        """
        Build a configuration from ``RAWSMET_*`` environment variables.

        Recognized variables are ``RAWSMET_DATA_DIR``, ``RAWSMET_TIMEOUT``
        and ``RAWSMET_WRCC_PASSWORD``. Unset variables keep their defaults.
        """
        config = cls()

        data_dir = os.environ.get("RAWSMET_DATA_DIR")
        if data_dir:
            config.data_dir = data_dir

        timeout = os.environ.get("RAWSMET_TIMEOUT")
        if timeout:
            try:
                config.timeout = int(timeout)
            except ValueError as e:
                raise RAWSParameterError(
                    f"RAWSMET_TIMEOUT must be an integer, got '{timeout}'"
                ) from e

        password = os.environ.get("RAWSMET_WRCC_PASSWORD")
        if password:
            config.wrcc_password = password

        return config

    def meta_path(self, filename: str) -> Optional[Path]:
        """Location of a metadata table inside ``data_dir``, if one is set."""
        if self.data_dir is None:
            return None
        return Path(self.data_dir).expanduser() / filename
