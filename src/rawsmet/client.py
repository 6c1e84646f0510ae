"""
HTTP client for the FW13 archive and the WRCC data listing service.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .config import RAWSConfig
from .exceptions import RAWSConnectionError, RAWSParameterError, RAWSQueryError
from .utils import DateLike, parse_date

logger = logging.getLogger(__name__)

class RAWSClient:
    """
    Client for downloading raw RAWS observation text.

    Two services are supported: the CEFA FW13 archive, which serves the full
    hourly history of a station as fixed-width W13 records, and the WRCC
    listing service, which serves recent observations as delimited text.
    """

    def __init__(self, config: Optional[RAWSConfig] = None):
        self.config = config or RAWSConfig()
        self.timeout = self.config.timeout
        self._client = httpx.Client(
            timeout=self.timeout,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "text/plain",
            },
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "RAWSClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _make_request(self, url: str, params: Optional[Dict[str, str]] = None) -> str:
        """Make a GET request and return the response body as text."""
        logger.debug(f"Requesting {url} with params {self._redact(params)}")

        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return response.text

        except httpx.TimeoutException as e:
            raise RAWSConnectionError(f"Request timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise RAWSQueryError("Station or data not found") from e
            elif e.response.status_code == 429:
                raise RAWSConnectionError("Rate limit exceeded") from e
            elif e.response.status_code >= 500:
                raise RAWSConnectionError("RAWS service temporarily unavailable") from e
            else:
                raise RAWSConnectionError(
                    f"HTTP error {e.response.status_code}: {e}"
                ) from e
        except httpx.RequestError as e:
            raise RAWSConnectionError(f"Network error: {e}") from e

    @staticmethod
    def _redact(params: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if not params or "pass" not in params:
            return params
        return {**params, "pass": "***"}

    def download_fw13(self, nws_id: str) -> str:
        """
        Download the complete FW13 history for a station.

        Args:
            nws_id: Six character, zero padded NWS station identifier.

        Returns:
            Raw W13 text, one record per line.
        """
        url = f"{self.config.fw13_base_url}{nws_id}.fw13"
        text = self._make_request(url)
        logger.debug(f"Downloaded {len(text)} characters of FW13 data for {nws_id}")
        return text

    def download_wrcc(
        self,
        wrcc_id: str,
        start: DateLike,
        end: DateLike,
        password: Optional[str] = None,
    ) -> str:
        """
        Download observations for a station from the WRCC listing service.

        Args:
            wrcc_id: WRCC station identifier (e.g., 'waWENU').
            start: First day requested.
            end: Last day requested.
            password: WRCC password. Falls back to the configured password.

        Returns:
            Raw comma-delimited text in metric units with ":"-prefixed header
            lines.
        """
        start_ts = parse_date(start)
        end_ts = parse_date(end)
        if end_ts < start_ts:
            raise RAWSParameterError(
                f"End date {end_ts.date()} is before start date {start_ts.date()}"
            )

        params = {
            "stn": wrcc_id,
            "smon": f"{start_ts.month:02d}",
            "sday": f"{start_ts.day:02d}",
            "syea": f"{start_ts.year % 100:02d}",
            "emon": f"{end_ts.month:02d}",
            "eday": f"{end_ts.day:02d}",
            "eyea": f"{end_ts.year % 100:02d}",
            "qBasic": "ON",
            "unit": "M",
            "Ofor": "A",
            "Datareq": "C",
            "qc": "Y",
            "miss": "08",
            "obs": "N",
        }

        password = password or self.config.wrcc_password
        if password:
            params["pass"] = password

        text = self._make_request(self.config.wrcc_base_url, params)
        logger.debug(f"Downloaded {len(text)} characters of WRCC data for {wrcc_id}")
        return text
