"""
clients/api_client.py
---------------------
Remote Fetch Client used by the dashboard to read JSON from the API service.

Responsibilities:
    - GET a URL with a bounded timeout.
    - Decode the body into a list of records.
    - Never raise: every failure becomes an explicit ``FetchResult`` error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 5.0

Record = dict[str, Any]


class FetchErrorKind(str, Enum):
    TRANSPORT = "transport"  # unreachable, timed out, or non-2xx
    DECODE = "decode"        # not JSON, or not a list of records


@dataclass(frozen=True)
class FetchResult:
    data: Optional[list[Record]] = None
    error: Optional[FetchErrorKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def _records(payload: Any) -> Optional[list[Record]]:
    """Accept a bare JSON array or a response envelope carrying ``data``."""
    if isinstance(payload, dict) and "data" in payload:
        payload = payload["data"]
    if not isinstance(payload, list):
        return None
    if not all(isinstance(item, dict) for item in payload):
        return None
    return payload


class ApiClient:
    """
    Blocking JSON reader for one API base URL.

    Without an injected ``session`` every GET goes through ``requests.get``,
    so concurrent requests share no connection state.
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch(self, url: str) -> FetchResult:
        """
        GET ``url`` and decode its body.

        Returns:
            A FetchResult with ``data`` on success, otherwise the error kind
            and a short human-readable detail.
        """
        try:
            get = self.session.get if self.session is not None else requests.get
            resp = get(url, timeout=self.timeout, headers={"Accept": "application/json"})
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"GET {url} failed: {e}")
            return FetchResult(error=FetchErrorKind.TRANSPORT, detail=str(e))

        try:
            payload = resp.json()
        except ValueError as e:
            logger.warning(f"GET {url} returned a non-JSON body: {e}")
            return FetchResult(error=FetchErrorKind.DECODE, detail="response is not JSON")

        records = _records(payload)
        if records is None:
            logger.warning(f"GET {url} returned JSON that is not a list of records.")
            return FetchResult(error=FetchErrorKind.DECODE, detail="response is not a list of records")
        return FetchResult(data=records)

    def fetch_json(self, url: str) -> Optional[list[Record]]:
        """Like ``fetch`` but collapses every failure to None."""
        return self.fetch(url).data

    def get_path(self, path: str) -> FetchResult:
        return self.fetch(self.url_for(path))

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
