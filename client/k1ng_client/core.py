"""
K1NG Core Transport

This module holds the authenticated HTTP channel to the K1NG API host.
A Core keeps the normalized base URL plus the API credentials, and appends
the credentials to every request it sends.
"""

import logging
import urllib.parse
from enum import Enum
from typing import Mapping, Optional

import requests

from .exceptions import InvalidURLError, UnsupportedMethodError

logger = logging.getLogger(__name__)

# MySQL time formats
TIME_FORMAT_MYSQL_DATE = "%Y-%m-%d"
TIME_FORMAT_MYSQL_TIME = "%H:%M:%S"
TIME_FORMAT_MYSQL_DATETIME = "%Y-%m-%d %H:%M:%S"


def format_mysql_datetime(value) -> str:
    """Format value as YYYY-MM-DD HH:MM:SS with a four digit year"""
    # strftime("%Y") does not pad years below 1000 on every platform
    return (f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}")


class ConsumeMethod(str, Enum):
    """HTTP methods the API accepts"""

    GET = "GET"
    POST = "POST"


class Module(str, Enum):
    """Product lines available on the API"""

    SMS = "SMS"
    EMAIL = "EMAIL"
    WHATSAPP = "WA"


class Core:
    """Authenticated transport for the K1NG API"""

    def __init__(self, host_url: str, api_key: str, api_pass: str, timeout: Optional[float] = None):
        try:
            parsed = urllib.parse.urlparse(host_url)
        except (TypeError, ValueError) as e:
            raise InvalidURLError(f"Invalid host URL {host_url!r}: {e}") from e

        if not parsed.scheme or not parsed.netloc:
            raise InvalidURLError(f"Invalid host URL {host_url!r}: scheme and host are required")

        self._url = urllib.parse.urlunparse(parsed._replace(query="", fragment=""))
        self._api_key = api_key
        self._api_pass = api_pass
        self._timeout = timeout

    def __repr__(self):
        return f"Core(base_url={self.base_url!r})"

    @property
    def url(self) -> str:
        return self._url

    @property
    def base_url(self) -> str:
        return self._url.rstrip("/?#")

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_pass(self) -> str:
        return self._api_pass

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def endpoint_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint}"

    def consume(self, method, endpoint: str, params: Mapping) -> requests.Response:
        """
        Call an API endpoint with the credentials appended to the parameters.

        Args:
            method: ConsumeMethod.GET or ConsumeMethod.POST
            endpoint: Path relative to the base URL, e.g. "api/v1/send"
            params: Request parameters; values may be strings or lists of strings

        Returns:
            requests.Response: The raw HTTP response

        Raises:
            UnsupportedMethodError: For any method other than GET or POST
            requests.exceptions.RequestException: When the request fails
        """
        if method not in (ConsumeMethod.GET, ConsumeMethod.POST):
            raise UnsupportedMethodError(method)

        url = self.endpoint_url(endpoint)
        data = dict(params)
        data["api_key"] = self._api_key
        data["api_pass"] = self._api_pass

        logger.debug(f"{ConsumeMethod(method).value} {url} ({len(data)} params)")

        if method == ConsumeMethod.GET:
            response = requests.get(url, params=data, timeout=self._timeout)
        else:
            response = requests.post(url, data=data, timeout=self._timeout)

        logger.debug(f"{url} answered with HTTP {response.status_code}")
        return response
