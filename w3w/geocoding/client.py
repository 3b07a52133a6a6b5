"""
what3words Client
---------------
Converts three word addresses to coordinates and back using the what3words
v3 API. Each call is one blocking GET request; nothing is cached or retried,
and input is sent to the service unvalidated.
"""
import logging
from typing import List, Optional, Tuple, Type
from urllib.parse import urljoin, urlsplit

import requests
from pydantic import SecretStr

from w3w.geocoding.envelope import T, decode_response
from w3w.geocoding.exceptions import HttpTransportError, JsonError, UrlError
from w3w.models import AvailableLanguages, Coords, GeoCoords

# Constants
DEFAULT_BASE_URL = "https://api.what3words.com/v3/"
REQUEST_TIMEOUT = 10

# Get logger
logger = logging.getLogger(__name__)


class Client:
    """
    what3words API client.

    The API key is held as a secret and left out of ``repr`` and of every log
    line and error message. The client keeps no mutable state, so one
    instance can be shared between threads.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._key = SecretStr(api_key)
        self._base_url = base_url
        self._timeout = timeout
        self._session = session
        logger.debug(f"Creating new client for {base_url}")

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def __repr__(self) -> str:
        return f"Client(base_url={self._base_url!r})"

    def _prepare_request(self, path: str, **params: str) -> Tuple[str, List[Tuple[str, str]]]:
        try:
            url = urljoin(self._base_url, path)
            parts = urlsplit(url)
            parts.port  # raises ValueError for a non-numeric port
        except ValueError as e:
            raise UrlError(f"Cannot join {path!r} onto {self._base_url!r}: {e}") from e
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise UrlError(f"Cannot join {path!r} onto {self._base_url!r}: not an absolute http(s) URL")

        logger.debug(f"Prepared request for {url}")
        query = [("format", "json"), ("key", self._key.get_secret_value())]
        query.extend(params.items())
        return url, query

    def _send(self, url: str, params: List[Tuple[str, str]], model: Type[T]) -> T:
        requester = self._session if self._session is not None else requests
        try:
            response = requester.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            # The exception text can contain the full URL, key included
            logger.debug(f"Request to {url} failed with {type(e).__name__}")
            raise HttpTransportError(f"HTTP transport error ({type(e).__name__}) for {url}") from e

        logger.debug(f"Response from {url}: {response.status_code} {response.reason}")

        # Error replies come with non-2xx statuses, so the body is decoded regardless
        try:
            payload = response.json()
        except ValueError as e:
            raise JsonError(f"Response from {url} is not valid JSON (status {response.status_code})") from e

        return decode_response(payload, model).resolve()

    def convert_to_coordinates(self, words: str) -> Coords:
        """Convert a three word address such as ``filled.count.soap`` to coordinates."""
        url, params = self._prepare_request("convert-to-coordinates", words=words)
        return self._send(url, params, Coords)

    def convert_to_3wa(self, coordinates: GeoCoords, language: Optional[str] = None) -> Coords:
        """Convert coordinates to the three word address of their square."""
        extra = {"coordinates": str(coordinates)}
        if language is not None:
            extra["language"] = language
        url, params = self._prepare_request("convert-to-3wa", **extra)
        return self._send(url, params, Coords)

    def available_languages(self) -> AvailableLanguages:
        url, params = self._prepare_request("available-languages")
        return self._send(url, params, AvailableLanguages)
