"""
Geocoding Module
--------------
Client for the what3words API: request construction, response decoding and
the errors raised when either fails.
"""
from w3w.geocoding.client import Client, DEFAULT_BASE_URL
from w3w.geocoding.envelope import ApiResponse, Failure, Success, decode_response
from w3w.geocoding.exceptions import (
    ApiError,
    HttpTransportError,
    JsonError,
    UrlError,
    W3WError,
)

__all__ = [
    "Client",
    "DEFAULT_BASE_URL",
    "ApiResponse",
    "Success",
    "Failure",
    "decode_response",
    "W3WError",
    "ApiError",
    "HttpTransportError",
    "JsonError",
    "UrlError",
]
