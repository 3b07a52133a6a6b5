"""
what3words API client.

Converts three word addresses to geographic coordinates and back, and lists
the languages three word addresses are available in.
"""
from w3w.geocoding import (
    ApiError,
    Client,
    HttpTransportError,
    JsonError,
    UrlError,
    W3WError,
)
from w3w.models import (
    AvailableLanguages,
    Coords,
    ErrorCode,
    ErrorResponse,
    GeoCoords,
    Language,
    Square,
)

__all__ = [
    "Client",
    "W3WError",
    "ApiError",
    "HttpTransportError",
    "JsonError",
    "UrlError",
    "GeoCoords",
    "Square",
    "Coords",
    "Language",
    "AvailableLanguages",
    "ErrorCode",
    "ErrorResponse",
]
