"""
Data Models Module
----------------
Contains Pydantic models for the what3words API payloads.
Defines coordinates, squares, address records, languages and error responses,
together with their JSON serialization and plain-text rendering.
"""
from w3w.models.coords import GeoCoords, Square, Coords
from w3w.models.language import Language, AvailableLanguages
from w3w.models.errors import ErrorCode, ErrorResponse

__all__ = [
    "GeoCoords",
    "Square",
    "Coords",
    "Language",
    "AvailableLanguages",
    "ErrorCode",
    "ErrorResponse",
]
