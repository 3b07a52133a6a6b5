"""
Coordinate Models
---------------
Geographic coordinates, bounding squares and the address record returned by
both conversion endpoints.
"""
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import HttpUrl
from shapely.geometry import Point, Polygon, box

from w3w.models.base import W3WModel


def _decimal(value: float) -> str:
    # Positional notation, repr would give 5e-05 for small values
    return format(Decimal(repr(value)), "f")


class GeoCoords(W3WModel):
    """A WGS84 latitude/longitude pair. Ranges are checked by the service."""

    lat: float
    lng: float

    @classmethod
    def parse(cls, text: str) -> "GeoCoords":
        """Parse a ``lat,lng`` string as written by :meth:`__str__`."""
        lat, sep, lng = text.partition(",")
        if not sep:
            raise ValueError(f"Expected coordinates as 'lat,lng', got {text!r}")
        return cls(lat=float(lat), lng=float(lng))

    def to_point(self) -> Point:
        # x is longitude, y is latitude
        return Point(self.lng, self.lat)

    def __str__(self) -> str:
        return f"{_decimal(self.lat)},{_decimal(self.lng)}"


class Square(W3WModel):
    southwest: GeoCoords
    northeast: GeoCoords

    def to_bounds(self) -> Tuple[float, float, float, float]:
        """Return ``(min_x, min_y, max_x, max_y)`` in shapely's axis order."""
        return (
            self.southwest.lng,
            self.southwest.lat,
            self.northeast.lng,
            self.northeast.lat,
        )

    def to_polygon(self) -> Polygon:
        return box(*self.to_bounds())


class Coords(W3WModel):
    """Three word address record.

    The plain-text rendering is only the coordinates of the square's centre;
    use :meth:`to_json` for the full record.
    """

    country: str
    square: Square
    nearest_place: Optional[str] = None
    coordinates: GeoCoords
    words: str
    language: str
    map: HttpUrl

    def __str__(self) -> str:
        return str(self.coordinates)
