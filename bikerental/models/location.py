from dataclasses import dataclass

from shapely.geometry import Point


@dataclass(frozen=True)
class Location:
    """
    A location places a bike at a set of coordinates.

    .. note:: GeoJSON orders coordinates as (longitude, latitude),
        so the shapely point has x as the longitude.
    """

    latitude: float
    longitude: float

    @property
    def point(self) -> Point:
        return Point(self.longitude, self.latitude)

    @classmethod
    def from_point(cls, point: Point) -> "Location":
        return cls(latitude=point.y, longitude=point.x)

    def __str__(self):
        return f"{self.latitude},{self.longitude}"
