"""
GeoJSON Schema
--------------

Implements serializers for GeoJSON geometries, which is the format
through which spacial data enters and leaves the system.
"""
from enum import Enum
from typing import Optional, Dict, Any

from marshmallow import Schema, validates_schema, ValidationError, fields
from marshmallow.fields import List, Float
from shapely.geometry import mapping, Point

from bikerental.models import Location
from bikerental.serializer.fields import EnumField


class GeometryType(str, Enum):
    """The geometries a location can be read from. Bikes are only ever at a point."""

    POINT = "Point"


class Geometry(Schema):
    """A point geometry, the only kind of geometry a bike can have."""

    type = EnumField(GeometryType, required=True)
    coordinates = List(Float(), required=True)

    @validates_schema
    def assert_two_coordinates(self, data, **kwargs):
        if len(data["coordinates"]) != 2:
            raise ValidationError("A point must have exactly two coordinates.")


class LocationField(fields.Field):
    """
    A field that serializes a :class:`~bikerental.models.Location`
    to a GeoJSON point geometry and back.
    """

    def _serialize(self, value: Optional[Location], attr, obj, **kwargs) -> Optional[Dict[str, Any]]:
        if value is None:
            return None

        geometry = mapping(value.point)
        return {"type": geometry["type"], "coordinates": list(geometry["coordinates"])}

    def _deserialize(self, value, attr, data, **kwargs) -> Location:
        geometry = Geometry().load(value)
        location = Location.from_point(Point(geometry["coordinates"]))

        if not -90 <= location.latitude <= 90:
            raise ValidationError(f"Latitude {location.latitude} is out of range.")
        if not -180 <= location.longitude <= 180:
            raise ValidationError(f"Longitude {location.longitude} is out of range.")

        return location
