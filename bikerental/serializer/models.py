"""
Model Serializers
-----------------

Defines serializers for the various records in the system.
"""

from marshmallow import Schema, post_load
from marshmallow.fields import Boolean, String, Email, Nested, DateTime, Float, Integer, List, Url
from marshmallow.validate import Range

from bikerental.models import User, Bike, BikeStatus
from .fields import EnumField
from .geojson import LocationField


class UserSchema(Schema):
    """The schema corresponding to the :class:`~bikerental.models.User` record."""

    id = String(dump_only=True)
    name = String(required=True)
    email = Email(required=True)
    password = String(required=True, load_only=True)

    @post_load
    def make_user(self, data, **kwargs) -> User:
        return User(**data)


class BikeSchema(Schema):
    """The schema corresponding to the :class:`~bikerental.models.Bike` record."""

    id = String(dump_only=True)
    name = String(required=True)
    type = String(required=True)
    body_size = Integer(required=True, validate=Range(min=0))
    max_load = Integer(required=True, validate=Range(min=0))
    rate = Float(required=True, validate=Range(min=0))
    description = String(required=True)
    rating = Float(required=True)
    image_urls = List(Url())
    available = Boolean(dump_only=True)
    status = EnumField(BikeStatus, dump_only=True)
    location = LocationField(allow_none=True)

    @post_load
    def make_bike(self, data, **kwargs) -> Bike:
        return Bike(**data)


class RentSchema(Schema):
    """
    The schema corresponding to the :class:`~bikerental.models.Rent` record.

    Rents are created by the service, so this schema only dumps.
    """

    id = String(dump_only=True)
    user = Nested(UserSchema(), dump_only=True)
    bike = Nested(BikeSchema(), dump_only=True)
    start = DateTime(dump_only=True)
    end = DateTime(dump_only=True)
    price = Float(dump_only=True)
    is_active = Boolean(dump_only=True)
