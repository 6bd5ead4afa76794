"""
The serializer package houses all the schemas for the input/output of the records.
The serializers are used to generate and validate any raw data (such as JSON)
going in and out of the system.
"""

from .fields import EnumField
from .geojson import GeometryType, Geometry, LocationField
from .models import UserSchema, BikeSchema, RentSchema
