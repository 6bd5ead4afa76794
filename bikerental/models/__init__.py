"""
The models package contains the records the rental service works with.

The records only store data. Identity is assigned by the
:class:`~bikerental.service.RentalService` when they are registered.
"""

from .bike import Bike, BikeStatus
from .location import Location
from .rent import Rent
from .user import User
