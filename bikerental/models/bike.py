"""
Bike
-------------------------

Represents a bike that can be rented. A bike is either available
or rented, which is tracked by its availability flag. The
:class:`~bikerental.service.RentalService` flips the flag as rents
start and end, and keeps it in step with the active rents.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from bikerental.models.location import Location


class BikeStatus(str, Enum):
    """
    Represents the possible states of a bike.
    """

    AVAILABLE = "available"
    RENTED = "rented"

    @classmethod
    def get(cls, available: bool) -> "BikeStatus":
        return cls.AVAILABLE if available else cls.RENTED


@dataclass
class Bike:
    name: str
    type: str
    body_size: int
    max_load: int
    rate: float
    """The price of the bike for an hour of use."""
    description: str
    rating: float
    image_urls: List[str] = field(default_factory=list)
    available: bool = True
    location: Optional[Location] = None
    id: Optional[str] = None

    @property
    def status(self) -> BikeStatus:
        return BikeStatus.get(self.available)

    def __str__(self):
        return f"[{self.type}] {self.name} ({self.id})"
