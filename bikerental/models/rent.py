"""
Rent
---------------------------

Links a user to the bike they are riding. A rent is active
until it is closed by a return, at which point it is
stamped with its end time and price.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from bikerental.models.bike import Bike
from bikerental.models.user import User
from bikerental.models.util import generate_id


@dataclass
class Rent:
    bike: Bike
    user: User
    start: datetime
    end: Optional[datetime] = None
    price: Optional[float] = None
    """The amount due for the rent, set when the bike is returned."""
    id: str = field(default_factory=generate_id)

    @property
    def is_active(self) -> bool:
        return self.end is None

    @property
    def duration(self) -> Optional[timedelta]:
        return self.end - self.start if self.end is not None else None

    def matches(self, bike_id: str, user_email: str) -> bool:
        """Checks if this rent is for the given bike and user."""
        return self.bike.id == bike_id and self.user.email == user_email
