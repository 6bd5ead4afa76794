"""
The service layer for the system. Acts as the internal API.
Any interface (a UI, a CLI, a test harness) should use the
service layer to implement their logic.

It is designed to represent the business logic of the rentals.
"""

from .errors import (
    RentalServiceError, UserNotFoundError, BikeNotFoundError, UnavailableBikeError,
    YouCantReturnThisBikeError, UserExistsError, BikeExistsError, ActiveRentalError
)
from .rental_service import RentalService, RentalEvent
