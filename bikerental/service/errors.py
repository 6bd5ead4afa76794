"""
Errors
------

The errors the rental service raises. None of them are recovered
from inside the service: they are all passed on to the caller, and
the operation that raised them leaves the service unchanged.
"""


class RentalServiceError(Exception):
    """The base class for the errors of the rental service."""

    message = "Rental service error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class UserNotFoundError(RentalServiceError):
    message = "User not found"


class BikeNotFoundError(RentalServiceError):
    message = "Bike not found"


class UnavailableBikeError(RentalServiceError):
    message = "Unavailable bike"


class YouCantReturnThisBikeError(RentalServiceError):
    message = "Rent not found. You cant return this bike"


class UserExistsError(RentalServiceError):
    message = "User with that email already exists"


class BikeExistsError(RentalServiceError):
    message = "Bike is already registered"


class ActiveRentalError(RentalServiceError):
    """Raised when an user tries to do an operation that requires no active rental."""

    message = "User has an active rent"

    def __init__(self, rent_ids, message=None):
        super().__init__(message)
        self.rent_ids = rent_ids
