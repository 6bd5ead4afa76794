"""
Rental Service
--------------

This module is what handles all the users, bikes and rents in the system.

Responsibilities
================

- registering, finding and removing users
- authenticating users
- registering, finding and moving bikes
- renting and returning bikes
- pricing rents

A bike has at most one active rent, and is unavailable exactly
while that rent is active. Every operation either completes or
raises before changing anything. Events are published once
the change is made, and an error raised by a subscriber is
passed on to the caller without undoing it.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from bikerental import logger
from bikerental.events import EventHub, EventList
from bikerental.models import Bike, Location, Rent, User
from bikerental.models.util import generate_id
from bikerental.pricing import get_price
from bikerental.service.errors import (
    ActiveRentalError, BikeExistsError, BikeNotFoundError, UnavailableBikeError,
    UserExistsError, UserNotFoundError, YouCantReturnThisBikeError
)


def utc_now() -> datetime:
    """The current time, as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class RentalEvent(EventList):

    @staticmethod
    def rent_started(rent: Rent):
        """A bike was rented."""

    @staticmethod
    def rent_ended(rent: Rent, price: float):
        """A bike was returned."""

    @staticmethod
    def bike_moved(bike: Bike, location: Location):
        """A bike was moved to a new location."""


class RentalService:
    """
    Handles the lifecycle of the rents in the system.

    Also publishes events on its hub, so that other modules can stay up to date with the system.
    """

    def __init__(self, *, clock: Callable[[], datetime] = utc_now):
        """
        :param clock: Returns the current time. Rents are started and
            priced using it, so tests can control the passing of time.
        """
        self.users: Dict[str, User] = {}
        """Maps user ids to their user. Users are found by their current email."""

        self.bikes: Dict[str, Bike] = {}
        """Maps bike ids to their bike."""

        self.rents: List[Rent] = []
        """The active rents, in the order they were started."""

        self.completed_rents: List[Rent] = []
        """The rents that were closed by a return."""

        self.clock = clock
        self.hub = EventHub(RentalEvent)

    def find_user(self, email: str) -> User:
        """
        Gets the user with the given email.

        :raises UserNotFoundError: If there is no such user.
        """
        user = self._lookup_user(email)
        if user is None:
            raise UserNotFoundError
        return user

    def _lookup_user(self, email: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.email == email), None)

    def get_users(self, *, name: str = None) -> List[User]:
        """
        Gets all the users in the system.

        :param name: An optional name to filter by.
        """
        users = list(self.users.values())

        if name is not None:
            users = [user for user in users if name.lower() in user.name.lower()]

        return users

    def register_user(self, user: User) -> User:
        """
        Registers a user, giving it an id.

        :raises UserExistsError: When a user with the same email exists.
        """
        if self._lookup_user(user.email) is not None:
            raise UserExistsError

        user.id = generate_id()
        self.users[user.id] = user
        logger.info("Registered user %s", user)
        return user

    def remove_user(self, email: str):
        """
        Removes the user with the given email.

        :raises UserNotFoundError: If there is no such user.
        :raises ActiveRentalError: If the user is still renting a bike.
        """
        user = self.find_user(email)

        active = self.rents_for(email)
        if active:
            raise ActiveRentalError([rent.id for rent in active])

        del self.users[user.id]
        logger.info("Removed user %s", user)

    async def authenticate(self, email: str, password: str) -> bool:
        """Checks the password of the user with the given email. A missing user fails to authenticate."""
        user = self._lookup_user(email)
        if user is None or user.password != password:
            logger.debug("Failed authentication for %s", email)
            return False

        return True

    def register_bike(self, bike: Bike) -> Bike:
        """
        Registers a bike, giving it an id and making it available.

        :raises BikeExistsError: If the bike is already registered.
        """
        if bike.id is not None and self.bikes.get(bike.id) is bike:
            raise BikeExistsError

        bike.id = generate_id()
        bike.available = True
        self.bikes[bike.id] = bike
        logger.info("Registered bike %s", bike)
        return bike

    def find_bike(self, bike_id: str) -> Bike:
        """
        Gets the bike with the given id.

        :raises BikeNotFoundError: If there is no such bike.
        """
        try:
            return self.bikes[bike_id]
        except KeyError:
            raise BikeNotFoundError

    def get_bikes(self, *, available: bool = None) -> List[Bike]:
        """
        Gets all the bikes in the system.

        :param available: Only get the bikes that are (or are not) available.
        """
        bikes = list(self.bikes.values())

        if available is not None:
            bikes = [bike for bike in bikes if bike.available == available]

        return bikes

    def rent_bike(self, bike_id: str, user_email: str) -> Rent:
        """
        Starts a new rent of a bike for a user.

        :raises BikeNotFoundError: If there is no such bike.
        :raises UserNotFoundError: If there is no such user.
        :raises UnavailableBikeError: If the bike is already rented.
        """
        bike = self.find_bike(bike_id)
        user = self.find_user(user_email)

        if not bike.available:
            raise UnavailableBikeError

        rent = Rent(bike=bike, user=user, start=self.clock())
        self.rents.append(rent)
        bike.available = False

        logger.info("User %s rented bike %s", user.email, bike.id)
        self.hub.emit(RentalEvent.rent_started, rent)
        return rent

    def return_bike(self, bike_id: str, user_email: str) -> float:
        """
        Ends the rent of a bike, making it available again.

        :return: The amount due for the rent.
        :raises YouCantReturnThisBikeError: When the user is not renting the bike.
        """
        rent = next((rent for rent in self.rents if rent.matches(bike_id, user_email)), None)
        if rent is None:
            raise YouCantReturnThisBikeError

        end = self._end_time(rent)
        price = get_price(rent.start, end, rent.bike.rate)

        self.rents.remove(rent)
        rent.end = end
        rent.price = price
        self.completed_rents.append(rent)
        rent.bike.available = True

        logger.info("User %s returned bike %s for %.2f", user_email, bike_id, price)
        self.hub.emit(RentalEvent.rent_ended, rent, price)
        return price

    def move_bike_to(self, bike_id: str, location: Location):
        """
        Moves a bike, whether it is rented or not.

        :raises BikeNotFoundError: If there is no such bike.
        """
        bike = self.find_bike(bike_id)
        bike.location = location

        logger.info("Moved bike %s to %s", bike.id, location)
        self.hub.emit(RentalEvent.bike_moved, bike, location)

    def active_rent(self, bike_id: str) -> Optional[Rent]:
        """Gets the active rent of the given bike, if it is rented."""
        return next((rent for rent in self.rents if rent.bike.id == bike_id), None)

    def rents_for(self, user_email: str) -> List[Rent]:
        """Gets the active rents of the given user."""
        return [rent for rent in self.rents if rent.user.email == user_email]

    def is_in_use(self, bike_id: str) -> bool:
        """Checks if the given bike is rented."""
        return self.active_rent(bike_id) is not None

    def is_renting(self, user_email: str, bike_id: str) -> bool:
        """Checks if the given user is renting the given bike."""
        return any(rent.matches(bike_id, user_email) for rent in self.rents)

    def get_price_estimate(self, rent: Rent) -> float:
        """Gets the price of the rent so far."""
        return get_price(rent.start, rent.end if rent.end is not None else self._end_time(rent), rent.bike.rate)

    def _end_time(self, rent: Rent) -> datetime:
        # a clock that stepped back before the start bills nothing
        return max(self.clock(), rent.start)
