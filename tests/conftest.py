from datetime import datetime, timedelta

import pytest
from faker import Faker
from faker.providers import address, internet, misc, lorem

from bikerental.models import Bike, Location, User
from bikerental.service import RentalService

fake = Faker()
fake.add_provider(address)
fake.add_provider(internet)
fake.add_provider(misc)
fake.add_provider(lorem)


class FakeClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime = datetime(2019, 1, 1, 12)):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def tick(self, delta: timedelta):
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rental_service(clock) -> RentalService:
    return RentalService(clock=clock)


@pytest.fixture
def user_factory():
    def create_user(password=None):
        return User(name=fake.name(), email=fake.unique.email(), password=password or fake.password())

    return create_user


@pytest.fixture
def bike_factory():
    def create_bike(rate=100.0):
        return Bike(
            name=fake.word(), type="mountain bike", body_size=fake.random_int(40, 60),
            max_load=fake.random_int(80, 150), rate=rate, description=fake.sentence(),
            rating=fake.random_int(1, 5), image_urls=[fake.image_url()]
        )

    return create_bike


@pytest.fixture
def random_user(rental_service, user_factory) -> User:
    """Registers a random user with the service."""
    return rental_service.register_user(user_factory())


@pytest.fixture
def random_bike(rental_service, bike_factory) -> Bike:
    """Registers a random bike with the service."""
    return rental_service.register_bike(bike_factory())


@pytest.fixture
def random_rent(rental_service, random_bike, random_user):
    """Rents the random bike to the random user."""
    return rental_service.rent_bike(random_bike.id, random_user.email)


@pytest.fixture
def new_york() -> Location:
    return Location(40.753056, -73.983056)
