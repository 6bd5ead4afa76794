from datetime import timedelta

import pytest

from bikerental.models import BikeStatus
from bikerental.service import (
    BikeNotFoundError, UserNotFoundError, UnavailableBikeError, YouCantReturnThisBikeError, RentalEvent,
    RentalService
)

HOUR = timedelta(hours=1)


def test_rent_bike(rental_service, random_bike, random_user, clock):
    """Assert that renting a bike creates a single active rent and makes the bike unavailable."""
    rent = rental_service.rent_bike(random_bike.id, random_user.email)

    assert len(rental_service.rents) == 1
    assert rental_service.rents[0] is rent
    assert rent.bike.id == random_bike.id
    assert rent.user.email == random_user.email
    assert rent.start == clock.now
    assert rent.is_active
    assert not random_bike.available
    assert random_bike.status is BikeStatus.RENTED


def test_rent_unavailable_bike(rental_service, random_rent, random_bike, random_user):
    """Assert that renting a rented bike fails and leaves the rents untouched."""
    with pytest.raises(UnavailableBikeError):
        rental_service.rent_bike(random_bike.id, random_user.email)

    assert rental_service.rents == [random_rent]


def test_rent_bike_rented_by_other(rental_service, random_rent, random_bike, user_factory):
    other = rental_service.register_user(user_factory())
    with pytest.raises(UnavailableBikeError):
        rental_service.rent_bike(random_bike.id, other.email)


def test_rent_missing_bike(rental_service, random_user):
    with pytest.raises(BikeNotFoundError):
        rental_service.rent_bike("fakeBikeID", random_user.email)

    assert not rental_service.rents


def test_rent_missing_user(rental_service, random_bike):
    """Assert that renting for an unknown user fails and leaves the bike available."""
    with pytest.raises(UserNotFoundError):
        rental_service.rent_bike(random_bike.id, "fake@mail.com")

    assert not rental_service.rents
    assert random_bike.available


def test_user_can_rent_many_bikes(rental_service, random_user, bike_factory):
    bikes = [rental_service.register_bike(bike_factory()) for _ in range(2)]
    for bike in bikes:
        rental_service.rent_bike(bike.id, random_user.email)

    assert len(rental_service.rents_for(random_user.email)) == 2


def test_return_bike(rental_service, random_rent, random_bike, random_user, clock):
    """Assert that returning a bike after two hours charges two hours at the bike's rate."""
    clock.tick(2 * HOUR)
    amount = rental_service.return_bike(random_bike.id, random_user.email)

    assert amount == 200.0
    assert not rental_service.rents
    assert random_bike.available
    assert rental_service.completed_rents == [random_rent]
    assert random_rent.end == clock.now
    assert random_rent.price == 200.0
    assert random_rent.duration == 2 * HOUR
    assert not random_rent.is_active


def test_return_bike_fractional_hours(rental_service, random_rent, random_bike, random_user, clock):
    """Assert that part of an hour is billed proportionally."""
    clock.tick(timedelta(minutes=90))
    assert rental_service.return_bike(random_bike.id, random_user.email) == 150.0


def test_return_bike_immediately(rental_service, random_rent, random_bike, random_user):
    assert rental_service.return_bike(random_bike.id, random_user.email) == 0.0


def test_return_missing_rent(rental_service):
    with pytest.raises(YouCantReturnThisBikeError):
        rental_service.return_bike("fakeBikeID", "fake@mail")


def test_return_available_bike(rental_service, random_bike, random_user):
    """Assert that a bike that isn't rented can't be returned."""
    with pytest.raises(YouCantReturnThisBikeError):
        rental_service.return_bike(random_bike.id, random_user.email)

    assert random_bike.available


def test_return_bike_rented_by_other(rental_service, random_rent, random_bike, user_factory):
    """Assert that only the user renting the bike can return it."""
    other = rental_service.register_user(user_factory())
    with pytest.raises(YouCantReturnThisBikeError):
        rental_service.return_bike(random_bike.id, other.email)

    assert rental_service.rents == [random_rent]
    assert not random_bike.available


def test_return_bike_twice(rental_service, random_rent, random_bike, random_user):
    rental_service.return_bike(random_bike.id, random_user.email)
    with pytest.raises(YouCantReturnThisBikeError):
        rental_service.return_bike(random_bike.id, random_user.email)


def test_rent_returned_bike(rental_service, random_rent, random_bike, random_user, clock):
    """Assert that a returned bike can be rented again."""
    clock.tick(HOUR)
    rental_service.return_bike(random_bike.id, random_user.email)
    rent = rental_service.rent_bike(random_bike.id, random_user.email)

    assert rental_service.rents == [rent]
    assert rent is not random_rent
    assert rent.start == clock.now


def test_active_rent(rental_service, random_rent, random_bike, bike_factory):
    other = rental_service.register_bike(bike_factory())

    assert rental_service.active_rent(random_bike.id) is random_rent
    assert rental_service.active_rent(other.id) is None
    assert rental_service.is_in_use(random_bike.id)
    assert not rental_service.is_in_use(other.id)


def test_is_renting(rental_service, random_rent, random_bike, random_user, user_factory):
    other = rental_service.register_user(user_factory())

    assert rental_service.is_renting(random_user.email, random_bike.id)
    assert not rental_service.is_renting(other.email, random_bike.id)


def test_price_estimate(rental_service, random_rent, clock):
    """Assert that the estimate of an active rent uses the time so far."""
    clock.tick(HOUR / 2)
    assert rental_service.get_price_estimate(random_rent) == 50.0


def test_rent_events(rental_service, random_bike, random_user, clock):
    """Assert that starting and ending a rent are published on the hub."""
    started, ended = [], []
    rental_service.hub.subscribe(RentalEvent.rent_started, started.append)
    rental_service.hub.rent_ended += lambda rent, price: ended.append((rent, price))

    rent = rental_service.rent_bike(random_bike.id, random_user.email)
    clock.tick(HOUR)
    rental_service.return_bike(random_bike.id, random_user.email)

    assert started == [rent]
    assert ended == [(rent, 100.0)]


def test_move_event(rental_service, random_bike, new_york):
    moves = []
    rental_service.hub.bike_moved += lambda bike, location: moves.append((bike, location))
    rental_service.move_bike_to(random_bike.id, new_york)
    assert moves == [(random_bike, new_york)]


def test_failed_rent_emits_nothing(rental_service, random_rent, random_bike, random_user):
    started = []
    rental_service.hub.rent_started += started.append
    with pytest.raises(UnavailableBikeError):
        rental_service.rent_bike(random_bike.id, random_user.email)

    assert not started


def test_return_bike_clock_stepped_back(rental_service, random_rent, random_bike, random_user, clock):
    """Assert that a clock set back before the start of a rent bills nothing and still returns the bike."""
    clock.tick(-HOUR / 2)
    amount = rental_service.return_bike(random_bike.id, random_user.email)

    assert amount == 0.0
    assert not rental_service.rents
    assert rental_service.completed_rents == [random_rent]
    assert random_rent.end == random_rent.start
    assert random_rent.duration == timedelta()
    assert random_bike.available


def test_price_estimate_clock_stepped_back(rental_service, random_rent, clock):
    clock.tick(-HOUR)
    assert rental_service.get_price_estimate(random_rent) == 0.0


def test_default_clock_is_utc():
    """Assert that the service stamps rents with aware UTC times by default."""
    now = RentalService().clock()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta()


def test_failing_subscriber_after_rent(rental_service, random_bike, random_user):
    """Assert that events are published after the rent is made, and subscriber errors reach the caller."""

    def failing_handler(rent):
        raise RuntimeError("subscriber failed")

    rental_service.hub.rent_started += failing_handler
    with pytest.raises(RuntimeError):
        rental_service.rent_bike(random_bike.id, random_user.email)

    assert len(rental_service.rents) == 1
    assert not random_bike.available


def test_failing_subscriber_after_return(rental_service, random_rent, random_bike, random_user):
    def failing_handler(rent, price):
        raise RuntimeError("subscriber failed")

    rental_service.hub.rent_ended += failing_handler
    with pytest.raises(RuntimeError):
        rental_service.return_bike(random_bike.id, random_user.email)

    assert not rental_service.rents
    assert random_bike.available
