"""
The pricing module determines the price of a rent from the time
the bike was in use and the hourly rate of the bike.

Time is billed proportionally: half an hour costs half the rate.
"""

from datetime import datetime

MILLISECONDS_PER_HOUR = 1000 * 60 * 60


def elapsed_hours(start_date: datetime, end_date: datetime) -> float:
    """
    The real-valued number of hours between two dates.

    :raises ValueError: If the end date is before the start date.
    """
    if end_date < start_date:
        raise ValueError(f"End date {end_date} is before start date {start_date}.")

    delta = end_date - start_date
    milliseconds = delta.total_seconds() * 1000
    return milliseconds / MILLISECONDS_PER_HOUR


def get_price(start_date: datetime, end_date: datetime, rate: float) -> float:
    """
    Given the start and end of a rent, returns the price for it.

    :param rate: The hourly rate of the bike.
    :return: The amount due.
    """
    return elapsed_hours(start_date, end_date) * rate
