from inspect import getmembers, isfunction
from typing import Callable, List


class EventListMeta(type):

    def __contains__(self, event: Callable):
        """Checks if the event (by name) exists on the events list."""
        event_name = event.__name__
        try:
            return event is getattr(self, event_name)
        except AttributeError:
            return False

    def events(self) -> List[Callable]:
        """All the events declared on the list."""
        return [event for name, event in getmembers(self, isfunction)]


class EventList(metaclass=EventListMeta):
    """
    Contains a list of emittable events.
    Events are defined as static functions on a subclass
    of the EventList type, and their signatures
    used to determine the "contract" of the event.
    """
