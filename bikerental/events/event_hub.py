from inspect import signature
from typing import Callable, Dict, List, Set, Type, Union

from bikerental.events.event_list import EventList
from bikerental.events.exceptions import NoSuchEventError, NoSuchListenerError, InvalidHandlerError


class BoundEvent:
    """
    An event accessed through a hub, which allows
    subscribing, un-subscribing and emitting with operators.
    """

    def __init__(self, hub: "EventHub", event: Callable):
        self.hub = hub
        self.event = event

    def __iadd__(self, handler: Callable):
        self.hub.subscribe(self.event, handler)
        return self

    def __isub__(self, handler: Callable):
        self.hub.unsubscribe(self.event, handler)
        return self

    def __call__(self, *args, **kwargs):
        self.hub.emit(self.event, *args, **kwargs)


class EventHub:
    """
    Keeps track of the handlers subscribed to a set of events
    and calls them, in the order they subscribed, when the event is emitted.
    """

    def __init__(self, *event_lists: Type[EventList]):
        self._event_lists: Set[Type[EventList]] = set()
        self._listeners: Dict[Callable, List[Callable]] = {}
        """Maps an event to its subscribed handlers."""

        self.add_events(*event_lists)

    def add_events(self, *event_lists: Type[EventList]):
        """Adds the events of the given lists to the hub."""
        for event_list in event_lists:
            self._event_lists.add(event_list)
            for event in event_list.events():
                self._listeners.setdefault(event, [])

    def subscribe(self, event: Union[Callable, BoundEvent], handler: Callable):
        """
        Subscribes a handler to an event.

        :raises NoSuchEventError: If the event is not on the hub.
        :raises InvalidHandlerError: If the handler can't accept the event's arguments.
        """
        event = self._resolve(event)
        if event not in self._listeners:
            raise NoSuchEventError(f"Event {event.__name__} is not on this hub.")

        placeholders = [None for _ in signature(event).parameters]
        try:
            signature(handler).bind(*placeholders)
        except TypeError:
            raise InvalidHandlerError(f"Handler {handler.__name__} does not match the signature of {event.__name__}.")

        self._listeners[event].append(handler)

    def unsubscribe(self, event: Union[Callable, BoundEvent], handler: Callable):
        """
        Un-subscribes a handler from an event.

        :raises NoSuchListenerError: If the handler is not subscribed to the event.
        """
        event = self._resolve(event)
        if handler not in self._listeners.get(event, ()):
            raise NoSuchListenerError(f"Handler {handler.__name__} is not subscribed to {event.__name__}.")

        self._listeners[event].remove(handler)

    def emit(self, event: Union[Callable, BoundEvent], *args, **kwargs):
        """
        Calls all the handlers for the event. Errors raised
        by handlers are passed on to the emitter.

        :raises NoSuchEventError: If the event is not on the hub.
        """
        event = self._resolve(event)
        if event not in self._listeners:
            raise NoSuchEventError(f"Event {event.__name__} is not on this hub.")

        for handler in list(self._listeners[event]):
            handler(*args, **kwargs)

    @staticmethod
    def _resolve(event: Union[Callable, BoundEvent]) -> Callable:
        return event.event if isinstance(event, BoundEvent) else event

    def __contains__(self, item):
        """Checks if an event list, or a single event, is on the hub."""
        if isinstance(item, type) and issubclass(item, EventList):
            return item in self._event_lists
        return item in self._listeners

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        for event in self._listeners:
            if event.__name__ == name:
                return BoundEvent(self, event)

        raise NoSuchEventError(f"Event {name} is not on this hub.")

    def __setattr__(self, name, value):
        # `hub.event += handler` re-assigns the bound event to the hub
        if isinstance(value, BoundEvent) and value.hub is self:
            return
        super().__setattr__(name, value)
