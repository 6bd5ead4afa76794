class NoSuchEventError(AttributeError):
    """Raised when an event is not part of any of the hub's event lists."""


class NoSuchListenerError(Exception):
    """Raised when removing a handler that was never subscribed."""


class InvalidHandlerError(Exception):
    """Raised when a handler can't accept the arguments of the event it subscribes to."""
