"""Decode failures raised for a single payload."""

from typing import Any


class EventDecodeError(Exception):
    """A payload could not be turned into an event.

    Carries the offending payload and, when resolution got that far, the
    two-level type name (e.g. ``notice.notify``) for diagnostics.
    """

    def __init__(self, reason: str, payload: Any = None, type_name: str | None = None):
        self.reason = reason
        self.payload = payload
        self.type_name = type_name
        super().__init__(reason)


class UnresolvableEventType(EventDecodeError):
    """No known event class matches the payload's type fields."""


class MalformedEventPayload(EventDecodeError):
    """The payload does not fit the shape of its resolved event class."""
