"""Stored entity models.

Importing this package registers the Event and Booking definitions.
"""

from evently.models.base import BaseDocument
from evently.models.booking import BOOKINGS_COLLECTION, Booking, booking_definition
from evently.models.event import EVENTS_COLLECTION, Event, event_definition

__all__ = [
    "BaseDocument",
    "Event",
    "Booking",
    "event_definition",
    "booking_definition",
    "EVENTS_COLLECTION",
    "BOOKINGS_COLLECTION",
]
