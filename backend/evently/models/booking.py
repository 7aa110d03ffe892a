"""
Booking Document

Stored in the 'bookings' collection. References an Event by identity;
the event's lifetime is independent of its bookings.

Fields:
- _id: ObjectId
- eventId: ObjectId of the booked event
- email: lower-cased address
- createdAt, updatedAt: timestamps

Indexes:
- eventId
"""

from bson import ObjectId
from pymongo import ASCENDING, IndexModel

from evently.database.registry import EntityDefinition, registry
from evently.models.base import BaseDocument

BOOKINGS_COLLECTION = "bookings"


class Booking(BaseDocument):
    """A persisted booking for an event."""

    event_id: ObjectId
    email: str


def _define_booking() -> EntityDefinition:
    return EntityDefinition(
        name="Booking",
        collection=BOOKINGS_COLLECTION,
        model=Booking,
        indexes=[IndexModel([("eventId", ASCENDING)], name="eventId")],
    )


booking_definition = registry.get_or_register("Booking", _define_booking)
