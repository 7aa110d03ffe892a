"""
BookingRepository

MongoDB operations for the 'bookings' collection.

The event existence check and the insert are separate operations; an event
deleted between the two still leaves the booking written.
"""

import logging
from typing import Any, Mapping

from evently.database.connection import ConnectionCache
from evently.models.base import utcnow
from evently.models.booking import Booking, booking_definition
from evently.repositories.base import BaseRepository
from evently.repositories.events import EventRepository
from evently.validation.booking_pipeline import prepare_booking

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository):
    definition = booking_definition

    def __init__(self, connections: ConnectionCache, events: EventRepository | None = None):
        super().__init__(connections)
        self.events = events or EventRepository(connections)

    async def create(self, attrs: Mapping[str, Any]) -> Booking:
        """
        Persist a booking for an existing event.

        Raises:
            ValidationError: email or eventId missing or malformed
            ReferentialIntegrityError: the referenced event does not exist
        """
        booking = await prepare_booking(attrs, self.events.exists_by_id)
        now = utcnow()
        booking.created_at = now
        booking.updated_at = now

        collection = await self.collection()
        result = await collection.insert_one(booking.to_document())
        booking.id = result.inserted_id
        logger.debug(f"Inserted booking {booking.id} for event {booking.event_id}")
        return booking
