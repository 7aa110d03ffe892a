"""
Booking validation and referential integrity.

Steps, stopping at the first failure:

1. email is present and looks like an address; it is stored lower-cased
2. eventId is present and is a valid ObjectId
3. an event with that id exists

Errors raised by the existence lookup itself (for example a lost
connection) are propagated unchanged, distinct from a missing event.
"""

import logging
from typing import Any, Awaitable, Callable, Mapping

from bson import ObjectId
from bson.errors import InvalidId

from evently.exceptions import ReferentialIntegrityError, ValidationError
from evently.models.booking import Booking
from evently.validation.normalize import is_valid_email

logger = logging.getLogger(__name__)

EventExists = Callable[[ObjectId], Awaitable[bool]]


def _coerce_event_id(value: Any) -> ObjectId:
    if value is None or value == "":
        raise ValidationError("eventId", "eventId is required.")
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str):
        try:
            return ObjectId(value)
        except InvalidId:
            pass
    raise ValidationError("eventId", f"eventId is not a valid event id: {value!r}")


async def prepare_booking(candidate: Mapping[str, Any], event_exists: EventExists) -> Booking:
    """
    Validate a booking and confirm the referenced event exists.

    Args:
        candidate: Booking attributes as supplied by the caller
        event_exists: Async lookup answering whether an event id exists

    Returns:
        A normalized Booking ready to be written

    Raises:
        ValidationError: email or eventId missing or malformed
        ReferentialIntegrityError: no event has the given id
    """
    email = candidate.get("email")
    if not isinstance(email, str) or not is_valid_email(email.strip().lower()):
        raise ValidationError("email", "A valid email address is required.")
    email = email.strip().lower()

    event_id = _coerce_event_id(candidate.get("eventId", candidate.get("event_id")))

    if not await event_exists(event_id):
        logger.debug(f"Rejected booking for missing event {event_id}")
        raise ReferentialIntegrityError(event_id)

    return Booking(event_id=event_id, email=email)
