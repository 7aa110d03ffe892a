"""
EventRepository

MongoDB operations for the 'events' collection.

Methods:
- create(attrs): Validate, normalize and insert a new event
- exists_by_id(event_id): Whether an event with this id exists
- update(event_id, changes): Re-validate against the stored version and replace
"""

import logging
from typing import Any, Mapping, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from evently.exceptions import DuplicateSlugError, EventNotFoundError
from evently.models.base import utcnow
from evently.models.event import Event, event_definition
from evently.repositories.base import BaseRepository
from evently.validation.event_pipeline import prepare_event

logger = logging.getLogger(__name__)


def _as_object_id(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class EventRepository(BaseRepository):
    definition = event_definition

    async def create(self, attrs: Mapping[str, Any]) -> Event:
        """
        Persist a new event.

        Raises:
            ValidationError: a field failed validation; nothing is written
            DuplicateSlugError: another event already has the derived slug
        """
        event = prepare_event(attrs)
        now = utcnow()
        event.id = None
        event.created_at = now
        event.updated_at = now

        collection = await self.collection()
        try:
            result = await collection.insert_one(event.to_document())
        except DuplicateKeyError as e:
            raise DuplicateSlugError(event.slug) from e

        event.id = result.inserted_id
        logger.debug(f"Inserted event {event.id} ({event.slug})")
        return event

    async def exists_by_id(self, event_id: ObjectId | str) -> bool:
        """Accepts an ObjectId or its 24-hex string form; malformed ids match nothing."""
        object_id = _as_object_id(event_id)
        if object_id is None:
            return False

        collection = await self.collection()
        count = await collection.count_documents({"_id": object_id}, limit=1)
        return count > 0

    async def update(self, event_id: ObjectId | str, changes: Mapping[str, Any]) -> Event:
        """
        Apply changes to a stored event.

        The slug is only regenerated when the title changes.

        Raises:
            EventNotFoundError: no event has this id
            ValidationError: the merged event failed validation; nothing is written
            DuplicateSlugError: the new title collides with another event's slug
        """
        object_id = _as_object_id(event_id)
        if object_id is None:
            raise EventNotFoundError(event_id)

        collection = await self.collection()
        document = await collection.find_one({"_id": object_id})
        if document is None:
            raise EventNotFoundError(event_id)

        previous = Event.from_document(document)
        merged = {**previous.to_document(), **changes}
        event = prepare_event(merged, previous=previous)
        event.id = previous.id
        event.created_at = previous.created_at
        event.updated_at = utcnow()

        try:
            await collection.replace_one({"_id": object_id}, event.to_document())
        except DuplicateKeyError as e:
            raise DuplicateSlugError(event.slug) from e

        logger.debug(f"Updated event {event.id} ({event.slug})")
        return event
