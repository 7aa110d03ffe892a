"""
Event Document

Stored in the 'events' collection.

Fields:
- _id: ObjectId
- title, description, overview, image, venue, location, mode, audience,
  organizer: trimmed, non-empty strings
- slug: URL-safe identifier derived from title (unique)
- date: ISO calendar date (YYYY-MM-DD)
- time: 24h time (HH:mm)
- agenda, tags: non-empty lists of strings
- createdAt, updatedAt: timestamps

Indexes:
- slug (unique)
"""

from pymongo import ASCENDING, IndexModel

from evently.database.registry import EntityDefinition, registry
from evently.models.base import BaseDocument

EVENTS_COLLECTION = "events"


class Event(BaseDocument):
    """A persisted event."""

    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]


def _define_event() -> EntityDefinition:
    return EntityDefinition(
        name="Event",
        collection=EVENTS_COLLECTION,
        model=Event,
        indexes=[IndexModel([("slug", ASCENDING)], unique=True, name="slug_unique")],
    )


event_definition = registry.get_or_register("Event", _define_event)
