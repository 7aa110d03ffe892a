"""
MongoDB Index Definitions

Creates the indexes declared by every registered entity on startup.

Indexes by Collection:
- events: slug (unique)
- bookings: eventId

Called from database/connection.py once the server has answered a ping.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from evently.database.registry import EntityRegistry

logger = logging.getLogger(__name__)


async def ensure_indexes(database: AsyncIOMotorDatabase, registry: EntityRegistry) -> None:
    """Create each registered entity's indexes on its collection."""
    for definition in registry.definitions():
        if not definition.indexes:
            continue
        names = await database[definition.collection].create_indexes(definition.indexes)
        logger.debug(f"Ensured indexes on {definition.collection}: {names}")
