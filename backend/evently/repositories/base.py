"""
BaseRepository

Base class for MongoDB repositories. Every operation acquires the shared
database handle from the injected ConnectionCache, so a repository can be
built before the first connection exists.
"""

from typing import Any

from evently.database.connection import ConnectionCache
from evently.database.registry import EntityDefinition


class BaseRepository:
    """Base class for repositories bound to one registered entity."""

    definition: EntityDefinition

    def __init__(self, connections: ConnectionCache):
        self.connections = connections

    async def collection(self) -> Any:
        database = await self.connections.acquire()
        return database[self.definition.collection]
