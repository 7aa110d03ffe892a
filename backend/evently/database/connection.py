"""
MongoDB connection lifecycle.

This module provides:
- ConnectionCache: hands out one shared database handle per process and
  never runs more than one connection attempt at a time
- The default Motor connector (ping + index creation)
- The process-owned cache built from settings
- Health check utilities
"""

import asyncio
import logging
from enum import Enum
from functools import lru_cache
from typing import Any, Awaitable, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from evently.config import Settings, get_settings
from evently.database.indexes import ensure_indexes
from evently.database.registry import registry
from evently.exceptions import ConfigurationError, DatabaseConnectionError

logger = logging.getLogger(__name__)

Connector = Callable[[str, str], Awaitable[Any]]


class ConnectionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    CONNECTED = "connected"


async def connect_motor(
    uri: str,
    database_name: str,
    server_selection_timeout_ms: int = 5000,
) -> AsyncIOMotorDatabase:
    """
    Open a Motor client, confirm the server answers, and create indexes.

    The client is closed again if any step fails.
    """
    # Importing the models registers their entity definitions
    import evently.models  # noqa: F401

    client: Optional[AsyncIOMotorClient] = None
    try:
        # Malformed URIs are rejected here, as ValueError or InvalidURI
        client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=server_selection_timeout_ms)
        database = client[database_name]
        await client.admin.command("ping")
        await ensure_indexes(database, registry)
    except (PyMongoError, ValueError) as e:
        if client is not None:
            client.close()
        raise DatabaseConnectionError(f"Could not connect to MongoDB: {e}") from e

    return database


class ConnectionCache:
    """
    Owns the single database handle shared by all callers in the process.

    States move UNINITIALIZED -> CONNECTING -> CONNECTED. While CONNECTING,
    every caller awaits the same pending attempt. A failed attempt is raised
    to all of its waiters and the cache returns to UNINITIALIZED so a later
    call can try again.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        connector: Optional[Connector] = None,
    ):
        if not uri or not uri.strip():
            raise ConfigurationError(
                "MONGODB_URI is not set. Define it in the environment or .env file."
            )

        self.uri = uri
        self.database_name = database_name
        self._connector: Connector = connector or connect_motor
        self._connection: Any = None
        self._pending: Optional[asyncio.Task] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionCache":
        """Build a cache from settings, failing fast when the URI is missing."""
        timeout_ms = settings.mongodb_server_selection_timeout_ms

        async def connector(uri: str, database_name: str) -> AsyncIOMotorDatabase:
            return await connect_motor(uri, database_name, timeout_ms)

        return cls(settings.mongodb_uri, settings.mongodb_database, connector)

    @property
    def state(self) -> ConnectionState:
        if self._connection is not None:
            return ConnectionState.CONNECTED
        if self._pending is not None:
            return ConnectionState.CONNECTING
        return ConnectionState.UNINITIALIZED

    async def acquire(self) -> Any:
        """Return the shared database handle, connecting on first use."""
        if self._connection is not None:
            return self._connection

        if self._pending is None:
            logger.info(f"Connecting to MongoDB database '{self.database_name}'")
            self._pending = asyncio.ensure_future(self._establish())

        # Shielded so a cancelled waiter does not abort the shared attempt
        return await asyncio.shield(self._pending)

    async def _establish(self) -> Any:
        try:
            connection = await self._connector(self.uri, self.database_name)
        except BaseException as e:
            self._pending = None
            logger.warning(f"MongoDB connection attempt failed: {e}")
            raise

        self._connection = connection
        self._pending = None
        logger.info(f"Connected to MongoDB: {sanitize_mongodb_url(self.uri)}")
        return connection

    async def ping(self) -> bool:
        """Check if the cached connection is healthy."""
        if self._connection is None:
            return False

        try:
            await self._connection.client.admin.command("ping")
            return True
        except PyMongoError:
            return False

    def describe(self) -> dict:
        """Connection information safe to log."""
        return {
            "status": self.state.value,
            "url": sanitize_mongodb_url(self.uri),
            "database": self.database_name,
        }


def sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url or "://" not in url:
        return url

    protocol, rest = url.split("://", 1)
    if "@" not in rest:
        return url

    credentials, host = rest.rsplit("@", 1)
    if ":" not in credentials:
        return url

    username = credentials.split(":", 1)[0]
    return f"{protocol}://{username}:***@{host}"


@lru_cache()
def get_connection_cache() -> ConnectionCache:
    """
    Get the process-wide ConnectionCache.

    Call once during startup so a missing MONGODB_URI fails immediately.
    """
    return ConnectionCache.from_settings(get_settings())


async def acquire_connection() -> AsyncIOMotorDatabase:
    """Acquire the shared database handle from the process-wide cache."""
    return await get_connection_cache().acquire()
