"""
Database module initialization.
Exports database components for use throughout the application.
"""

from evently.database.connection import (
    ConnectionCache,
    ConnectionState,
    acquire_connection,
    connect_motor,
    get_connection_cache,
    sanitize_mongodb_url,
)
from evently.database.indexes import ensure_indexes
from evently.database.registry import EntityDefinition, EntityRegistry, registry

__all__ = [
    # Connection management
    "ConnectionCache",
    "ConnectionState",
    "acquire_connection",
    "connect_motor",
    "get_connection_cache",
    # Registry
    "EntityDefinition",
    "EntityRegistry",
    "registry",
    # Utilities
    "ensure_indexes",
    "sanitize_mongodb_url",
]
