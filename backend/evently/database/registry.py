"""
Entity Registry

Keeps one definition per entity name for the life of the process, so that
importing or reloading a model module repeatedly hands back the definition
that was registered first instead of raising a duplicate-definition error.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator

from pydantic import BaseModel
from pymongo import IndexModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityDefinition:
    """Model class, collection and indexes for one stored entity."""

    name: str
    collection: str
    model: type[BaseModel]
    indexes: list[IndexModel] = field(default_factory=list)


class EntityRegistry:
    """Name-keyed store of entity definitions with get-or-create semantics."""

    def __init__(self) -> None:
        self._definitions: dict[str, EntityDefinition] = {}

    def get_or_register(
        self, name: str, factory: Callable[[], EntityDefinition]
    ) -> EntityDefinition:
        """
        Return the definition registered under name, creating it on first use.

        Once a name is registered the factory is ignored on later calls.
        """
        existing = self._definitions.get(name)
        if existing is not None:
            return existing

        definition = factory()
        self._definitions[name] = definition
        logger.debug(f"Registered entity {name} -> {definition.collection}")
        return definition

    def get(self, name: str) -> EntityDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise KeyError(f"Entity not registered: {name}") from None

    def definitions(self) -> list[EntityDefinition]:
        return list(self._definitions.values())

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[EntityDefinition]:
        return iter(self.definitions())

    def __len__(self) -> int:
        return len(self._definitions)


# Process-wide registry used by the model modules
registry = EntityRegistry()
