"""
Shared pytest fixtures for the evently test suite.

Provides an in-memory stand-in for a Motor database and factories for
event and booking attributes.
"""

from copy import deepcopy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from evently.database.connection import ConnectionCache


class FakeCollection:
    """Just enough of AsyncIOMotorCollection for the repositories."""

    def __init__(self, unique_fields: tuple[str, ...] = ()):
        self.documents: dict[ObjectId, dict] = {}
        self.unique_fields = unique_fields
        self.created_indexes: list = []

    def _check_unique(self, document: dict, ignore_id=None) -> None:
        for field in self.unique_fields:
            for existing_id, existing in self.documents.items():
                if existing_id != ignore_id and existing.get(field) == document.get(field):
                    raise DuplicateKeyError(f"E11000 duplicate key error: {field}")

    async def insert_one(self, document: dict):
        document = deepcopy(document)
        document.setdefault("_id", ObjectId())
        self._check_unique(document)
        self.documents[document["_id"]] = document
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, query: dict):
        found = self.documents.get(query["_id"])
        return deepcopy(found) if found is not None else None

    async def count_documents(self, query: dict, limit: int = 0) -> int:
        return 1 if query["_id"] in self.documents else 0

    async def replace_one(self, query: dict, document: dict):
        document = deepcopy(document)
        self._check_unique(document, ignore_id=query["_id"])
        self.documents[query["_id"]] = document
        return SimpleNamespace(matched_count=1)

    async def create_indexes(self, indexes: list) -> list[str]:
        self.created_indexes.extend(indexes)
        return [index.document["name"] for index in indexes]


class FakeDatabase:
    def __init__(self):
        self.collections = {
            "events": FakeCollection(unique_fields=("slug",)),
            "bookings": FakeCollection(),
        }

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def connections(fake_db) -> ConnectionCache:
    """ConnectionCache whose connector hands back the in-memory database."""

    async def connector(uri: str, database_name: str) -> FakeDatabase:
        return fake_db

    return ConnectionCache("mongodb://localhost:27017", "evently_test", connector)


@pytest.fixture
def event_attrs():
    """
    Return a function that builds valid event attributes.

    All defaults can be overridden via keyword arguments.
    """

    def _event_attrs(**overrides) -> dict:
        attrs = {
            "title": "PyCon Meetup",
            "description": "An evening of talks.",
            "overview": "Lightning talks and networking.",
            "image": "/images/pycon.png",
            "venue": "Main Hall",
            "location": "Berlin, Germany",
            "date": "2024-03-05",
            "time": "18:30",
            "mode": "offline",
            "audience": "Developers",
            "agenda": ["Doors open", "Talks", "Networking"],
            "organizer": "Python Berlin",
            "tags": ["python", "community"],
        }
        attrs.update(overrides)
        return attrs

    return _event_attrs
