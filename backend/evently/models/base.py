"""
Base document model shared by stored entities.

Provides:
- `_id` identity mapped to the `id` attribute
- created_at/updated_at timestamps stored as createdAt/updatedAt
- Conversion to and from raw MongoDB documents
"""

from datetime import datetime, timezone
from typing import Any, Mapping

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseDocument(BaseModel):
    """Base class for documents stored in MongoDB."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: ObjectId | None = Field(default=None, alias="_id")
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def to_document(self) -> dict[str, Any]:
        """Serialize using stored key names, leaving out an unassigned _id."""
        exclude = {"id"} if self.id is None else None
        return self.model_dump(by_alias=True, exclude=exclude)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        """Build a model from a raw MongoDB document."""
        return cls.model_validate(dict(document))
