"""Error taxonomy for the data-access layer.

Every error is raised to the immediate caller; nothing here retries.
"""

from typing import Any


class EventlyError(Exception):
    """Base exception for all data-access errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(EventlyError):
    """Required configuration is missing. Not recoverable at runtime."""

    pass


class DatabaseConnectionError(EventlyError):
    """The underlying connection attempt failed."""

    pass


class ValidationError(EventlyError):
    """A document field is missing, malformed or could not be normalized."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class DuplicateSlugError(ValidationError):
    """Another event already uses the derived slug."""

    def __init__(self, slug: str):
        super().__init__("slug", f"An event with slug '{slug}' already exists.")
        self.slug = slug


class ReferentialIntegrityError(EventlyError):
    """A booking references an event that does not exist."""

    def __init__(self, event_id: Any):
        super().__init__("The referenced event does not exist.")
        self.event_id = event_id


class EventNotFoundError(EventlyError):
    """An update targeted an event that does not exist."""

    def __init__(self, event_id: Any):
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id
