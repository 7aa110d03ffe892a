"""
Event normalization and validation.

Runs immediately before an event is written. Steps run in order and stop at
the first failure:

1. Required string fields are present and non-empty once trimmed
2. agenda has at least one item
3. tags has at least one item
4. slug is derived from title when the title changed or slug is missing
5. date is rewritten to YYYY-MM-DD
6. time is rewritten to HH:mm

The candidate mapping is never modified; a new Event is returned.
"""

from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from evently.exceptions import ValidationError
from evently.models.event import Event
from evently.validation.normalize import normalize_date, normalize_time, slugify

REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

# System-managed values carried over unchanged, by stored or attribute name
_SYSTEM_FIELDS = {
    "id": ("_id", "id"),
    "created_at": ("createdAt", "created_at"),
    "updated_at": ("updatedAt", "updated_at"),
}
_STORED_NAMES = {name: keys[0] for name, keys in _SYSTEM_FIELDS.items()}


def _first_present(candidate: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if candidate.get(key) is not None:
            return candidate[key]
    return None


def _require_string(candidate: Mapping[str, Any], field: str) -> str:
    value = candidate.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, f"{field} is required and must be a non-empty string.")
    return value.strip()


def _require_items(candidate: Mapping[str, Any], field: str, noun: str) -> list[str]:
    value = candidate.get(field)
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)) or not value:
        raise ValidationError(field, f"{field} is required and must contain at least one {noun}.")
    if not all(isinstance(item, str) for item in value):
        raise ValidationError(field, f"Every {field} entry must be a string.")
    return list(value)


def prepare_event(candidate: Mapping[str, Any], previous: Optional[Event] = None) -> Event:
    """
    Validate and normalize an event before it is persisted.

    Args:
        candidate: Event attributes as supplied by the caller
        previous: The currently stored version, when updating an event

    Returns:
        A normalized Event ready to be written

    Raises:
        ValidationError: naming the first field that failed
    """
    fields = {field: _require_string(candidate, field) for field in REQUIRED_STRING_FIELDS}

    agenda = _require_items(candidate, "agenda", "item")
    tags = _require_items(candidate, "tags", "tag")

    slug = candidate.get("slug")
    title_changed = previous is None or previous.title != fields["title"]
    if title_changed or not isinstance(slug, str) or not slug:
        slug = slugify(fields["title"])
        if not slug:
            raise ValidationError("title", "title must contain at least one letter or digit.")

    date = normalize_date(fields["date"])
    if date is None:
        raise ValidationError("date", "Invalid date format. Expected a valid date string.")

    time = normalize_time(fields["time"])
    if time is None:
        raise ValidationError("time", "Invalid time format. Use HH:mm or a similar 24h format.")

    fields.update(date=date, time=time, slug=slug, agenda=agenda, tags=tags)
    for name, keys in _SYSTEM_FIELDS.items():
        value = _first_present(candidate, keys)
        if value is not None:
            fields[name] = value

    try:
        return Event(**fields)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "event"
        raise ValidationError(_STORED_NAMES.get(field, field), error["msg"]) from e
