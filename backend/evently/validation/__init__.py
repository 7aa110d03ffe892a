"""Pre-write validation and normalization pipelines."""

from evently.validation.booking_pipeline import prepare_booking
from evently.validation.event_pipeline import REQUIRED_STRING_FIELDS, prepare_event
from evently.validation.normalize import (
    is_valid_email,
    normalize_date,
    normalize_time,
    slugify,
)

__all__ = [
    "prepare_event",
    "prepare_booking",
    "REQUIRED_STRING_FIELDS",
    "slugify",
    "normalize_date",
    "normalize_time",
    "is_valid_email",
]
