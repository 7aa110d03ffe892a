"""Repositories: validate-then-persist entry points for each entity."""

from evently.repositories.base import BaseRepository
from evently.repositories.bookings import BookingRepository
from evently.repositories.events import EventRepository

__all__ = ["BaseRepository", "EventRepository", "BookingRepository"]
