"""Evently: data-access layer for events and bookings."""

__version__ = "0.1.0"
__author__ = "Evently Team"

__all__ = ["__version__", "__author__"]
