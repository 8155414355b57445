"""Ports - interfaces/protocols for external dependencies."""

from .holiday_provider import HolidayProvider
from .holiday_store import HolidayStore

__all__ = [
    "HolidayProvider",
    "HolidayStore",
]
