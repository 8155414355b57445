"""Adapters - I/O implementations of ports."""

from .argentina_datos import ArgentinaDatosAdapter
from .openholidays import OpenHolidaysAdapter
from .file_cache import FileHolidayStore

__all__ = [
    "ArgentinaDatosAdapter",
    "OpenHolidaysAdapter",
    "FileHolidayStore",
]
