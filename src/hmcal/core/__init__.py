"""Functional core - pure business logic with no I/O."""

from .holidays import (
    CacheKey,
    HolidayRecord,
    HolidaySet,
    Origin,
    Provider,
    ProviderKind,
    normalize,
)
from .merge import remove_custom, replace_official, upsert_custom, validate_day_month
from .calendar import CalendarCell, MonthGrid, View, ViewMode, build_month, months_in_view, render_view

__all__ = [
    # Holidays
    "CacheKey",
    "HolidayRecord",
    "HolidaySet",
    "Origin",
    "Provider",
    "ProviderKind",
    "normalize",
    # Merge
    "remove_custom",
    "replace_official",
    "upsert_custom",
    "validate_day_month",
    # Calendar
    "CalendarCell",
    "MonthGrid",
    "View",
    "ViewMode",
    "build_month",
    "months_in_view",
    "render_view",
]
