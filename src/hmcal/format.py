"""Terminal formatting for holiday listings and calendar grids."""

import json
from datetime import date

import click

from .core.calendar import WEEKDAY_NAMES, MonthGrid
from .core.holidays import HolidayRecord

MONTH_WIDTH = 20
MONTHS_PER_ROW = 3
COLUMN_GAP = "   "


def _record_date(year: int, record: HolidayRecord) -> str:
    return f"{year}-{record.month:02d}-{record.day:02d}"


def format_listing(records: list[HolidayRecord], year: int, fmt: str = "table") -> str:
    """Render holidays as a plain table, JSON, or a markdown table."""
    if fmt == "json":
        return json.dumps(
            [
                {
                    "date": _record_date(year, r),
                    "name": r.name,
                    "origin": r.origin.value,
                }
                for r in records
            ],
            indent=2,
            ensure_ascii=False,
        )

    if not records:
        return "No holidays found."

    if fmt == "markdown":
        lines = ["| Date | Holiday | Origin |", "|------|---------|--------|"]
        for r in records:
            name = r.name.replace("|", "\\|")
            lines.append(f"| {_record_date(year, r)} | {name} | {r.origin.value} |")
        return "\n".join(lines)

    return "\n".join(f"{_record_date(year, r)}  {r.name} [{r.origin.value}]" for r in records)


def format_month(grid: MonthGrid, today: date | None = None) -> list[str]:
    """
    Render one month as lines of text.

    Holidays are bold red, weekends red, and today is shown in reverse video.
    """
    lines = [grid.title.center(MONTH_WIDTH).rstrip(), " ".join(WEEKDAY_NAMES)]

    for week in grid.weeks:
        parts = []
        for cell in week:
            if cell is None:
                parts.append("  ")
                continue
            text = f"{cell.date.day:2d}"
            if cell.is_holiday:
                text = click.style(text, fg="red", bold=True)
            elif cell.is_weekend:
                text = click.style(text, fg="red")
            if cell.date == today:
                text = click.style(text, reverse=True)
            parts.append(text)
        lines.append(" ".join(parts).rstrip())

    return lines


def _visible_width(line: str) -> int:
    return len(click.unstyle(line))


def concat_months(blocks: list[list[str]]) -> list[str]:
    """Place month blocks side by side."""
    height = max(len(b) for b in blocks)
    rows = []
    for i in range(height):
        parts = []
        for block in blocks:
            line = block[i] if i < len(block) else ""
            parts.append(line + " " * (MONTH_WIDTH - _visible_width(line)))
        rows.append(COLUMN_GAP.join(parts).rstrip())
    return rows


def format_legend(grids: list[MonthGrid]) -> list[str]:
    """One line per holiday in the shown months."""
    lines = []
    for grid in grids:
        for cell in grid.holidays():
            names = ", ".join(cell.holiday_names)
            lines.append(f"{cell.date.strftime('%d %b')}  {names}")
    return lines


def format_calendar(grids: list[MonthGrid], today: date | None = None) -> str:
    """Render months three per row, followed by the holidays they contain."""
    sections = []
    for i in range(0, len(grids), MONTHS_PER_ROW):
        row = grids[i : i + MONTHS_PER_ROW]
        sections.append("\n".join(concat_months([format_month(g, today) for g in row])))

    output = "\n\n".join(sections)
    legend = format_legend(grids)
    if legend:
        output += "\n\n" + "\n".join(legend)
    return output
