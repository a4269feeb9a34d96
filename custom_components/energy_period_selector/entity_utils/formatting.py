"""
Label formatting for the committed period.

Stateless: everything is derived from the PeriodState passed in, the current
date and a localize callable. Nothing here mutates engine state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from custom_components.energy_period_selector.period import PeriodKind

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date

    from custom_components.energy_period_selector.period import DateRange

    Localize = Callable[[str, str | None], str]

_MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(day: date, localize: Localize, *, with_year: bool) -> str:
    """Format a single date as e.g. "Mar 15" or "Mar 15, 2023"."""
    month = localize(f"month_{day.month}", _MONTH_ABBREVIATIONS[day.month - 1])
    if with_year:
        template = localize("date_format_year", "{month} {day}, {year}")
    else:
        template = localize("date_format", "{month} {day}")
    return template.format(month=month, day=day.day, year=day.year)


def format_range_label(date_range: DateRange, today: date, localize: Localize) -> str:
    """
    Format a range for display.

    Single-day ranges show one date, longer ranges "start - end". The year is
    shown when the range starts in a year other than the current one.
    """
    with_year = date_range.start.year != today.year
    start = format_date(date_range.start, localize, with_year=with_year)
    if date_range.start == date_range.end:
        return start
    end = format_date(date_range.end, localize, with_year=with_year)
    return f"{start}{localize('range_separator', ' - ')}{end}"


def period_label(kind: PeriodKind, localize: Localize, custom_label: str | None = None) -> str:
    """Get the display label of a period kind (custom label wins for custom)."""
    if kind is PeriodKind.CUSTOM and custom_label:
        return custom_label
    return localize(str(kind), str(kind).capitalize())
