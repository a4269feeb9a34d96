"""
Calendar boundary computation for period kinds.

Pure functions only: the reference date is always passed in by the caller,
this module never looks at the clock.
"""

from __future__ import annotations

from datetime import date, timedelta

from .types import DateRange, PeriodKind

DAYS_PER_WEEK = 7


def monday_offset(reference_date: date) -> int:
    """
    Get the day offset from reference_date back to the Monday of its week.

    Uses a Sunday=0 weekday numbering: Sunday maps to -6, Monday..Saturday
    map to 1 - day_of_week (0..-5).
    """
    day_of_week = reference_date.isoweekday() % DAYS_PER_WEEK
    return -6 if day_of_week == 0 else 1 - day_of_week


def first_of_next_month(reference_date: date) -> date:
    """Get the first day of the month following reference_date."""
    if reference_date.month == 12:  # noqa: PLR2004
        return date(reference_date.year + 1, 1, 1)
    return date(reference_date.year, reference_date.month + 1, 1)


def last_day_of_month(reference_date: date) -> date:
    """Get the last calendar day of reference_date's month."""
    return first_of_next_month(reference_date) - timedelta(days=1)


def compute_period(kind: PeriodKind, reference_date: date) -> DateRange:
    """
    Compute the date range of a period kind around a reference date.

    Args:
        kind: Period kind to compute (custom ranges are never computed)
        reference_date: Any date inside the wanted period

    Returns:
        Inclusive DateRange covering the period

    Raises:
        ValueError: If kind is PeriodKind.CUSTOM

    """
    match kind:
        case PeriodKind.DAY:
            return DateRange(reference_date, reference_date)
        case PeriodKind.WEEK:
            start = reference_date + timedelta(days=monday_offset(reference_date))
            return DateRange(start, start + timedelta(days=DAYS_PER_WEEK - 1))
        case PeriodKind.MONTH:
            start = reference_date.replace(day=1)
            return DateRange(start, last_day_of_month(start))
        case PeriodKind.YEAR:
            return DateRange(date(reference_date.year, 1, 1), date(reference_date.year, 12, 31))

    msg = f"Period kind {kind!r} has no computed range"
    raise ValueError(msg)
