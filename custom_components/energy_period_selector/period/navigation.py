"""Directional shifting of a period range by one unit of its kind."""

from __future__ import annotations

import calendar
from datetime import date

from .calculator import DAYS_PER_WEEK, last_day_of_month
from .types import DateRange, PeriodKind

VALID_DIRECTIONS = (-1, 1)


def add_months(day: date, months: int) -> date:
    """
    Move a date by a number of calendar months.

    The day of month is clamped to the length of the target month, and a date
    sitting on the last day of its month stays on the last day of the target
    month (Mar 31 + 1 -> Apr 30, Apr 30 + 1 -> May 31).
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    days_in_target = calendar.monthrange(year, month)[1]
    if day == last_day_of_month(day):
        return date(year, month, days_in_target)
    return date(year, month, min(day.day, days_in_target))


def shift_range(kind: PeriodKind, date_range: DateRange, direction: int) -> DateRange:
    """
    Shift a range one period forward (+1) or backward (-1).

    Day and week ranges move by a fixed number of days. Month and year ranges
    move by calendar months so a full month stays a full month even when the
    month lengths differ.

    Raises:
        ValueError: If direction is not +1/-1 or kind is PeriodKind.CUSTOM

    """
    if direction not in VALID_DIRECTIONS:
        msg = f"Navigation direction must be -1 or 1, got {direction!r}"
        raise ValueError(msg)

    match kind:
        case PeriodKind.DAY:
            return date_range.shifted(direction)
        case PeriodKind.WEEK:
            return date_range.shifted(direction * DAYS_PER_WEEK)
        case PeriodKind.MONTH:
            return DateRange(add_months(date_range.start, direction), add_months(date_range.end, direction))
        case PeriodKind.YEAR:
            months = direction * 12
            return DateRange(add_months(date_range.start, months), add_months(date_range.end, months))

    msg = f"Period kind {kind!r} cannot be navigated"
    raise ValueError(msg)
