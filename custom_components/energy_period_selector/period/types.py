"""Type definitions for the period engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

from custom_components.energy_period_selector.exceptions import InvalidRangeError


class PeriodKind(StrEnum):
    """Category of a reporting period."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class DateRange:
    """
    Inclusive calendar date range.

    Both bounds are plain dates (no time of day) so serializing the range can
    never drift across a timezone boundary. Construction enforces start <= end.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        """Reject ranges whose start lies after the end."""
        if self.start > self.end:
            raise InvalidRangeError(InvalidRangeError.START_AFTER_END.format(start=self.start, end=self.end))

    @property
    def days(self) -> int:
        """Number of calendar days covered, both bounds included."""
        return (self.end - self.start).days + 1

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    def shifted(self, days: int) -> DateRange:
        """Return the range moved by a fixed number of days."""
        delta = timedelta(days=days)
        return DateRange(self.start + delta, self.end + delta)


@dataclass(frozen=True, slots=True)
class PeriodState:
    """Committed period selection: the kind plus the range it currently covers."""

    kind: PeriodKind
    range: DateRange

    @property
    def start(self) -> date:
        return self.range.start

    @property
    def end(self) -> date:
        return self.range.end
