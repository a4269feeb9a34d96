"""
Time service - single source of "today" for the period engine.

The state machine is handed EnergyPeriodTimeService.today as its clock, so a
transition reads the local date exactly once and every boundary of that
transition is computed from the same reference date.

Time-travel for tests: pass a fixed reference_time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.util import dt as dt_util

if TYPE_CHECKING:
    from datetime import date, datetime


class EnergyPeriodTimeService:
    """Timezone-aware access to the current local date."""

    def __init__(self, reference_time: datetime | None = None) -> None:
        """
        Initialize the time service.

        Args:
            reference_time: Optional fixed time. If None, the actual current
                time in Home Assistant's configured timezone is used on every call.

        """
        self._reference_time = reference_time

    def now(self) -> datetime:
        """Get current time in the user's local timezone."""
        if self._reference_time is not None:
            return dt_util.as_local(self._reference_time)
        return dt_util.now()

    def today(self) -> date:
        """Get the current local calendar date."""
        return self.now().date()

    def set_reference_time(self, reference_time: datetime | None) -> None:
        """Pin (or with None, release) the reference time."""
        self._reference_time = reference_time
