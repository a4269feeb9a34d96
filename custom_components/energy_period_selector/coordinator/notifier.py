"""Change notification for committed period transitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from homeassistant.core import CALLBACK_TYPE, callback

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date

    from custom_components.energy_period_selector.period import PeriodKind, PeriodState

    ChangeListener = Callable[["PeriodChangeEvent"], None]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PeriodChangeEvent:
    """Normalized change event consumed by dashboards and other widgets."""

    start: date
    end: date
    period: PeriodKind

    @classmethod
    def from_state(cls, state: PeriodState) -> PeriodChangeEvent:
        """Build the event for a committed state."""
        return cls(start=state.start, end=state.end, period=state.kind)

    def as_dict(self) -> dict[str, Any]:
        """Serialize with calendar dates as YYYY-MM-DD strings."""
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "period": str(self.period),
        }


class EnergyPeriodChangeNotifier:
    """
    Emit one PeriodChangeEvent per committed transition.

    Delivery does not depend on the sync outcome: the coordinator notifies
    before any sync is dispatched. A listener raising an exception is logged
    and the remaining listeners still receive the event.
    """

    def __init__(self, log_prefix: str = "") -> None:
        """Initialize the notifier."""
        self._log_prefix = log_prefix
        self._listeners: list[ChangeListener] = []
        self._last_event: PeriodChangeEvent | None = None

    @property
    def last_event(self) -> PeriodChangeEvent | None:
        """Return the most recently emitted event."""
        return self._last_event

    @callback
    def async_add_listener(self, listener: ChangeListener) -> CALLBACK_TYPE:
        """
        Listen for period change events.

        Returns:
            Callback that can be used to remove the listener

        """
        self._listeners.append(listener)

        def remove_listener() -> None:
            """Remove change listener."""
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove_listener

    @callback
    def async_notify(self, state: PeriodState) -> PeriodChangeEvent:
        """Emit the change event for a committed state to all listeners."""
        event = PeriodChangeEvent.from_state(state)
        self._last_event = event
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:  # pylint: disable=broad-except
                _LOGGER.exception("%s Period change listener %s failed", self._log_prefix, listener)
        return event
