"""
Period state machine.

Owns the current PeriodState and exposes the transitions a user can trigger.
Every successful transition:
1. Reads the clock at most once (one reference date per transition)
2. Builds a new immutable PeriodState
3. Commits it and invokes the commit listener

Failed transitions raise before anything is committed, so the previous state
stays intact. The machine never suspends: all transitions are synchronous.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .calculator import compute_period
from .navigation import shift_range
from .types import DateRange, PeriodKind, PeriodState

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date

    CommitListener = Callable[[PeriodState], None]

_LOGGER = logging.getLogger(__name__)


class PeriodStateMachine:
    """State machine over PeriodKind carrying the current DateRange as output."""

    def __init__(
        self,
        clock: Callable[[], date],
        on_commit: CommitListener | None = None,
    ) -> None:
        """
        Initialize with a Day period anchored at the clock's current date.

        Args:
            clock: Returns the current local date; called once per transition
            on_commit: Invoked with every newly committed state (not for the
                initial state)

        """
        self._clock = clock
        self._on_commit = on_commit
        self._state = PeriodState(PeriodKind.DAY, compute_period(PeriodKind.DAY, clock()))

    @property
    def state(self) -> PeriodState:
        """Return the committed state."""
        return self._state

    def set_commit_listener(self, on_commit: CommitListener | None) -> None:
        """Replace the commit listener."""
        self._on_commit = on_commit

    def _commit(self, state: PeriodState) -> PeriodState:
        self._state = state
        _LOGGER.debug("Committed %s period %s..%s", state.kind, state.start, state.end)
        if self._on_commit is not None:
            self._on_commit(state)
        return state

    def select_period(self, kind: PeriodKind | str) -> PeriodState:
        """
        Switch to another period kind.

        Non-custom kinds are re-anchored to today, so any navigation offset is
        discarded. Custom keeps the current range until apply_custom_range().
        """
        kind = PeriodKind(kind)
        if kind is PeriodKind.CUSTOM:
            return self._commit(PeriodState(kind, self._state.range))
        return self._commit(PeriodState(kind, compute_period(kind, self._clock())))

    def navigate(self, direction: int) -> PeriodState:
        """
        Move the current period one unit forward (+1) or backward (-1).

        No-op while a custom range is active: the current state is returned
        and nothing is committed.
        """
        if self._state.kind is PeriodKind.CUSTOM:
            _LOGGER.debug("Ignoring navigation while a custom range is active")
            return self._state
        new_range = shift_range(self._state.kind, self._state.range, direction)
        return self._commit(PeriodState(self._state.kind, new_range))

    def go_to_today(self) -> PeriodState:
        """Force a Day period on today, whatever the previous kind."""
        return self._commit(PeriodState(PeriodKind.DAY, compute_period(PeriodKind.DAY, self._clock())))

    def apply_custom_range(self, start: date, end: date) -> PeriodState:
        """
        Commit a user supplied range as a custom period.

        Raises:
            InvalidRangeError: If start is after end (state left unchanged)

        """
        return self._commit(PeriodState(PeriodKind.CUSTOM, DateRange(start, end)))
