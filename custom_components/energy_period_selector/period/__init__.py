"""
Period engine package.

Pure calendar logic: no I/O, and the clock is only read through the injected callable:
- types.py: PeriodKind, DateRange, PeriodState
- calculator.py: Period boundaries per kind (compute_period)
- navigation.py: Forward/backward shifting preserving the period's duration
- state_machine.py: PeriodStateMachine owning the committed state
"""

from .calculator import compute_period
from .navigation import shift_range
from .state_machine import PeriodStateMachine
from .types import DateRange, PeriodKind, PeriodState

__all__ = [
    "DateRange",
    "PeriodKind",
    "PeriodState",
    "PeriodStateMachine",
    "compute_period",
    "shift_range",
]
