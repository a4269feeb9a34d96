"""
Period coordination package.

This package connects the pure period engine to Home Assistant:
- core.py: EnergyPeriodCoordinator (owns the state machine, no polling)
- notifier.py: Change events emitted after every committed transition
- sync.py: Ticket-ordered, best-effort sync to helpers and the energy collection
- collection.py: Home Assistant adapters for the sync collaborators
- time_service.py: Local "today" for period boundaries
"""

from .core import EnergyPeriodCoordinator
from .notifier import EnergyPeriodChangeNotifier, PeriodChangeEvent
from .sync import EnergyPeriodSyncCoordinator, SyncConfig, SyncOutcome, SyncResult
from .time_service import EnergyPeriodTimeService

__all__ = [
    "EnergyPeriodChangeNotifier",
    "EnergyPeriodCoordinator",
    "EnergyPeriodSyncCoordinator",
    "EnergyPeriodTimeService",
    "PeriodChangeEvent",
    "SyncConfig",
    "SyncOutcome",
    "SyncResult",
]
