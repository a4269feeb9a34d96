"""Coordinator wiring the period engine to Home Assistant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from custom_components.energy_period_selector.const import DOMAIN, EVENT_PERIOD_CHANGED
from custom_components.energy_period_selector.period import PeriodKind, PeriodState, PeriodStateMachine
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .collection import EnergyPeriodCollectionProvider, EnergyPeriodHelperWriter
from .notifier import EnergyPeriodChangeNotifier, PeriodChangeEvent
from .sync import EnergyPeriodSyncCoordinator
from .time_service import EnergyPeriodTimeService

if TYPE_CHECKING:
    from datetime import date

    from custom_components.energy_period_selector.localization import EnergyPeriodLocalization
    from custom_components.energy_period_selector.selector_config import SelectorConfig
    from homeassistant.config_entries import ConfigEntry

    from .sync import CollectionProvider, DateEntityWriter

_LOGGER = logging.getLogger(__name__)


# =============================================================================
# UPDATE FLOW - the coordinator never polls (update_interval=None):
# =============================================================================
#
#   entity/service action
#     -> PeriodStateMachine transition (synchronous, atomic)
#     -> _handle_commit(state)
#          1. ChangeNotifier emits PeriodChangeEvent (bus event + listeners)
#          2. Sync ticket issued, sync task scheduled (best-effort, not awaited)
#          3. async_set_updated_data(state) re-renders all entities
#
# Rejected transitions (InvalidRangeError, navigation while custom) never
# reach _handle_commit, so nothing is notified, synced or re-rendered.
# =============================================================================


class EnergyPeriodCoordinator(DataUpdateCoordinator[PeriodState]):
    """Owns the period state machine of one config entry."""

    config_entry: ConfigEntry

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        selector_config: SelectorConfig,
        localization: EnergyPeriodLocalization,
        *,
        time_service: EnergyPeriodTimeService | None = None,
        writer: DateEntityWriter | None = None,
        collection_provider: CollectionProvider | None = None,
    ) -> None:
        """Initialize the coordinator and its engine components."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=DOMAIN,
            update_interval=None,
        )
        self.selector_config = selector_config
        self.localization = localization
        self.time_service = time_service or EnergyPeriodTimeService()
        self._log_prefix = f"[{config_entry.title}]"

        self.notifier = EnergyPeriodChangeNotifier(log_prefix=self._log_prefix)
        self.sync = EnergyPeriodSyncCoordinator(
            selector_config.sync,
            writer or EnergyPeriodHelperWriter(hass),
            collection_provider or EnergyPeriodCollectionProvider(hass),
            log_prefix=self._log_prefix,
            verbose=selector_config.debug,
        )
        self.machine = PeriodStateMachine(self.time_service.today, on_commit=self._handle_commit)
        self.compare_enabled = False
        self.data = self.machine.state

        self._remove_bus_listener = self.notifier.async_add_listener(self._fire_period_changed)

    def _log(self, level: str, message: str, *args: object, **kwargs: object) -> None:
        """Log with entry-specific prefix."""
        prefixed_message = f"{self._log_prefix} {message}"
        getattr(_LOGGER, level)(prefixed_message, *args, **kwargs)

    async def _async_update_data(self) -> PeriodState:
        """Return the committed state (nothing to fetch)."""
        return self.machine.state

    @property
    def state(self) -> PeriodState:
        """Return the committed period state."""
        return self.machine.state

    @callback
    def async_start(self) -> None:
        """Publish the initial state: notify listeners and push it to the helpers."""
        self._handle_commit(self.machine.state)

    @callback
    def _handle_commit(self, state: PeriodState) -> None:
        """Notify, dispatch sync and re-render after every committed transition."""
        self.notifier.async_notify(state)

        ticket = self.sync.issue_ticket()
        self.hass.async_create_task(
            self.sync.async_sync(state, ticket),
            name=f"{DOMAIN} sync #{ticket}",
        )

        self.async_set_updated_data(state)

    @callback
    def _fire_period_changed(self, event: PeriodChangeEvent) -> None:
        """Announce a change on the Home Assistant event bus."""
        self.hass.bus.async_fire(EVENT_PERIOD_CHANGED, event.as_dict())

    # -------------------------------------------------------------------------
    # Transitions (all synchronous; commits trigger _handle_commit)
    # -------------------------------------------------------------------------

    @callback
    def select_period(self, kind: PeriodKind | str) -> PeriodState:
        """Switch period kind (re-anchors to today for non-custom kinds)."""
        self._log("debug", "Selecting period %s", kind)
        return self.machine.select_period(kind)

    @callback
    def navigate(self, direction: int) -> PeriodState:
        """Move the current period forward (+1) or backward (-1)."""
        self._log("debug", "Navigating %+d", direction)
        return self.machine.navigate(direction)

    @callback
    def go_to_today(self) -> PeriodState:
        """Jump to today as a day period."""
        return self.machine.go_to_today()

    @callback
    def apply_custom_range(self, start: date, end: date) -> PeriodState:
        """
        Apply a custom range.

        Raises:
            InvalidRangeError: If start is after end (state unchanged)

        """
        self._log("debug", "Applying custom range %s..%s", start, end)
        return self.machine.apply_custom_range(start, end)

    @callback
    def set_compare(self, *, enabled: bool) -> None:
        """Toggle compare mode (display only, the range is not affected)."""
        self.compare_enabled = enabled
        self._log("debug", "Compare mode %s", "enabled" if enabled else "disabled")
        self.async_update_listeners()

    # -------------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------------

    def get_period_snapshot(self) -> dict[str, Any]:
        """Return the change event of the committed state plus sync metadata."""
        last_result = self.sync.last_result
        return {
            **PeriodChangeEvent.from_state(self.machine.state).as_dict(),
            "ticket": self.sync.latest_ticket,
            "compare": self.compare_enabled,
            "last_sync": last_result.as_dict() if last_result else None,
        }

    async def async_shutdown(self) -> None:
        """
        Shut down the coordinator.

        In-flight sync tasks are left to finish; their results are discarded
        by the ticket check if anything newer was dispatched.
        """
        self._remove_bus_listener()
        self.sync.reset_collection()
        await super().async_shutdown()
