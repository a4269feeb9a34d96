"""EnergyPeriodSelectorEntity class."""

from __future__ import annotations

from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DEFAULT_NAME, DOMAIN
from .coordinator import EnergyPeriodCoordinator


class EnergyPeriodSelectorEntity(CoordinatorEntity[EnergyPeriodCoordinator]):
    """
    Base entity for all platforms.

    Entities are a stateless rendering of coordinator.data (the committed
    PeriodState): they read it, they never change it except through the
    coordinator's transition methods.
    """

    _attr_has_entity_name = True

    def __init__(self, coordinator: EnergyPeriodCoordinator, key: str) -> None:
        """Initialize."""
        super().__init__(coordinator)

        entry = coordinator.config_entry
        self._attr_unique_id = f"{entry.entry_id}_{key}"
        self._attr_device_info = DeviceInfo(
            entry_type=DeviceEntryType.SERVICE,
            identifiers={(DOMAIN, entry.entry_id)},
            name=coordinator.selector_config.title or entry.title or DEFAULT_NAME,
            manufacturer=DEFAULT_NAME,
            model="Period selector",
        )

    def localize(self, key: str, fallback: str | None = None) -> str:
        """Localize a runtime label through the entry's localization service."""
        return self.coordinator.localization.localize(key, fallback)
