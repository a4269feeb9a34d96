"""Compare switch entity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from custom_components.energy_period_selector.entity import EnergyPeriodSelectorEntity
from homeassistant.components.switch import SwitchEntity
from homeassistant.helpers.restore_state import RestoreEntity

if TYPE_CHECKING:
    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator
    from homeassistant.components.switch import SwitchEntityDescription

_LOGGER = logging.getLogger(__name__)


class EnergyPeriodCompareSwitch(EnergyPeriodSelectorEntity, RestoreEntity, SwitchEntity):
    """
    Switch toggling compare mode.

    The state is restored after a Home Assistant restart. Name and icon follow
    the compare_button section of the configuration.
    """

    def __init__(
        self,
        coordinator: EnergyPeriodCoordinator,
        entity_description: SwitchEntityDescription,
    ) -> None:
        """Initialize the compare switch."""
        super().__init__(coordinator, entity_description.key)
        self.entity_description = entity_description

        display = coordinator.selector_config.compare_button
        if display.text:
            self._attr_name = display.text
        self._attr_icon = display.icon if display.uses_icon else entity_description.icon

    async def async_added_to_hass(self) -> None:
        """Restore compare mode from the last known state."""
        await super().async_added_to_hass()

        last_state = await self.async_get_last_state()
        if last_state is not None and last_state.state == "on":
            _LOGGER.debug("Restored compare mode: on")
            self.coordinator.set_compare(enabled=True)

    @property
    def is_on(self) -> bool:
        """Return whether compare mode is active."""
        return self.coordinator.compare_enabled

    async def async_turn_on(self, **_kwargs: Any) -> None:
        """Turn compare mode on."""
        self.coordinator.set_compare(enabled=True)

    async def async_turn_off(self, **_kwargs: Any) -> None:
        """Turn compare mode off."""
        self.coordinator.set_compare(enabled=False)
