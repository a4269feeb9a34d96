"""Selector button entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from custom_components.energy_period_selector.entity import EnergyPeriodSelectorEntity
from homeassistant.components.button import ButtonEntity

if TYPE_CHECKING:
    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator

    from .definitions import EnergyPeriodButtonEntityDescription


class EnergyPeriodButton(EnergyPeriodSelectorEntity, ButtonEntity):
    """Button triggering one period transition."""

    entity_description: EnergyPeriodButtonEntityDescription

    def __init__(
        self,
        coordinator: EnergyPeriodCoordinator,
        entity_description: EnergyPeriodButtonEntityDescription,
    ) -> None:
        """Initialize the button."""
        super().__init__(coordinator, entity_description.key)
        self.entity_description = entity_description

        if entity_description.configurable:
            display = coordinator.selector_config.today_button
            # A custom text replaces the translated name; icon-type buttons use the configured icon
            if display.text:
                self._attr_name = display.text
            self._attr_icon = display.icon if display.uses_icon else entity_description.icon

    async def async_press(self) -> None:
        """Trigger the transition."""
        self.entity_description.press_fn(self.coordinator)
