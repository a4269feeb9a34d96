"""
Button platform for Energy Period Selector integration.

Provides the navigation buttons of the selector:
- previous / next: move the current period by one unit (hidden when
  prev_next_buttons is disabled)
- today: jump to today as a day period (hidden when today_button.show is off)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core import EnergyPeriodButton
from .definitions import NAVIGATION_BUTTON_DESCRIPTIONS, TODAY_BUTTON_DESCRIPTION

if TYPE_CHECKING:
    from custom_components.energy_period_selector.data import EnergyPeriodSelectorConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback


async def async_setup_entry(
    _hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the selector buttons based on a config entry."""
    coordinator = entry.runtime_data.coordinator
    config = entry.runtime_data.config

    descriptions = []
    if config.prev_next_buttons:
        descriptions.extend(NAVIGATION_BUTTON_DESCRIPTIONS)
    if config.today_button.show:
        descriptions.append(TODAY_BUTTON_DESCRIPTION)

    async_add_entities(
        EnergyPeriodButton(
            coordinator=coordinator,
            entity_description=entity_description,
        )
        for entity_description in descriptions
    )
