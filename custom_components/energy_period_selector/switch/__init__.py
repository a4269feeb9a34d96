"""
Switch platform for Energy Period Selector integration.

Provides the compare switch, created only when the compare button is enabled.
Compare mode is a display flag: it never changes the selected range.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core import EnergyPeriodCompareSwitch
from .definitions import COMPARE_SWITCH_DESCRIPTION

if TYPE_CHECKING:
    from custom_components.energy_period_selector.data import EnergyPeriodSelectorConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback


async def async_setup_entry(
    _hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the compare switch based on a config entry."""
    if not entry.runtime_data.config.compare_button.show:
        return

    async_add_entities(
        [
            EnergyPeriodCompareSwitch(
                coordinator=entry.runtime_data.coordinator,
                entity_description=COMPARE_SWITCH_DESCRIPTION,
            )
        ]
    )
