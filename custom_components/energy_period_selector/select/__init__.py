"""
Select platform for Energy Period Selector integration.

Provides the period select entity whose options are the enabled period kinds
(the card's period buttons). Selecting an option commits a new period.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core import EnergyPeriodSelect
from .definitions import PERIOD_SELECT_DESCRIPTION

if TYPE_CHECKING:
    from custom_components.energy_period_selector.data import EnergyPeriodSelectorConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback


async def async_setup_entry(
    _hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the period select entity based on a config entry."""
    async_add_entities(
        [
            EnergyPeriodSelect(
                coordinator=entry.runtime_data.coordinator,
                entity_description=PERIOD_SELECT_DESCRIPTION,
            )
        ]
    )
