"""
Sensor platform for Energy Period Selector integration.

Provides read-only views of the committed period:
- selected_range: localized range label with the change event as attributes
- period_start / period_end: the range bounds as date sensors
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core import EnergyPeriodSensor
from .definitions import SENSOR_ENTITY_DESCRIPTIONS

if TYPE_CHECKING:
    from custom_components.energy_period_selector.data import EnergyPeriodSelectorConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddEntitiesCallback


async def async_setup_entry(
    _hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the period sensors based on a config entry."""
    coordinator = entry.runtime_data.coordinator

    async_add_entities(
        EnergyPeriodSensor(
            coordinator=coordinator,
            entity_description=entity_description,
        )
        for entity_description in SENSOR_ENTITY_DESCRIPTIONS
    )
