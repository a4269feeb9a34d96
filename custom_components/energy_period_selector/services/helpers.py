"""
Shared utilities for service handlers.

Functions:
    get_entry_and_coordinator: Validate config entry and return its coordinator

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import voluptuous as vol

from custom_components.energy_period_selector.const import DOMAIN
from homeassistant.config_entries import ConfigEntryState
from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers import config_validation as cv

if TYPE_CHECKING:
    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator
    from custom_components.energy_period_selector.data import EnergyPeriodSelectorConfigEntry
    from homeassistant.core import HomeAssistant

ATTR_ENTRY_ID: Final = "entry_id"

# Every service addresses one selector by its config entry
ENTRY_SCHEMA: Final = vol.Schema({vol.Required(ATTR_ENTRY_ID): cv.string})


def get_entry_and_coordinator(
    hass: HomeAssistant,
    entry_id: str,
) -> tuple[EnergyPeriodSelectorConfigEntry, EnergyPeriodCoordinator]:
    """
    Validate entry and return it with its coordinator.

    Args:
        hass: Home Assistant instance
        entry_id: Config entry ID to validate

    Returns:
        Tuple of (entry, coordinator)

    Raises:
        ServiceValidationError: If entry_id is missing, unknown or not loaded

    """
    if not entry_id:
        raise ServiceValidationError(translation_domain=DOMAIN, translation_key="missing_entry_id")
    entry = hass.config_entries.async_get_entry(entry_id)
    if entry is None or entry.domain != DOMAIN or entry.state is not ConfigEntryState.LOADED:
        raise ServiceValidationError(
            translation_domain=DOMAIN,
            translation_key="invalid_entry_id",
            translation_placeholders={"entry_id": entry_id},
        )
    return entry, entry.runtime_data.coordinator
