"""
Custom integration that selects the date range shown by the Home Assistant energy dashboard.

The selected period (day, week, month, year or a custom range) is mirrored to
two date helper entities and to the energy collection, and announced on the
event bus whenever it changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from homeassistant.config_entries import ConfigEntryState
from homeassistant.const import Platform
from homeassistant.exceptions import ConfigEntryError
from homeassistant.loader import async_get_loaded_integration

from .const import DATA_ENERGY_COLLECTION, DOMAIN, LOGGER
from .coordinator import EnergyPeriodCoordinator
from .data import EnergyPeriodSelectorData
from .exceptions import ConfigurationError
from .localization import EnergyPeriodLocalization
from .selector_config import SelectorConfig
from .services import SERVICE_NAMES, async_setup_services

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .data import EnergyPeriodSelectorConfigEntry

PLATFORMS: list[Platform] = [
    Platform.SELECT,
    Platform.BUTTON,
    Platform.SENSOR,
    Platform.SWITCH,
]


# https://developers.home-assistant.io/docs/config_entries_index/#setting-up-an-entry
async def async_setup_entry(
    hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
) -> bool:
    """Set up this integration using UI."""
    LOGGER.debug("[%s] async_setup_entry called for entry_id=%s", entry.title, entry.entry_id)

    try:
        selector_config = SelectorConfig.from_mapping({**entry.data, **entry.options})
    except ConfigurationError as err:
        msg = f"[{entry.title}] {err}"
        raise ConfigEntryError(msg) from err

    localization = EnergyPeriodLocalization(hass.config.language)
    await localization.async_load()

    # Register services when a config entry is loaded
    async_setup_services(hass)

    coordinator = EnergyPeriodCoordinator(
        hass=hass,
        config_entry=entry,
        selector_config=selector_config,
        localization=localization,
    )

    entry.runtime_data = EnergyPeriodSelectorData(
        coordinator=coordinator,
        config=selector_config,
        localization=localization,
        integration=async_get_loaded_integration(hass, entry.domain),
    )

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    entry.async_on_unload(entry.add_update_listener(async_reload_entry))

    # Initial state: Day at today, announced and pushed to the helpers
    coordinator.async_start()

    return True


async def async_unload_entry(
    hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok and entry.runtime_data is not None:
        await entry.runtime_data.coordinator.async_shutdown()

    # Unregister services and drop the shared collection handle if this was the last loaded entry
    remaining = [
        other
        for other in hass.config_entries.async_entries(DOMAIN)
        if other.entry_id != entry.entry_id and other.state is ConfigEntryState.LOADED
    ]
    if unload_ok and not remaining:
        for service in SERVICE_NAMES:
            if hass.services.has_service(DOMAIN, service):
                hass.services.async_remove(DOMAIN, service)
        hass.data.get(DOMAIN, {}).pop(DATA_ENERGY_COLLECTION, None)

    return unload_ok


async def async_reload_entry(
    hass: HomeAssistant,
    entry: EnergyPeriodSelectorConfigEntry,
) -> None:
    """Reload config entry."""
    await hass.config_entries.async_reload(entry.entry_id)
