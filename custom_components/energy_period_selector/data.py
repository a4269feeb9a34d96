"""Custom types for energy_period_selector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.loader import Integration

    from .coordinator import EnergyPeriodCoordinator
    from .localization import EnergyPeriodLocalization
    from .selector_config import SelectorConfig


@dataclass
class EnergyPeriodSelectorData:
    """Data for the energy_period_selector integration."""

    coordinator: EnergyPeriodCoordinator
    config: SelectorConfig
    localization: EnergyPeriodLocalization
    integration: Integration


if TYPE_CHECKING:
    type EnergyPeriodSelectorConfigEntry = ConfigEntry[EnergyPeriodSelectorData]
