"""Button entity definitions for Energy Period Selector."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homeassistant.components.button import ButtonEntityDescription

if TYPE_CHECKING:
    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator


@dataclass(frozen=True, kw_only=True)
class EnergyPeriodButtonEntityDescription(ButtonEntityDescription):
    """Describes a selector button."""

    # Transition triggered on press
    press_fn: Callable[[EnergyPeriodCoordinator], object]
    # Buttons configured by a today/compare style section take name and icon from it
    configurable: bool = False


NAVIGATION_BUTTON_DESCRIPTIONS = (
    EnergyPeriodButtonEntityDescription(
        key="previous",
        translation_key="previous",
        icon="mdi:chevron-left",
        press_fn=lambda coordinator: coordinator.navigate(-1),
    ),
    EnergyPeriodButtonEntityDescription(
        key="next",
        translation_key="next",
        icon="mdi:chevron-right",
        press_fn=lambda coordinator: coordinator.navigate(1),
    ),
)

TODAY_BUTTON_DESCRIPTION = EnergyPeriodButtonEntityDescription(
    key="today",
    translation_key="today",
    icon="mdi:calendar-today",
    press_fn=lambda coordinator: coordinator.go_to_today(),
    configurable=True,
)
