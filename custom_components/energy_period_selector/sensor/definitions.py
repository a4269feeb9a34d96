"""Sensor entity definitions for Energy Period Selector."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from custom_components.energy_period_selector.entity_utils import format_range_label
from homeassistant.components.sensor import SensorDeviceClass, SensorEntityDescription

if TYPE_CHECKING:
    from datetime import date

    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator


@dataclass(frozen=True, kw_only=True)
class EnergyPeriodSensorEntityDescription(SensorEntityDescription):
    """Describes a period sensor."""

    value_fn: Callable[[EnergyPeriodCoordinator], str | date]
    # Only the range sensor carries the full period attributes
    with_period_attributes: bool = False


def _range_label(coordinator: EnergyPeriodCoordinator) -> str:
    return format_range_label(
        coordinator.data.range,
        coordinator.time_service.today(),
        coordinator.localization.localize,
    )


SENSOR_ENTITY_DESCRIPTIONS = (
    EnergyPeriodSensorEntityDescription(
        key="selected_range",
        translation_key="selected_range",
        icon="mdi:calendar-range",
        value_fn=_range_label,
        with_period_attributes=True,
    ),
    EnergyPeriodSensorEntityDescription(
        key="period_start",
        translation_key="period_start",
        icon="mdi:calendar-start",
        device_class=SensorDeviceClass.DATE,
        value_fn=lambda coordinator: coordinator.data.start,
    ),
    EnergyPeriodSensorEntityDescription(
        key="period_end",
        translation_key="period_end",
        icon="mdi:calendar-end",
        device_class=SensorDeviceClass.DATE,
        value_fn=lambda coordinator: coordinator.data.end,
    ),
)
