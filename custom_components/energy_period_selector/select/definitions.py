"""Select entity definitions for Energy Period Selector."""

from __future__ import annotations

from homeassistant.components.select import SelectEntityDescription

PERIOD_SELECT_DESCRIPTION = SelectEntityDescription(
    key="period",
    translation_key="period",
    icon="mdi:calendar-clock",
)
