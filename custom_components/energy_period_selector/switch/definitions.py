"""Switch entity definitions for Energy Period Selector."""

from __future__ import annotations

from homeassistant.components.switch import SwitchEntityDescription

COMPARE_SWITCH_DESCRIPTION = SwitchEntityDescription(
    key="compare",
    translation_key="compare",
    icon="mdi:compare",
)
