"""Attribute builders shared by the period entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .formatting import format_range_label, period_label

if TYPE_CHECKING:
    from custom_components.energy_period_selector.coordinator import EnergyPeriodCoordinator


def build_period_attributes(coordinator: EnergyPeriodCoordinator) -> dict[str, Any]:
    """
    Build the attributes describing the committed period.

    The first three keys are exactly the change event payload (start, end,
    period), so templates can use the sensor and the event interchangeably.
    """
    state = coordinator.data
    localize = coordinator.localization.localize
    last_result = coordinator.sync.last_result
    return {
        "start": state.start.isoformat(),
        "end": state.end.isoformat(),
        "period": str(state.kind),
        "period_label": period_label(state.kind, localize, coordinator.selector_config.custom_period_label),
        "range_label": format_range_label(state.range, coordinator.time_service.today(), localize),
        "days": state.range.days,
        "compare": coordinator.compare_enabled,
        "ticket": coordinator.sync.latest_ticket,
        "last_sync": str(last_result.outcome) if last_result else None,
    }


def build_debug_attributes(coordinator: EnergyPeriodCoordinator) -> dict[str, Any]:
    """Build sync bookkeeping attributes (only exposed with debug enabled)."""
    config = coordinator.selector_config.sync
    last_result = coordinator.sync.last_result
    return {
        "start_date_helper": config.start_helper_id,
        "end_date_helper": config.end_helper_id,
        "auto_sync_helpers": config.auto_sync_enabled,
        "last_sync_result": last_result.as_dict() if last_result else None,
        "language": coordinator.localization.language,
    }
