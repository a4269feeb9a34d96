"""
Configuration flow package for UI-based setup.

Flow handlers:
- user_flow.py: Initial setup of one selector
- options_flow.py: Reconfigure an existing selector

Supporting modules:
- schemas.py: Form schema definitions (vol.Schema, sections for button display)
- validators.py: Input normalization and validation via SelectorConfig
"""

from __future__ import annotations

from custom_components.energy_period_selector.config_flow_handlers.options_flow import (
    EnergyPeriodSelectorOptionsFlowHandler,
)
from custom_components.energy_period_selector.config_flow_handlers.schemas import get_selector_schema
from custom_components.energy_period_selector.config_flow_handlers.user_flow import (
    EnergyPeriodSelectorFlowHandler,
)
from custom_components.energy_period_selector.config_flow_handlers.validators import (
    normalize_selector_input,
    validate_selector_input,
)

__all__ = [
    "EnergyPeriodSelectorFlowHandler",
    "EnergyPeriodSelectorOptionsFlowHandler",
    "get_selector_schema",
    "normalize_selector_input",
    "validate_selector_input",
]
