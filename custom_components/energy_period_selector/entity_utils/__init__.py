"""
Home Assistant entity-specific utilities for Energy Period Selector.

This package contains the rendering side of the integration:
- Localized labels for dates, ranges and period kinds
- Attribute builders for the committed period and sync metadata

Everything here is derived from the committed PeriodState; nothing mutates it.
"""

from __future__ import annotations

from .attributes import build_debug_attributes, build_period_attributes
from .formatting import format_date, format_range_label, period_label

__all__ = [
    "build_debug_attributes",
    "build_period_attributes",
    "format_date",
    "format_range_label",
    "period_label",
]
