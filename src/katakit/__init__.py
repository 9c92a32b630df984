"""Public package surface exposing the exercises, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: selector builder, rectangle, JSON pair, date helpers
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    INVALID_TIMESTAMP,
    CombinedSelector,
    CompoundSelector,
    DuplicateViolation,
    OrderViolation,
    Rectangle,
    SelectorBuilder,
    SelectorError,
    clock_angle,
    combine,
    css_selector_builder,
    deserialize,
    format_timespan,
    is_leap_year,
    make_rectangle,
    parse_iso8601,
    parse_rfc2822,
    serialize,
)

__all__ = [
    "INVALID_TIMESTAMP",
    "CombinedSelector",
    "CompoundSelector",
    "DuplicateViolation",
    "OrderViolation",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "clock_angle",
    "combine",
    "css_selector_builder",
    "deserialize",
    "format_timespan",
    "get_config",
    "is_leap_year",
    "make_rectangle",
    "parse_iso8601",
    "parse_rfc2822",
    "print_info",
    "serialize",
]
