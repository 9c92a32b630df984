"""Domain layer - pure exercises with no I/O or framework dependencies.

Contents:
    * :mod:`.selectors` - Immutable CSS selector builder
    * :mod:`.shapes` - Rectangle with computed area
    * :mod:`.serialization` - JSON serialize/deserialize pair
    * :mod:`.dates` - Date parsing, leap years, timespans, clock angles
    * :mod:`.enums` - Fragment kinds, combinators, output options
    * :mod:`.errors` - Selector violation types
"""

from __future__ import annotations

from .dates import (
    INVALID_TIMESTAMP,
    clock_angle,
    format_timespan,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
)
from .enums import AngleUnit, Combinator, DateFormat, FragmentKind, OutputFormat
from .errors import DuplicateViolation, OrderViolation, SelectorError
from .selectors import (
    CombinedSelector,
    CompoundSelector,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from .serialization import deserialize, serialize
from .shapes import Rectangle, make_rectangle

__all__ = [
    # Selectors
    "CombinedSelector",
    "CompoundSelector",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    # Shapes
    "Rectangle",
    "make_rectangle",
    # Serialization
    "deserialize",
    "serialize",
    # Dates
    "INVALID_TIMESTAMP",
    "clock_angle",
    "format_timespan",
    "is_leap_year",
    "parse_iso8601",
    "parse_rfc2822",
    # Enums
    "AngleUnit",
    "Combinator",
    "DateFormat",
    "FragmentKind",
    "OutputFormat",
    # Errors
    "DuplicateViolation",
    "OrderViolation",
    "SelectorError",
]
